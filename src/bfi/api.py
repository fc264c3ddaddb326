from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .engine import Engine
from .errors import ProgramIOError
from .loader import load_program
from .state import TapeState


@dataclass(frozen=True)
class RunOptions:
    max_steps: Optional[int] = None
    compiled: bool = False


@dataclass(frozen=True)
class RunResult:
    output: str
    elapsed_ms: int
    steps: int
    state: TapeState


def run_string(source: str, *, options: Optional[RunOptions] = None) -> RunResult:
    opts = RunOptions() if options is None else options
    engine = Engine(load_program(source), max_steps=opts.max_steps)

    start = time.time()
    output = engine.run(compiled=opts.compiled)
    end = time.time()

    return RunResult(
        output=output,
        elapsed_ms=int((end - start) * 1000),
        steps=engine.steps,
        state=engine.state,
    )


def run_file(path: str | Path, *, options: Optional[RunOptions] = None, encoding: str = "utf-8") -> RunResult:
    p = Path(path)
    try:
        source = p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ProgramIOError(message=f"Couldn't read file: {p} ({e})", path=str(p)) from e
    return run_string(source, options=options)
