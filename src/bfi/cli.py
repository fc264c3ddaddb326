import argparse
import os
import sys
from typing import List, Optional

from .api import RunOptions, run_file
from .errors import BFIError

MAX_STEPS_ENV = "BFI_MAX_STEPS"


def _default_max_steps() -> Optional[int]:
    raw = os.environ.get(MAX_STEPS_ENV, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        print(f"Ignoring {MAX_STEPS_ENV}={raw!r}: not an integer", file=sys.stderr)
        return None
    return value if value > 0 else None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfi", description="Run a Brainfuck program on a 65535-cell circular tape.")
    ap.add_argument("path", nargs="?", help="source file to run")
    ap.add_argument("--max-steps", type=int, default=None,
                    help=f"abort after this many instructions (default: ${MAX_STEPS_ENV} or unlimited)")
    ap.add_argument("--compiled", action="store_true", help="run the numba-compiled loop")
    ap.add_argument("--dump", action="store_true", help="print the cells around the pointer after the run")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.path is None:
        print("Usage: bfi <path>")
        return 0

    max_steps = args.max_steps if args.max_steps is not None else _default_max_steps()
    options = RunOptions(max_steps=max_steps, compiled=args.compiled)

    try:
        result = run_file(args.path, options=options)
    except BFIError as e:
        print(e, file=sys.stderr)
        return 1

    print(result.output)
    print(f"Finished execution in {result.elapsed_ms}ms")
    if args.dump:
        print(result.state.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
