from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _line_and_column(source: str, offset: int) -> Tuple[int, int]:
    before = source[:offset]
    line = before.count('\n') + 1
    column = offset - (before.rfind('\n') + 1) + 1
    return line, column


def _hint_for(symbol: str) -> Optional[str]:
    if symbol == '[':
        return 'Every "[" needs a "]" after it. Check for a missing "]" or an extra "[".'
    if symbol == ']':
        return 'Every "]" needs a "[" before it. Check for a missing "[" or an extra "]".'
    return None


@dataclass
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class MalformedProgramError(BFIError):
    position: int
    line: Optional[int] = None
    column: Optional[int] = None
    context: str = ""
    output: str = ""


@dataclass
class StepLimitExceeded(BFIError):
    steps: int
    output: str = ""


@dataclass
class ProgramIOError(BFIError):
    path: str


def make_malformed_error(*, symbol: str, position: int, source: str = "",
                         offset: Optional[int] = None, output: str = "") -> MalformedProgramError:
    """Build the unmatched-bracket error for instruction ``position``.

    When the source offset of the bracket is known the message carries the
    line, a short excerpt and a hint, the same way compile errors do.
    """
    hint = _hint_for(symbol)
    hint_block = f"\nHint: {hint}" if hint else ""
    if offset is None or not source:
        return MalformedProgramError(
            message=f"MalformedProgramError: unmatched '{symbol}' at instruction {position}{hint_block}",
            position=position,
            output=output,
        )

    line, column = _line_and_column(source, offset)
    ctx = _build_context(source.split('\n'), line)
    return MalformedProgramError(
        message=(f"MalformedProgramError: unmatched '{symbol}' at instruction {position} "
                 f"(line {line}, column {column})\n{ctx}{hint_block}"),
        position=position,
        line=line,
        column=column,
        context=ctx,
        output=output,
    )
