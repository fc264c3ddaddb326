from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Instruction(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    JUMP_IF_ZERO = '['
    JUMP_IF_NONZERO = ']'

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def opcode(self) -> int:
        return ord(self.value)


_BY_SYMBOL = {ins.value: ins for ins in Instruction}


def is_code_char(ch: str) -> bool:
    return ch in _BY_SYMBOL


@dataclass(frozen=True)
class Program:
    """Filtered instruction sequence.

    ``offsets[i]`` is where instruction ``i`` sits in ``source``; both are
    only used for error reporting.
    """
    instructions: Tuple[Instruction, ...] = ()
    offsets: Tuple[int, ...] = ()
    source: str = ""

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def offset_of(self, index: int):
        if index < len(self.offsets):
            return self.offsets[index]
        return None

    def to_source(self) -> str:
        return ''.join(ins.value for ins in self.instructions)


def load_program(source: str) -> Program:
    # Filter the source code
    kept = [(pos, _BY_SYMBOL[ch]) for pos, ch in enumerate(source) if is_code_char(ch)]
    return Program(
        instructions=tuple(ins for _, ins in kept),
        offsets=tuple(pos for pos, _ in kept),
        source=source,
    )
