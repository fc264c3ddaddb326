from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

TAPE_SIZE = 0xFFFF
CELL_MODULUS = 256

_WINDOW = 10


def _new_tape() -> np.ndarray:
    return np.zeros(TAPE_SIZE, dtype=np.uint8)


@dataclass
class TapeState:
    memory: np.ndarray = field(default_factory=_new_tape)
    pointer: int = 0

    def reset(self) -> None:
        self.memory[:] = 0
        self.pointer = 0

    @property
    def current(self) -> int:
        return int(self.memory[self.pointer])

    def move_right(self) -> None:
        self.pointer = (self.pointer + 1) % TAPE_SIZE

    def move_left(self) -> None:
        self.pointer = (self.pointer - 1 + TAPE_SIZE) % TAPE_SIZE

    def increment(self) -> None:
        # Widen before the arithmetic so numpy never wraps the uint8 itself
        self.memory[self.pointer] = (int(self.memory[self.pointer]) + 1) % CELL_MODULUS

    def decrement(self) -> None:
        self.memory[self.pointer] = (int(self.memory[self.pointer]) - 1 + CELL_MODULUS) % CELL_MODULUS

    def window_start(self) -> int:
        if self.pointer < _WINDOW // 2:
            return 0
        if self.pointer > TAPE_SIZE - _WINDOW:
            return TAPE_SIZE - _WINDOW
        return self.pointer - _WINDOW // 2

    def render(self) -> str:
        """Draw the ten cells around the pointer, addresses on top, caret below."""
        start = self.window_start()
        cells = range(start, start + _WINDOW)
        rule = "-" * (10 * _WINDOW) + "-"
        blank = "|         " * _WINDOW + "|"
        return "\n".join([
            rule,
            "|" + "".join(f"   {i:>5}  " for i in cells) + "|",
            rule,
            blank,
            "".join(f"|   {int(self.memory[i]):>3}   " for i in cells) + "|",
            blank,
            rule,
            "          " * (self.pointer - start) + "   ^^^^",
        ])
