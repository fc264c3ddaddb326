#!/usr/bin/env python3
"""
Tests for the tape: wraparound of cells and of the data pointer.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np

from bfi import CELL_MODULUS, TAPE_SIZE, TapeState


def test_tape_shape():
    state = TapeState()
    assert TAPE_SIZE == 65535
    assert CELL_MODULUS == 256
    assert state.memory.shape == (TAPE_SIZE,)
    assert state.memory.dtype == np.uint8
    assert not state.memory.any()
    assert state.pointer == 0


def test_increment_decrement_are_inverse():
    state = TapeState()
    for v in range(256):
        state.memory[0] = v
        state.increment()
        state.decrement()
        assert state.current == v


def test_cell_wraps_both_ways():
    state = TapeState()
    state.decrement()
    assert state.current == 255
    state.increment()
    assert state.current == 0

    state.memory[0] = 255
    state.increment()
    assert state.current == 0


def test_pointer_moves_are_inverse():
    state = TapeState()
    for p in (0, 1, 2, 1000, TAPE_SIZE - 2, TAPE_SIZE - 1):
        state.pointer = p
        state.move_right()
        state.move_left()
        assert state.pointer == p


def test_pointer_wraps_both_ways():
    state = TapeState()
    state.move_left()
    assert state.pointer == TAPE_SIZE - 1
    state.move_right()
    assert state.pointer == 0


def test_reset():
    state = TapeState()
    state.memory[10] = 42
    state.pointer = 10
    state.reset()
    assert state.pointer == 0
    assert not state.memory.any()


def test_render_window():
    state = TapeState()
    assert state.window_start() == 0
    state.pointer = 100
    assert state.window_start() == 95
    state.pointer = TAPE_SIZE - 1
    assert state.window_start() == TAPE_SIZE - 10

    state.pointer = 100
    state.memory[100] = 7
    lines = state.render().split("\n")
    assert len(lines) == 8
    assert "100" in lines[1]
    assert "|     7   " in lines[4]
    assert lines[7] == " " * 50 + "   ^^^^"
