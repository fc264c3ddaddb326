#!/usr/bin/env python3
"""
Tests for the fetch-execute loop and bracket jump resolution.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfi import (
    TAPE_SIZE,
    Engine,
    MalformedProgramError,
    StepLimitExceeded,
    TapeState,
    check_brackets,
    find_matching,
    load_program,
)

HELLO_WORLD = ("++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
               ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.")


def run(source, **kwargs):
    return Engine(load_program(source), **kwargs).run()


def test_empty_program():
    engine = Engine(load_program("just a comment"))
    assert engine.run() == ""
    assert engine.steps == 0
    assert engine.finished


def test_simple_loop_outputs_64():
    assert run("++++++++[>++++++++<-]>.") == chr(64)


def test_loop_outputs_d():
    assert run("++++++++++[>++++++++++<-]>.") == "d"


def test_hello_world():
    assert run(HELLO_WORLD) == "Hello World!\n"


def test_clear_loop_on_zero_cell():
    engine = Engine(load_program("[-]"))
    assert engine.run() == ""
    assert engine.state.current == 0
    assert engine.pc == 3


def test_skips_nested_loops_when_zero():
    # outer loop is skipped as a whole, including the inner pair
    assert run("[[+]+[-]]+.") == chr(1)


def test_input_is_noop():
    engine = Engine(load_program(","))
    assert engine.run() == ""
    assert not engine.state.memory.any()
    assert engine.steps == 1


def test_pointer_wraps_left():
    engine = Engine(load_program("<+"))
    engine.run()
    assert engine.state.pointer == TAPE_SIZE - 1
    assert engine.state.memory[TAPE_SIZE - 1] == 1


def test_pointer_wraps_right():
    engine = Engine(load_program(">" * TAPE_SIZE))
    engine.run()
    assert engine.state.pointer == 0


def test_cell_wraps():
    assert run("-.") == chr(255)
    assert run("-+.") == chr(0)


def test_step_by_step():
    engine = Engine(load_program("+>+"))
    assert engine.step()
    assert engine.state.current == 1
    assert engine.step()
    assert engine.state.pointer == 1
    assert not engine.step()
    assert engine.finished
    assert not engine.step()
    assert engine.steps == 3


def test_shared_state():
    state = TapeState()
    Engine(load_program("+++"), state).run()
    Engine(load_program("++"), state).run()
    assert state.current == 5


def test_find_matching_nested():
    program = load_program("[[]]")
    assert find_matching(program, 0) == 3
    assert find_matching(program, 3) == 0
    assert find_matching(program, 1) == 2
    assert find_matching(program, 2) == 1


def test_find_matching_siblings():
    program = load_program("[[][]]")
    assert find_matching(program, 0) == 5
    assert find_matching(program, 5) == 0
    assert find_matching(program, 3) == 4


def test_find_matching_runs_off_the_end():
    with pytest.raises(MalformedProgramError) as exc:
        find_matching(load_program("+[+"), 1)
    assert exc.value.position == 1

    with pytest.raises(MalformedProgramError) as exc:
        find_matching(load_program("+]"), 1)
    assert exc.value.position == 1


def test_find_matching_rejects_non_bracket():
    with pytest.raises(ValueError):
        find_matching(load_program("+"), 0)


def test_unmatched_open_bracket():
    with pytest.raises(MalformedProgramError):
        run("[")


def test_unmatched_close_bracket():
    with pytest.raises(MalformedProgramError) as exc:
        run("]")
    assert exc.value.position == 0


def test_check_brackets_reports_first_offender():
    check_brackets(load_program("[[]][]"))

    with pytest.raises(MalformedProgramError) as exc:
        check_brackets(load_program("[]][["))
    assert exc.value.position == 2

    with pytest.raises(MalformedProgramError) as exc:
        check_brackets(load_program("[[]"))
    assert exc.value.position == 0


def test_step_limit():
    engine = Engine(load_program("+++.[]"), max_steps=100)
    with pytest.raises(StepLimitExceeded) as exc:
        engine.run()
    assert exc.value.steps == 100
    assert exc.value.output == chr(3)


def test_step_limit_not_hit_by_exact_budget():
    engine = Engine(load_program("+++"), max_steps=3)
    assert engine.run() == ""
    assert engine.steps == 3
