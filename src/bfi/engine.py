from __future__ import annotations

from typing import List, Optional

from .errors import MalformedProgramError, StepLimitExceeded, make_malformed_error
from .jit import STOP_END, STOP_LIMIT, STOP_OUTPUT, run_compiled, to_opcodes
from .loader import Instruction, Program
from .state import TapeState

_OPEN = Instruction.JUMP_IF_ZERO
_CLOSE = Instruction.JUMP_IF_NONZERO


def _malformed(program: Program, position: int, output: str = "") -> MalformedProgramError:
    return make_malformed_error(
        symbol=program[position].symbol,
        position=position,
        source=program.source,
        offset=program.offset_of(position),
        output=output,
    )


def check_brackets(program: Program) -> None:
    """Raise MalformedProgramError for the first bracket without a partner."""
    open_positions: List[int] = []
    for pos, ins in enumerate(program):
        if ins is _OPEN:
            open_positions.append(pos)
        elif ins is _CLOSE:
            if not open_positions:
                raise _malformed(program, pos)
            open_positions.pop()
    if open_positions:
        raise _malformed(program, open_positions[-1])


def find_matching(program: Program, pc: int) -> int:
    """
    Locate the bracket that pairs with the one at ``pc``.

    Scans away from ``pc`` (forwards for "[", backwards for "]") with a depth
    counter starting at 0. A bracket facing the same way as the starting one
    opens a nested pair and raises the depth; a bracket facing the other way
    either closes a nested pair or, at depth 0, is the match. Leaving the
    program on either end raises MalformedProgramError.
    """
    start = program[pc]
    if start is _OPEN:
        step, same, target = 1, _OPEN, _CLOSE
    elif start is _CLOSE:
        step, same, target = -1, _CLOSE, _OPEN
    else:
        raise ValueError(f"instruction {pc} is not a bracket: {start.symbol!r}")

    depth = 0
    scan = pc + step
    while 0 <= scan < len(program):
        ins = program[scan]
        if ins is same:
            depth += 1
        elif ins is target:
            if depth == 0:
                return scan
            depth -= 1
        scan += step
    raise _malformed(program, pc)


class Engine:
    """Fetch-execute loop for one program against one tape."""

    def __init__(self, program: Program, state: Optional[TapeState] = None, *,
                 max_steps: Optional[int] = None):
        check_brackets(program)
        self.program = program
        self.state = state if state is not None else TapeState()
        self.max_steps = max_steps
        self.pc = 0
        self.steps = 0
        self._output: List[str] = []

    @property
    def output(self) -> str:
        return ''.join(self._output)

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program)

    def _jump(self) -> int:
        try:
            return find_matching(self.program, self.pc)
        except MalformedProgramError as e:
            e.output = self.output
            raise

    def _limit_error(self) -> StepLimitExceeded:
        return StepLimitExceeded(
            message=f"StepLimitExceeded: stopped after {self.steps} steps at instruction {self.pc}",
            steps=self.steps,
            output=self.output,
        )

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has ended."""
        if self.finished:
            return False
        if self.max_steps is not None and self.steps >= self.max_steps:
            raise self._limit_error()

        ins = self.program[self.pc]
        state = self.state

        if ins is Instruction.MOVE_RIGHT:
            state.move_right()
        elif ins is Instruction.MOVE_LEFT:
            state.move_left()
        elif ins is Instruction.INCREMENT:
            state.increment()
        elif ins is Instruction.DECREMENT:
            state.decrement()
        elif ins is Instruction.OUTPUT:
            self._output.append(chr(state.current))
        elif ins is Instruction.JUMP_IF_ZERO:
            if state.current == 0:
                self.pc = self._jump()
        elif ins is Instruction.JUMP_IF_NONZERO:
            if state.current != 0:
                self.pc = self._jump()
        # Instruction.INPUT consumes nothing

        self.pc += 1
        self.steps += 1
        return not self.finished

    def run(self, *, compiled: bool = False) -> str:
        if compiled:
            self._run_compiled()
        else:
            while self.step():
                pass
        return self.output

    def _run_compiled(self) -> None:
        opcodes = to_opcodes(self.program)
        state = self.state
        while not self.finished:
            budget = -1 if self.max_steps is None else max(0, self.max_steps - self.steps)
            pc, pointer, stop_reason, steps, bad_pc = run_compiled(
                opcodes, state.memory, self.pc, state.pointer, budget
            )
            self.pc = int(pc)
            state.pointer = int(pointer)
            self.steps += int(steps)

            if stop_reason == STOP_OUTPUT:
                self._output.append(chr(state.current))
                self.pc += 1
                self.steps += 1
            elif stop_reason == STOP_END:
                return
            elif stop_reason == STOP_LIMIT:
                raise self._limit_error()
            else:
                raise _malformed(self.program, int(bad_pc), self.output)
