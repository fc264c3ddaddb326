import numpy as np
from numba import njit

from .loader import Instruction, Program
from .state import CELL_MODULUS

OP_RIGHT = Instruction.MOVE_RIGHT.opcode
OP_LEFT = Instruction.MOVE_LEFT.opcode
OP_INC = Instruction.INCREMENT.opcode
OP_DEC = Instruction.DECREMENT.opcode
OP_OUT = Instruction.OUTPUT.opcode
OP_OPEN = Instruction.JUMP_IF_ZERO.opcode
OP_CLOSE = Instruction.JUMP_IF_NONZERO.opcode

# stop reasons
STOP_OUTPUT = 1
STOP_END = 2
STOP_LIMIT = 3
STOP_MALFORMED = 4


def to_opcodes(program: Program) -> np.ndarray:
    return np.array([ins.opcode for ins in program], dtype=np.int32)


@njit(cache=True)
def run_compiled(program_arr, memory, pc, pointer, max_steps):
    """
    Compiled fetch-execute loop over an opcode array and a uint8 tape.

    Runs until the program ends, an output instruction is reached (pc is left
    on it so the caller can emit the character), ``max_steps`` instructions
    have executed (negative means no budget), or a bracket scan runs off the
    program.

    Returns (pc, pointer, stop_reason, steps, bad_pc).
    """
    mem_len = len(memory)
    prog_len = len(program_arr)
    steps = 0

    while pc < prog_len:
        if max_steps >= 0 and steps >= max_steps:
            return pc, pointer, STOP_LIMIT, steps, -1

        command = program_arr[pc]

        if command == OP_RIGHT:
            pointer = (pointer + 1) % mem_len
        elif command == OP_LEFT:
            pointer = (pointer - 1 + mem_len) % mem_len
        elif command == OP_INC:
            memory[pointer] = (int(memory[pointer]) + 1) % CELL_MODULUS
        elif command == OP_DEC:
            memory[pointer] = (int(memory[pointer]) - 1 + CELL_MODULUS) % CELL_MODULUS
        elif command == OP_OUT:
            return pc, pointer, STOP_OUTPUT, steps, -1
        elif command == OP_OPEN:
            if memory[pointer] == 0:
                depth = 0
                scan = pc + 1
                while True:
                    if scan >= prog_len:
                        return pc, pointer, STOP_MALFORMED, steps, pc
                    op = program_arr[scan]
                    if op == OP_OPEN:
                        depth += 1
                    elif op == OP_CLOSE:
                        if depth == 0:
                            break
                        depth -= 1
                    scan += 1
                pc = scan
        elif command == OP_CLOSE:
            if memory[pointer] != 0:
                depth = 0
                scan = pc - 1
                while True:
                    if scan < 0:
                        return pc, pointer, STOP_MALFORMED, steps, pc
                    op = program_arr[scan]
                    if op == OP_CLOSE:
                        depth += 1
                    elif op == OP_OPEN:
                        if depth == 0:
                            break
                        depth -= 1
                    scan -= 1
                pc = scan
        # input is a no-op

        pc += 1
        steps += 1

    return pc, pointer, STOP_END, steps, -1
