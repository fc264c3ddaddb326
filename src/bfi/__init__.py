from .loader import Instruction, Program, is_code_char, load_program
from .state import CELL_MODULUS, TAPE_SIZE, TapeState
from .engine import Engine, check_brackets, find_matching
from .errors import BFIError, MalformedProgramError, ProgramIOError, StepLimitExceeded
from .api import RunOptions, RunResult, run_file, run_string

__all__ = [
    'Instruction',
    'Program',
    'is_code_char',
    'load_program',
    'CELL_MODULUS',
    'TAPE_SIZE',
    'TapeState',
    'Engine',
    'check_brackets',
    'find_matching',
    'BFIError',
    'MalformedProgramError',
    'ProgramIOError',
    'StepLimitExceeded',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
