from .compiler import compile_program
from .config import DEFAULT_TAPE_SIZE, MachineConfig
from .errors import BFVMError, TapeBoundsError, UnmatchedBracket
from .instructions import (
    INSTRUCTION_CHARS,
    Decrement,
    Increment,
    Input,
    Instruction,
    JumpIfNonZero,
    JumpIfZero,
    MoveLeft,
    MoveRight,
    Output,
    Program,
    emit,
    filter_source,
    format_listing,
)
from .vm import evaluate, new_tape, run
from .api import RunOptions, RunResult, compile_file, compile_string, run_file, run_string

__all__ = [
    'compile_program',
    'run',
    'evaluate',
    'new_tape',
    'MachineConfig',
    'DEFAULT_TAPE_SIZE',
    'BFVMError',
    'UnmatchedBracket',
    'TapeBoundsError',
    'INSTRUCTION_CHARS',
    'Instruction',
    'Program',
    'MoveRight',
    'MoveLeft',
    'Increment',
    'Decrement',
    'Output',
    'Input',
    'JumpIfZero',
    'JumpIfNonZero',
    'emit',
    'filter_source',
    'format_listing',
    'RunOptions',
    'RunResult',
    'compile_string',
    'compile_file',
    'run_string',
    'run_file',
]
