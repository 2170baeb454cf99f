from __future__ import annotations

import logging
from typing import BinaryIO, MutableSequence, Optional

import numpy as np

from .config import MachineConfig
from .errors import make_tape_bounds_error
from .instructions import (
    Decrement,
    Increment,
    Input,
    JumpIfNonZero,
    JumpIfZero,
    MoveLeft,
    MoveRight,
    Output,
    Program,
)

logger = logging.getLogger(__name__)


def new_tape(config: Optional[MachineConfig] = None) -> np.ndarray:
    config = config or MachineConfig()
    return np.zeros(config.tape_size, dtype=np.uint8)


def run(
    program: Program,
    tape: MutableSequence[int],
    data_pointer: int,
    reader: BinaryIO,
    writer: BinaryIO,
) -> int:
    """
    Execute program against tape, starting at data_pointer.

    The tape is mutated in place and the final data pointer is returned.
    Reading past the end of input stores 0. Errors raised by the streams
    propagate unchanged, leaving the tape as it was at that point.

    Raises:
        TapeBoundsError: the data pointer started or moved outside [0, len(tape))
        OSError: from reader/writer
    """
    tape_size = len(tape)
    prog_len = len(program)
    pc = 0
    steps = 0

    if not 0 <= data_pointer < tape_size:
        raise make_tape_bounds_error(
            data_pointer=data_pointer, tape_size=tape_size, instruction_pointer=0
        )

    logger.debug("run start: %d instructions, tape %d cells, dp=%d", prog_len, tape_size, data_pointer)

    while pc < prog_len:
        ins = program[pc]
        kind = type(ins)

        if kind is MoveRight:
            data_pointer += 1
            if data_pointer >= tape_size:
                raise make_tape_bounds_error(
                    data_pointer=data_pointer, tape_size=tape_size, instruction_pointer=pc
                )
        elif kind is MoveLeft:
            data_pointer -= 1
            if data_pointer < 0:
                raise make_tape_bounds_error(
                    data_pointer=data_pointer, tape_size=tape_size, instruction_pointer=pc
                )
        elif kind is Increment:
            tape[data_pointer] = (int(tape[data_pointer]) + 1) & 0xFF
        elif kind is Decrement:
            tape[data_pointer] = (int(tape[data_pointer]) - 1) & 0xFF
        elif kind is Output:
            writer.write(bytes((int(tape[data_pointer]),)))
        elif kind is Input:
            data = reader.read(1)
            tape[data_pointer] = data[0] if data else 0
        elif kind is JumpIfZero:
            if tape[data_pointer] == 0:
                pc = ins.target
        elif kind is JumpIfNonZero:
            if tape[data_pointer] != 0:
                pc = ins.target

        pc += 1
        steps += 1

    logger.debug("run finished after %d steps, dp=%d", steps, data_pointer)
    return data_pointer


def evaluate(
    program: Program,
    reader: BinaryIO,
    writer: BinaryIO,
    config: Optional[MachineConfig] = None,
) -> np.ndarray:
    """Run on a fresh zeroed tape with the pointer at the configured start."""
    config = config or MachineConfig()
    tape = new_tape(config)
    run(program, tape, config.data_pointer, reader, writer)
    return tape
