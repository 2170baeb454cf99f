#!/usr/bin/env python3
"""
Virtual machine tests: execution, I/O channels, wrapping and bounds.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import numpy as np
import pytest

from bfvm import (
    Decrement,
    Increment,
    JumpIfNonZero,
    JumpIfZero,
    MachineConfig,
    MoveLeft,
    MoveRight,
    TapeBoundsError,
    compile_program,
    evaluate,
    new_tape,
    run,
)

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


class _BrokenWriter:
    def write(self, data):
        raise OSError("disk full")


def test_add_loop_on_two_cells():
    """[->+<] moves cell 0 into cell 1."""
    tape = [1, 2]
    program = (
        JumpIfZero(5),
        Decrement(),
        MoveRight(),
        Increment(),
        MoveLeft(),
        JumpIfNonZero(0),
    )
    run(program, tape, 0, io.BytesIO(b"\0"), io.BytesIO())
    assert tape == [0, 3]


def test_hello_world():
    out = io.BytesIO()
    evaluate(compile_program(HELLO_WORLD), io.BytesIO(b""), out)
    assert out.getvalue() == b"Hello World!\n"


def test_cat():
    data = b"Hello, World!\0"
    out = io.BytesIO()
    evaluate(compile_program(">,[>,]<[<]>[.>]"), io.BytesIO(data), out)
    assert out.getvalue() == data[:-1]


def test_input_exhaustion_yields_zero():
    tape = [7]
    run(compile_program(","), tape, 0, io.BytesIO(b""), io.BytesIO())
    assert tape == [0]


def test_wrapping_arithmetic():
    tape = new_tape(MachineConfig(tape_size=2, start_offset=0))
    run(compile_program("->+" + "+" * 256), tape, 0, io.BytesIO(), io.BytesIO())
    assert tape[0] == 255
    assert tape[1] == 1


def test_returns_final_data_pointer():
    tape = [0] * 8
    assert run(compile_program(">>><"), tape, 4, io.BytesIO(), io.BytesIO()) == 6


def test_skip_loop_when_zero():
    out = io.BytesIO()
    tape = [0, 0]
    run(compile_program("[.]+."), tape, 0, io.BytesIO(), out)
    assert out.getvalue() == b"\x01"


def test_move_left_out_of_bounds():
    tape = [0, 0]
    with pytest.raises(TapeBoundsError) as exc:
        run(compile_program("+<<"), tape, 1, io.BytesIO(), io.BytesIO())
    assert exc.value.data_pointer == -1
    assert exc.value.instruction_pointer == 2
    assert tape == [0, 1]


def test_move_right_out_of_bounds():
    with pytest.raises(TapeBoundsError) as exc:
        run(compile_program(">>"), [0, 0], 0, io.BytesIO(), io.BytesIO())
    assert exc.value.data_pointer == 2
    assert exc.value.tape_size == 2


def test_write_error_propagates_and_keeps_tape():
    tape = [0]
    with pytest.raises(OSError):
        run(compile_program("++.+"), tape, 0, io.BytesIO(), _BrokenWriter())
    assert tape == [2]


def test_default_tape():
    tape = evaluate(compile_program("+"), io.BytesIO(), io.BytesIO())
    assert tape.dtype == np.uint8
    assert len(tape) == 10_000
    assert tape[5_000] == 1
    assert int(tape.sum()) == 1


def test_negative_start_is_out_of_bounds():
    tape = [0, 0]
    with pytest.raises(TapeBoundsError) as exc:
        run(compile_program("+"), tape, -1, io.BytesIO(), io.BytesIO())
    assert exc.value.data_pointer == -1
    assert exc.value.instruction_pointer == 0
    assert tape == [0, 0]


def test_start_past_end_is_out_of_bounds():
    tape = [0, 0]
    with pytest.raises(TapeBoundsError) as exc:
        run(compile_program("+"), tape, 2, io.BytesIO(), io.BytesIO())
    assert exc.value.data_pointer == 2
    assert exc.value.tape_size == 2
    assert tape == [0, 0]
