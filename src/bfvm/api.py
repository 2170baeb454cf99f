from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .compiler import compile_program
from .config import DEFAULT_TAPE_SIZE, MachineConfig
from .instructions import Program
from .vm import new_tape, run


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    start_offset: Optional[int] = None

    def machine_config(self) -> MachineConfig:
        return MachineConfig(tape_size=self.tape_size, start_offset=self.start_offset)


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape: np.ndarray
    data_pointer: int


def compile_string(source: str) -> Program:
    return compile_program(source)


def compile_file(path: str | Path, *, encoding: str = "utf-8") -> Program:
    p = Path(path)
    return compile_string(p.read_text(encoding=encoding))


def run_string(source: str, input_data: bytes = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    config = (options or RunOptions()).machine_config()
    program = compile_program(source)
    tape = new_tape(config)
    out = io.BytesIO()
    dp = run(program, tape, config.data_pointer, io.BytesIO(input_data), out)
    return RunResult(output=out.getvalue(), tape=tape, data_pointer=dp)


def run_file(
    path: str | Path,
    input_data: bytes = b"",
    *,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), input_data, options=options)
