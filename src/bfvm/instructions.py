from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

INSTRUCTION_CHARS = "><+-.,[]"


# ---------------- Instructions ----------------
@dataclass(frozen=True)
class MoveRight:
    pass


@dataclass(frozen=True)
class MoveLeft:
    pass


@dataclass(frozen=True)
class Increment:
    pass


@dataclass(frozen=True)
class Decrement:
    pass


@dataclass(frozen=True)
class Output:
    pass


@dataclass(frozen=True)
class Input:
    pass


@dataclass(frozen=True)
class JumpIfZero:
    target: int  # index of the matching JumpIfNonZero


@dataclass(frozen=True)
class JumpIfNonZero:
    target: int  # index of the matching JumpIfZero


Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Output, Input, JumpIfZero, JumpIfNonZero]
Program = Tuple[Instruction, ...]

_SYMBOLS = {
    MoveRight: ">",
    MoveLeft: "<",
    Increment: "+",
    Decrement: "-",
    Output: ".",
    Input: ",",
    JumpIfZero: "[",
    JumpIfNonZero: "]",
}


def filter_source(text: str) -> str:
    """Drop every character that is not one of the eight instructions."""
    return "".join(ch for ch in text if ch in INSTRUCTION_CHARS)


# ---------------- Emit ----------------
def emit(program: Program) -> str:
    return "".join(_SYMBOLS[type(ins)] for ins in program)


def format_listing(program: Program) -> str:
    """
    Numbered disassembly, one instruction per line.

    Jumps show their resolved target, e.g. ``   0  [  JumpIfZero -> 5``.
    """
    width = max(4, len(str(len(program))))
    out = []
    for i, ins in enumerate(program):
        line = f"{i:{width}d}  {_SYMBOLS[type(ins)]}  {type(ins).__name__}"
        if isinstance(ins, (JumpIfZero, JumpIfNonZero)):
            line += f" -> {ins.target}"
        out.append(line)
    return "\n".join(out)
