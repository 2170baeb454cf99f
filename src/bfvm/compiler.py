from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import make_unmatched_bracket
from .instructions import (
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
    filter_source,
)

logger = logging.getLogger(__name__)

_SIMPLE = {
    ">": MoveRight(),
    "<": MoveLeft(),
    "+": Increment(),
    "-": Decrement(),
    ".": Output(),
    ",": Input(),
}


def compile_program(source: str) -> Program:
    """
    Compile source text into a flat instruction tuple.

    Steps:
    1. Filter: keep only the eight instruction characters
    2. Emit: one instruction per token; brackets get a placeholder jump
       targeting their own position
    3. Swap: exchange the two jumps of every matched pair, so each end
       holds the other end's position and the right jump kind

    Raises:
        UnmatchedBracket: position is the index among filtered tokens
    """
    tokens = filter_source(source)

    open_stack: List[int] = []
    pairs: List[Tuple[int, int]] = []
    instructions: List[Instruction] = []

    for i, ch in enumerate(tokens):
        if ch == "[":
            open_stack.append(i)
            instructions.append(JumpIfNonZero(i))
        elif ch == "]":
            if not open_stack:
                raise make_unmatched_bracket(tokens=tokens, position=i)
            pairs.append((open_stack.pop(), i))
            instructions.append(JumpIfZero(i))
        else:
            instructions.append(_SIMPLE[ch])

    if open_stack:
        # earliest bracket still open
        raise make_unmatched_bracket(tokens=tokens, position=open_stack[0])

    for a, b in pairs:
        instructions[a], instructions[b] = instructions[b], instructions[a]

    logger.debug(
        "compiled %d source chars into %d instructions (%d loops)",
        len(source), len(instructions), len(pairs),
    )
    return tuple(instructions)
