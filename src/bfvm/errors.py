from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _build_context(tokens: str, position: int, *, context: int = 8) -> str:
    start = max(0, position - context)
    end = min(len(tokens), position + context + 1)
    excerpt = tokens[start:end]
    caret = ' ' * (position - start) + '^'
    return f"{start:6d} | {excerpt}\n       | {caret}"


def _hint_for(token: str) -> Optional[str]:
    if token == '[':
        return 'This "[" is never closed. Add a matching "]" after the loop body.'
    if token == ']':
        return 'This "]" has no opening "[" before it. Remove it or add a "[".'
    return None


@dataclass
class BFVMError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnmatchedBracket(BFVMError):
    position: int
    context: str
    hint: Optional[str] = None


@dataclass
class TapeBoundsError(BFVMError):
    data_pointer: int
    tape_size: int
    instruction_pointer: int


def make_unmatched_bracket(*, tokens: str, position: int) -> UnmatchedBracket:
    # position counts filtered tokens only, never raw source characters
    return UnmatchedBracket(
        message=f"The program is incorrect. Unmatched bracket at index {position}",
        position=position,
        context=_build_context(tokens, position),
        hint=_hint_for(tokens[position]),
    )


def make_tape_bounds_error(*, data_pointer: int, tape_size: int, instruction_pointer: int) -> TapeBoundsError:
    return TapeBoundsError(
        message=(
            f"RuntimeError: data pointer moved to {data_pointer}, outside the tape "
            f"[0, {tape_size}) (instruction {instruction_pointer})"
        ),
        data_pointer=data_pointer,
        tape_size=tape_size,
        instruction_pointer=instruction_pointer,
    )
