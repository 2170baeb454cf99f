from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_TAPE_SIZE = 10_000


@dataclass(frozen=True)
class MachineConfig:
    tape_size: int = DEFAULT_TAPE_SIZE
    start_offset: Optional[int] = None  # None -> midpoint of the tape

    def __post_init__(self) -> None:
        if self.tape_size <= 0:
            raise ValueError(f"Tape size must be positive: {self.tape_size}")
        if self.start_offset is not None and not 0 <= self.start_offset < self.tape_size:
            raise ValueError(
                f"Start offset out of range: {self.start_offset} (tape_size={self.tape_size})"
            )

    @property
    def data_pointer(self) -> int:
        if self.start_offset is None:
            return self.tape_size // 2
        return self.start_offset
