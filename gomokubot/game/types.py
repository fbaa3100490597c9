from __future__ import annotations

import enum
from typing import NamedTuple


class Role(enum.Enum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> Role:
        assert self is not Role.EMPTY, "EMPTY has no opponent"
        return Role.WHITE if self is Role.BLACK else Role.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()


class Point(NamedTuple):
    row: int  # 0-indexed, 0 = top
    col: int  # 0-indexed, 0 = left
