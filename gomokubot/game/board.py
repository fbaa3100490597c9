from __future__ import annotations

import contextlib
import string
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from gomokubot.errors import ConfigError, IllegalMoveError

from .types import Point, Role

BOARD_SIZE = 15
WIN_LENGTH = 5

# Column labels: A, B, C, ... (no letters skipped)
COL_LABELS = string.ascii_uppercase

# Four line axes: horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]

# Text fixture symbols for Board.from_rows / Board.__str__
_SYMBOLS = {Role.EMPTY: ".", Role.BLACK: "X", Role.WHITE: "O"}
_ROLES_BY_SYMBOL = {v: k for k, v in _SYMBOLS.items()}


def parse_coordinate(text: str, size: int = BOARD_SIZE) -> Optional[Point]:
    """Parse a coordinate string like 'E5' or 'H12' into a Point.

    Column is a letter, row is a 1-based number counted from the top.
    Returns None if the string is invalid or off the board.
    """
    text = text.strip().upper()
    if len(text) < 2 or len(text) > 3:
        return None
    col_char = text[0]
    row_str = text[1:]
    if col_char not in COL_LABELS[:size]:
        return None
    try:
        row = int(row_str)
    except ValueError:
        return None
    if not (1 <= row <= size):
        return None
    return Point(row - 1, COL_LABELS.index(col_char))


def format_point(point: Point) -> str:
    """Format a Point as a coordinate string like 'E5'."""
    return f"{COL_LABELS[point.col]}{point.row + 1}"


@dataclass
class Move:
    point: Point
    role: Role
    elapsed: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.role}: {format_point(self.point)}"


class Board:
    """N x N grid of cell roles. Every mutation is a single-cell write."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise ConfigError(f"board size must be positive, got {size}")
        self.size = size
        self._grid: list[list[Role]] = [[Role.EMPTY] * size for _ in range(size)]
        self._occupied = 0

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a square board from text rows ('.' empty, 'X' black, 'O' white)."""
        board = cls(len(rows))
        for r, line in enumerate(rows):
            line = line.replace(" ", "")
            if len(line) != board.size:
                raise ConfigError(f"row {r} has {len(line)} cells, expected {board.size}")
            for c, ch in enumerate(line):
                if ch not in _ROLES_BY_SYMBOL:
                    raise ConfigError(f"unknown cell symbol {ch!r} at row {r}")
                role = _ROLES_BY_SYMBOL[ch]
                if role is not Role.EMPTY:
                    board.set(r, c, role)
        return board

    # -- collaborator interface ------------------------------------------------

    def get(self, row: int, col: int) -> Role:
        return self._grid[row][col]

    def set(self, row: int, col: int, role: Role) -> None:
        prev = self._grid[row][col]
        if prev is Role.EMPTY and role is not Role.EMPTY:
            self._occupied += 1
        elif prev is not Role.EMPTY and role is Role.EMPTY:
            self._occupied -= 1
        self._grid[row][col] = role

    # -- point helpers ---------------------------------------------------------

    def at(self, point: Point) -> Role:
        return self._grid[point.row][point.col]

    def place(self, point: Point, role: Role) -> None:
        assert role is not Role.EMPTY, "cannot place an EMPTY stone"
        assert self.is_empty(point), f"{format_point(point)} is occupied"
        self.set(point.row, point.col, role)

    def remove(self, point: Point) -> None:
        self.set(point.row, point.col, Role.EMPTY)

    @contextlib.contextmanager
    def speculative(self, point: Point, role: Role) -> Iterator[None]:
        """Place a stone for the duration of the block, then erase it."""
        self.place(point, role)
        try:
            yield
        finally:
            self.remove(point)

    def is_empty(self, point: Point) -> bool:
        return self._grid[point.row][point.col] is Role.EMPTY

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_on_grid(self, point: Point) -> bool:
        return self.in_bounds(point.row, point.col)

    @property
    def center(self) -> Point:
        return Point(self.size // 2, self.size // 2)

    @property
    def occupied_count(self) -> int:
        return self._occupied

    def is_blank(self) -> bool:
        return self._occupied == 0

    def is_full(self) -> bool:
        return self._occupied == self.size * self.size

    def points(self) -> Iterator[Point]:
        for r in range(self.size):
            for c in range(self.size):
                yield Point(r, c)

    def empty_points(self) -> list[Point]:
        return [p for p in self.points() if self.is_empty(p)]

    def has_neighbor(self, point: Point) -> bool:
        """True if any cell within Chebyshev distance 1 holds a stone."""
        grid = self._grid
        for r in range(max(point.row - 1, 0), min(point.row + 2, self.size)):
            for c in range(max(point.col - 1, 0), min(point.col + 2, self.size)):
                if (r, c) != point and grid[r][c] is not Role.EMPTY:
                    return True
        return False

    def line_through(
        self, point: Point, role: Role, direction: tuple[int, int]
    ) -> tuple[int, int]:
        """Measure the run of `role` stones through `point` along one axis.

        `point` itself is counted as holding `role` whatever it holds now.
        Returns (run_length, open_ends), where open_ends counts the in-bounds
        empty cells just past each end of the run (0, 1 or 2).
        """
        grid = self._grid
        size = self.size
        dr, dc = direction
        count = 1
        open_ends = 0
        for sign in (1, -1):
            r, c = point.row + sign * dr, point.col + sign * dc
            while 0 <= r < size and 0 <= c < size and grid[r][c] is role:
                count += 1
                r += sign * dr
                c += sign * dc
            if 0 <= r < size and 0 <= c < size and grid[r][c] is Role.EMPTY:
                open_ends += 1
        return count, open_ends

    def snapshot(self) -> tuple[tuple[Role, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    def __str__(self) -> str:
        return "\n".join("".join(_SYMBOLS[role] for role in row) for row in self._grid)


class GomokuGameState:
    """Full game state: board, side to move, move list and result."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.board = Board(size)
        self.current_player = Role.BLACK
        self.moves: list[Move] = []
        self._winner: Optional[Role] = None
        self._is_over = False

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def winner(self) -> Optional[Role]:
        return self._winner

    @property
    def is_draw(self) -> bool:
        return self._is_over and self._winner is None

    def legal_moves(self) -> list[Point]:
        if self._is_over:
            return []
        return self.board.empty_points()

    def apply_move(self, point: Point, elapsed: Optional[float] = None) -> None:
        """Place a stone for the current player and advance the turn."""
        if self._is_over:
            raise IllegalMoveError("Game is already over")
        if not self.board.is_on_grid(point):
            raise IllegalMoveError(f"Point {point} is off the grid")
        if not self.board.is_empty(point):
            raise IllegalMoveError(f"Point {format_point(point)} is occupied")

        role = self.current_player
        self.board.place(point, role)
        self.moves.append(Move(point=point, role=role, elapsed=elapsed))

        if self._check_win(point, role):
            self._winner = role
            self._is_over = True
        elif self.board.is_full():
            self._is_over = True

        self.current_player = role.opponent

    def undo_move(self) -> Optional[Move]:
        """Undo the last move. Returns the undone Move, or None if no moves."""
        if not self.moves:
            return None
        move = self.moves.pop()
        self.board.remove(move.point)
        self.current_player = move.role
        self._winner = None
        self._is_over = False
        return move

    def resign(self, role: Role) -> None:
        """End the game with `role` conceding to its opponent."""
        if self._is_over:
            raise IllegalMoveError("Game is already over")
        self._winner = role.opponent
        self._is_over = True

    def _check_win(self, point: Point, role: Role) -> bool:
        """Check if the stone at `point` completes WIN_LENGTH in a row."""
        return any(
            self.board.line_through(point, role, d)[0] >= WIN_LENGTH
            for d in DIRECTIONS
        )
