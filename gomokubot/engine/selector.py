"""Engine entry point: pick one legal cell for the side to move."""

from __future__ import annotations

import logging
import random
from typing import Optional

from gomokubot.errors import BoardFullError
from gomokubot.game.board import Board
from gomokubot.game.types import Point, Role

from .config import EngineConfig
from .search import root_search
from .urgent import urgent_move

logger = logging.getLogger(__name__)


def fallback_move(board: Board) -> Optional[Point]:
    """Empty cell closest to the centre, or None if the board is full."""
    center = board.center
    empties = board.empty_points()
    if not empties:
        return None
    return min(empties, key=lambda p: (p.row - center.row) ** 2 + (p.col - center.col) ** 2)


def choose_move(
    board: Board,
    ai_role: Role,
    config: Optional[EngineConfig] = None,
    rng: Optional[random.Random] = None,
) -> Point:
    """Choose a move for `ai_role`.

    Order of stages: opening centre, urgent win/block, alpha-beta search,
    then any empty cell. Raises BoardFullError when no empty cell exists.
    `board` is left exactly as it was passed in.
    """
    config = config or EngineConfig()
    rng = rng or random.Random()

    if board.is_full():
        raise BoardFullError("no empty cell left on the board")

    if board.is_blank():
        logger.debug("Empty board, opening at the centre")
        return board.center

    move = urgent_move(board, ai_role, config)
    if move is not None:
        return move

    move = root_search(board, ai_role, config).pick(rng)
    if move is not None:
        return move

    logger.warning("Search produced no move for %s, falling back to nearest empty cell", ai_role)
    move = fallback_move(board)
    if move is None:
        raise BoardFullError("no empty cell left on the board")
    return move
