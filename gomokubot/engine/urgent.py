"""Immediate win / forced block detection."""

from __future__ import annotations

import logging
from typing import Optional

from gomokubot.game.board import Board
from gomokubot.game.types import Point, Role

from .candidates import neighbor_points
from .config import EngineConfig
from .threats import is_winning_point, score_point

logger = logging.getLogger(__name__)


def urgent_move(board: Board, ai_role: Role, config: EngineConfig) -> Optional[Point]:
    """Return a move that must be played without search, or None.

    One pass over the neighbor cells:
      * a cell that wins for `ai_role` is returned at once;
      * the first cell where the opponent would win is kept as the forced block
        and returned after the pass, so a win later in the scan still comes first;
      * otherwise the cell with the highest opponent score is remembered and
        returned if that score reaches `config.urgency_threshold`
        (the opponent could make an open four there).
    """
    opponent = ai_role.opponent
    win_score = config.scores.win
    block: Optional[Point] = None
    best_threat: Optional[Point] = None
    best_threat_score = 0

    for point in neighbor_points(board):
        if is_winning_point(board, point, ai_role, config):
            logger.debug("Winning move at %s", point)
            return point
        if block is not None:
            continue
        threat = score_point(board, point, opponent, config)
        if threat >= win_score:
            block = point
        elif threat > best_threat_score:
            best_threat_score = threat
            best_threat = point

    if block is not None:
        logger.debug("Blocking opponent five at %s", block)
        return block
    if best_threat is not None and best_threat_score >= config.urgency_threshold:
        logger.debug("Blocking opponent threat %d at %s", best_threat_score, best_threat)
        return best_threat
    return None
