"""Depth-limited minimax with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
import random
from typing import NamedTuple, Optional

from gomokubot.game.board import Board
from gomokubot.game.types import Point, Role

from .candidates import ordered_candidates
from .config import EngineConfig
from .threats import evaluate_board

logger = logging.getLogger(__name__)

INF = math.inf


class SearchResult(NamedTuple):
    score: float
    best_moves: list[Point]

    def pick(self, rng: random.Random) -> Optional[Point]:
        """Uniform random choice among the tied best moves."""
        if not self.best_moves:
            return None
        return rng.choice(self.best_moves)


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    ai_role: Role,
    config: EngineConfig,
    prune: bool = True,
) -> float:
    """Minimax value of `board` from `ai_role`'s point of view.

    `maximizing` is True when `ai_role` is to move. Every speculative stone
    is erased before returning, so `board` is unchanged on exit.
    With `prune=False` all siblings are searched; the result is the same.
    """
    board_score = evaluate_board(board, ai_role, config)
    if depth == 0 or abs(board_score) > config.decisive_threshold:
        return board_score

    role = ai_role if maximizing else ai_role.opponent
    candidates = ordered_candidates(board, role, config)[: config.branch_limit]
    if not candidates:
        return board_score

    best = -INF if maximizing else INF
    for point, _ in candidates:
        with board.speculative(point, role):
            value = minimax(
                board, depth - 1, alpha, beta, not maximizing, ai_role, config, prune
            )
        if maximizing:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if prune and beta <= alpha:
            break
    return best


def root_search(
    board: Board, ai_role: Role, config: EngineConfig, prune: bool = True
) -> SearchResult:
    """Score each root candidate with a full window and collect the ties.

    Returns an empty move list when there is nothing to search.
    """
    candidates = ordered_candidates(board, ai_role, config)[: config.branch_limit]
    best_score = -INF
    best_moves: list[Point] = []

    for point, _ in candidates:
        with board.speculative(point, ai_role):
            score = minimax(
                board, config.depth - 1, -INF, INF, False, ai_role, config, prune
            )
        if score > best_score:
            best_score = score
            best_moves = [point]
        elif score == best_score:
            best_moves.append(point)

    logger.debug(
        "Root search: %d candidates, best score %s, %d tied",
        len(candidates), best_score, len(best_moves),
    )
    return SearchResult(best_score, best_moves)
