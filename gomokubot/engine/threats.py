"""Threat evaluation for single cells and whole positions."""

from __future__ import annotations

from gomokubot.game.board import DIRECTIONS, Board
from gomokubot.game.types import Point, Role

from .config import EngineConfig


def score_point(board: Board, point: Point, role: Role, config: EngineConfig) -> int:
    """Score `point` for `role` as if `role` held it.

    Each of the four axes contributes one bucket from the score table,
    chosen by run length and number of open ends. Axes are summed.
    """
    scores = config.scores
    total = 0
    for direction in DIRECTIONS:
        count, open_ends = board.line_through(point, role, direction)
        total += scores.bucket(count, open_ends)
    return total


def evaluate_board(board: Board, ai_role: Role, config: EngineConfig) -> int:
    """Signed position score: AI stone threats minus opponent stone threats."""
    opponent = ai_role.opponent
    score = 0
    for r in range(board.size):
        for c in range(board.size):
            role = board.get(r, c)
            if role is ai_role:
                score += score_point(board, Point(r, c), ai_role, config)
            elif role is opponent:
                score -= score_point(board, Point(r, c), opponent, config)
    return score


def is_winning_point(board: Board, point: Point, role: Role, config: EngineConfig) -> bool:
    """True if a `role` stone at `point` reaches the winning-line bucket."""
    return score_point(board, point, role, config) >= config.scores.win
