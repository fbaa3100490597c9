"""Candidate generation and move ordering."""

from __future__ import annotations

from typing import NamedTuple

from gomokubot.game.board import Board
from gomokubot.game.types import Point, Role

from .config import EngineConfig
from .threats import score_point


class Candidate(NamedTuple):
    point: Point
    score: float


def neighbor_points(board: Board) -> list[Point]:
    """Empty cells with at least one stone within Chebyshev distance 1.

    Isolated empty cells are never considered, at any depth.
    """
    return [p for p in board.points() if board.is_empty(p) and board.has_neighbor(p)]


def ordering_score(board: Board, point: Point, role: Role, config: EngineConfig) -> float:
    """Attack value for `role` plus weighted value of blocking the opponent."""
    attack = score_point(board, point, role, config)
    defense = score_point(board, point, role.opponent, config)
    if defense >= config.escalation_threshold:
        weight = config.escalated_defense_weight
    else:
        weight = config.defense_weight
    return attack + defense * weight


def ordered_candidates(board: Board, role: Role, config: EngineConfig) -> list[Candidate]:
    """All neighbor cells sorted by ordering score, best first.

    Callers truncate to `config.branch_limit`.
    """
    candidates = [
        Candidate(p, ordering_score(board, p, role, config)) for p in neighbor_points(board)
    ]
    candidates.sort(key=lambda cand: cand.score, reverse=True)
    return candidates
