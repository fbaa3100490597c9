"""Agent backed by the alpha-beta move-search engine."""

from __future__ import annotations

import logging
import random
from typing import Optional

from gomokubot.engine.config import EngineConfig
from gomokubot.engine.selector import choose_move
from gomokubot.errors import IllegalMoveError
from gomokubot.game.board import GomokuGameState, format_point
from gomokubot.game.types import Point

from .base import Agent

logger = logging.getLogger(__name__)


class MinimaxAgent(Agent):
    """Plays whichever side is to move, using urgent-move detection + minimax."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.rng = rng or random.Random()

    @property
    def depth(self) -> int:
        return self.config.depth

    @property
    def name(self) -> str:
        return f"MinimaxAgent(d={self.config.depth}, k={self.config.branch_limit})"

    def select_move(self, game_state: GomokuGameState) -> Point:
        if game_state.is_over:
            raise IllegalMoveError("Game is already over")
        role = game_state.current_player
        move = choose_move(game_state.board, role, self.config, self.rng)
        logger.info("%s plays %s for %s", self.name, format_point(move), role)
        return move
