from __future__ import annotations

import random
from typing import Optional

from gomokubot.errors import BoardFullError
from gomokubot.game.board import GomokuGameState
from gomokubot.game.types import Point

from .base import Agent


class RandomAgent(Agent):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def select_move(self, game_state: GomokuGameState) -> Point:
        moves = game_state.legal_moves()
        if not moves:
            raise BoardFullError("No legal moves available")
        return self.rng.choice(moves)
