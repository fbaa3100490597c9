"""Tunable constants for the move-search engine."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from gomokubot.errors import ConfigError
from gomokubot.game.board import WIN_LENGTH


@dataclass(frozen=True)
class ScoreTable:
    """Bucket values keyed by (run length, open ends) along one axis."""

    win: int = 200_000          # five or more
    open_four: int = 50_000     # 4, both ends open: unstoppable
    simple_four: int = 10_000   # 4, one end open
    open_three: int = 10_000    # 3, both ends open: as urgent as a simple four
    blocked_three: int = 1_000
    open_two: int = 1_000
    blocked_two: int = 100

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            if getattr(self, f.name) < 0:
                raise ConfigError(f"score '{f.name}' must be non-negative")

    def bucket(self, count: int, open_ends: int) -> int:
        """Value of a single axis. Exactly one bucket applies."""
        if count >= WIN_LENGTH:
            return self.win
        if count == 4:
            if open_ends == 2:
                return self.open_four
            if open_ends == 1:
                return self.simple_four
        elif count == 3:
            if open_ends == 2:
                return self.open_three
            if open_ends == 1:
                return self.blocked_three
        elif count == 2:
            if open_ends == 2:
                return self.open_two
            if open_ends == 1:
                return self.blocked_two
        return 0


@dataclass(frozen=True)
class EngineConfig:
    """Search depth, branching and every heuristic threshold the engine uses."""

    depth: int = 3
    branch_limit: int = 8
    # |evaluation| above this ends descent: the position is already decided
    decisive_threshold: int = 50_000
    scores: ScoreTable = field(default_factory=ScoreTable)
    # Move ordering: attack + defense * weight; weight escalates on live threats
    defense_weight: float = 1.5
    escalated_defense_weight: float = 2.5
    escalation_threshold: int = 10_000
    # Opponent cell score at which a block is played without searching
    urgency_threshold: int = 50_000

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ConfigError(f"depth must be >= 1, got {self.depth}")
        if self.branch_limit < 1:
            raise ConfigError(f"branch_limit must be >= 1, got {self.branch_limit}")
        if self.defense_weight < 0 or self.escalated_defense_weight < 0:
            raise ConfigError("defense weights must be non-negative")
        for name in ("decisive_threshold", "escalation_threshold", "urgency_threshold"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")

    def with_overrides(self, **changes) -> EngineConfig:
        """Return a copy with some fields replaced (validated again)."""
        try:
            return dataclasses.replace(self, **changes)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc


PRESETS: dict[str, EngineConfig] = {
    "easy": EngineConfig(depth=1, branch_limit=6),
    "normal": EngineConfig(depth=2, branch_limit=8),
    "hard": EngineConfig(depth=3, branch_limit=8),
}
