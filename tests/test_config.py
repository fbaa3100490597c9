import dataclasses

import pytest

from gomokubot.engine.config import PRESETS, EngineConfig, ScoreTable
from gomokubot.errors import ConfigError
from gomokubot.game.board import WIN_LENGTH


class TestScoreTable:
    def test_defaults(self):
        t = ScoreTable()
        assert t.win == 200_000
        assert t.open_four == 50_000
        assert t.simple_four == t.open_three == 10_000
        assert t.blocked_three == 1_000
        assert t.open_two == 1_000
        assert t.blocked_two == 100

    @pytest.mark.parametrize(
        "count,open_ends,expected",
        [
            (5, 0, 200_000),
            (7, 2, 200_000),
            (4, 2, 50_000),
            (4, 1, 10_000),
            (4, 0, 0),
            (3, 2, 10_000),
            (3, 1, 1_000),
            (3, 0, 0),
            (2, 2, 1_000),
            (2, 1, 100),
            (1, 2, 0),
        ],
    )
    def test_bucket(self, count, open_ends, expected):
        assert ScoreTable().bucket(count, open_ends) == expected

    def test_win_bucket_follows_board_rule(self):
        assert ScoreTable().bucket(WIN_LENGTH, 0) == 200_000
        assert ScoreTable().bucket(WIN_LENGTH - 1, 0) == 0

    def test_negative_score_rejected(self):
        with pytest.raises(ConfigError):
            ScoreTable(open_two=-1)


class TestEngineConfig:
    def test_defaults(self):
        c = EngineConfig()
        assert c.depth == 3
        assert c.branch_limit == 8
        assert c.decisive_threshold == 50_000
        assert c.urgency_threshold == c.scores.open_four

    @pytest.mark.parametrize(
        "changes",
        [
            {"depth": 0},
            {"branch_limit": 0},
            {"defense_weight": -1.0},
            {"decisive_threshold": 0},
            {"urgency_threshold": -5},
        ],
    )
    def test_invalid_values(self, changes):
        with pytest.raises(ConfigError):
            EngineConfig(**changes)

    def test_with_overrides(self):
        c = EngineConfig().with_overrides(depth=5, branch_limit=12)
        assert c.depth == 5
        assert c.branch_limit == 12
        assert c.decisive_threshold == 50_000

    def test_with_overrides_validates(self):
        with pytest.raises(ConfigError):
            EngineConfig().with_overrides(depth=-1)

    def test_with_overrides_unknown_field(self):
        with pytest.raises(ConfigError):
            EngineConfig().with_overrides(speed=3)

    def test_win_length_is_not_configurable(self):
        # Engine and referee share the board rule; no separate knob
        with pytest.raises(TypeError):
            EngineConfig(win_length=6)
        with pytest.raises(ConfigError):
            EngineConfig().with_overrides(win_length=6)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            EngineConfig().depth = 4

    def test_presets(self):
        assert set(PRESETS) == {"easy", "normal", "hard"}
        assert PRESETS["easy"].depth < PRESETS["hard"].depth
