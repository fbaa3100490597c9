"""Tests for immediate win / forced block detection."""

from gomokubot.engine.config import EngineConfig
from gomokubot.engine.urgent import urgent_move
from gomokubot.game.board import Board
from gomokubot.game.types import Point, Role

CONFIG = EngineConfig()


def make_board(black=(), white=(), size=15) -> Board:
    board = Board(size)
    for r, c in black:
        board.set(r, c, Role.BLACK)
    for r, c in white:
        board.set(r, c, Role.WHITE)
    return board


class TestUrgentMove:
    def test_completes_own_four(self):
        board = make_board(
            black=[(10, 1), (11, 2), (12, 3)],
            white=[(3, 3), (3, 4), (3, 5), (3, 6)],
        )
        assert urgent_move(board, Role.WHITE, CONFIG) in (Point(3, 2), Point(3, 7))

    def test_blocks_opponent_open_four(self):
        board = make_board(
            black=[(7, 5), (7, 6), (7, 7), (7, 8)],
            white=[(8, 6), (6, 7), (9, 9)],
        )
        assert urgent_move(board, Role.WHITE, CONFIG) in (Point(7, 4), Point(7, 9))

    def test_blocks_opponent_simple_four(self):
        board = make_board(
            black=[(7, 5), (7, 6), (7, 7), (7, 8)],
            white=[(7, 4)],
        )
        assert urgent_move(board, Role.WHITE, CONFIG) == Point(7, 9)

    def test_own_win_beats_block(self):
        # Black's four is scanned first but White can win outright
        board = make_board(
            black=[(2, 5), (2, 6), (2, 7), (2, 8)],
            white=[(10, 3), (10, 4), (10, 5), (10, 6)],
        )
        assert urgent_move(board, Role.WHITE, CONFIG) in (Point(10, 2), Point(10, 7))

    def test_blocks_open_three(self):
        board = make_board(black=[(7, 5), (7, 6), (7, 7)], white=[(8, 8)])
        assert urgent_move(board, Role.WHITE, CONFIG) in (Point(7, 4), Point(7, 8))

    def test_blocked_three_is_not_urgent(self):
        board = make_board(black=[(7, 5), (7, 6), (7, 7)], white=[(7, 8)])
        assert urgent_move(board, Role.WHITE, CONFIG) is None

    def test_quiet_position(self):
        board = make_board(black=[(7, 7)], white=[(7, 8)])
        assert urgent_move(board, Role.WHITE, CONFIG) is None
        assert urgent_move(board, Role.BLACK, CONFIG) is None

    def test_threshold_is_configurable(self):
        board = make_board(black=[(7, 5), (7, 6), (7, 7)], white=[(8, 8)])
        config = CONFIG.with_overrides(urgency_threshold=60_000)
        assert urgent_move(board, Role.WHITE, config) is None

    def test_works_for_black(self):
        board = make_board(
            black=[(0, 0)],
            white=[(5, 5), (6, 5), (7, 5), (8, 5)],
        )
        assert urgent_move(board, Role.BLACK, CONFIG) in (Point(4, 5), Point(9, 5))

    def test_empty_board(self):
        assert urgent_move(make_board(), Role.WHITE, CONFIG) is None
