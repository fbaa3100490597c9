"""Play tab: Human vs AI or Human vs Human on an interactive SVG board."""

from __future__ import annotations

import logging
import random as _random
import time as _time
from dataclasses import dataclass, field
from typing import Optional

import gradio as gr

from gomokubot.agent.base import Agent
from gomokubot.agent.minimax_agent import MinimaxAgent
from gomokubot.agent.random_agent import RandomAgent
from gomokubot.engine.config import PRESETS, EngineConfig
from gomokubot.engine.threats import evaluate_board
from gomokubot.errors import IllegalMoveError
from gomokubot.game.board import GomokuGameState, format_point, parse_coordinate
from gomokubot.game.types import Role
from gomokubot.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)

MODE_PVE = "Human vs AI"
MODE_PVP = "Human vs Human"

OPPONENT_CHOICES: dict[str, Agent] = {
    **{f"Minimax ({level})": MinimaxAgent(config) for level, config in PRESETS.items()},
    "RandomAgent": RandomAgent(),
}
DEFAULT_OPPONENT = "Minimax (normal)"


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: GomokuGameState = field(default_factory=GomokuGameState)
    mode: str = MODE_PVE
    agent: Agent = field(default_factory=lambda: OPPONENT_CHOICES[DEFAULT_OPPONENT])
    human_player: Role = Role.BLACK
    _turn_start: float = field(default_factory=_time.time)

    @property
    def vs_ai(self) -> bool:
        return self.mode == MODE_PVE

    def reset(self, mode: Optional[str] = None, human_player: Optional[Role] = None) -> None:
        self.game = GomokuGameState()
        self._turn_start = _time.time()
        if mode is not None:
            self.mode = mode
        if human_player is not None:
            self.human_player = human_player

    def mark_turn_start(self) -> None:
        self._turn_start = _time.time()

    def elapsed_since_turn_start(self) -> float:
        return _time.time() - self._turn_start

    def is_human_turn(self) -> bool:
        return not self.vs_ai or self.game.current_player == self.human_player

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        if g.winner is None:
            return "Draw!"
        if not self.vs_ai:
            return f"{g.winner} wins!"
        return "You win!" if g.winner == self.human_player else "AI wins!"

    @property
    def status_text(self) -> str:
        g = self.game
        if g.is_over:
            if g.winner is None:
                return "Game over: draw, the board is full."
            return f"Game over: {self.game_over_banner} ({g.winner} by 5-in-a-row)"
        if not self.vs_ai:
            return f"{g.current_player} to move"
        if g.current_player == self.human_player:
            return f"Your turn ({g.current_player})"
        return f"AI is thinking... ({g.current_player})"

    @property
    def move_history_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for i, move in enumerate(self.game.moves):
            t = f"{move.elapsed:.2f}" if move.elapsed is not None else "-"
            rows.append([str(i + 1), str(move.role), format_point(move.point), t])
        return rows


def _session_config(session: GameSession) -> EngineConfig:
    if isinstance(session.agent, MinimaxAgent):
        return session.agent.config
    return PRESETS["normal"]


def _make_board_html(session: GameSession) -> str:
    clickable = not session.game.is_over and session.is_human_turn()
    eval_score = None
    if session.game.moves:
        # Positive = Black ahead
        eval_score = evaluate_board(session.game.board, Role.BLACK, _session_config(session))
    return render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
        eval_score=eval_score,
    )


def _ai_move(session: GameSession) -> None:
    """Let the AI play if it is its turn."""
    if not session.vs_ai or session.game.is_over or session.is_human_turn():
        return
    t0 = _time.time()
    ai_move = session.agent.select_move(session.game)
    session.game.apply_move(ai_move, elapsed=_time.time() - t0)
    session.mark_turn_start()


def _outputs(session: GameSession, status: Optional[str] = None):
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.move_history_table,
        session,
    )


def _apply_human_move(coord_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.game.is_over:
        return _outputs(session) + ("",)

    if not session.is_human_turn():
        return _outputs(session, "Wait, it's the AI's turn.") + ("",)

    point = parse_coordinate(coord_text, session.game.board.size)
    if point is None:
        return _outputs(
            session, f"Invalid coordinate: '{coord_text}'. Use format like H8."
        ) + ("",)

    try:
        session.game.apply_move(point, elapsed=session.elapsed_since_turn_start())
    except IllegalMoveError as exc:
        return _outputs(session, str(exc)) + ("",)
    session.mark_turn_start()

    _ai_move(session)
    return _outputs(session) + ("",)


def _new_game(mode: str, color_choice: str, opponent_choice: str, session: GameSession):
    """Start a new game. color_choice is 'Black', 'White' or 'Random'."""
    if color_choice == "Random":
        human = _random.choice([Role.BLACK, Role.WHITE])
    elif color_choice == "White":
        human = Role.WHITE
    else:
        human = Role.BLACK

    session.agent = OPPONENT_CHOICES.get(opponent_choice, OPPONENT_CHOICES[DEFAULT_OPPONENT])
    session.reset(mode=mode, human_player=human)
    logger.info("New game: %s, human plays %s, opponent %s", mode, human, session.agent.name)

    # AI is Black when the human takes White, so it opens
    _ai_move(session)

    if session.vs_ai:
        info = f"You are {human}."
    else:
        info = "Two players, Black starts."
    return _outputs(session) + (info,)


def _undo_move(session: GameSession):
    """Undo one move (PvP) or the last human+AI pair (PvE)."""
    if not session.game.moves:
        return _outputs(session, "Nothing to undo.")

    if session.vs_ai:
        last = session.game.moves[-1]
        if last.role != session.human_player:
            session.game.undo_move()  # undo AI
        if session.game.moves and session.game.moves[-1].role == session.human_player:
            session.game.undo_move()  # undo human
    else:
        session.game.undo_move()
    session.mark_turn_start()
    _ai_move(session)
    return _outputs(session)


def _resign(session: GameSession):
    if not session.game.is_over:
        loser = session.human_player if session.vs_ai else session.game.current_player
        session.game.resign(loser)
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(GomokuGameState()),
                label="Board",
            )
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value="Your turn (Black)",
                label="Status",
                interactive=False,
                lines=2,
            )
            color_info = gr.Textbox(
                value="You are Black.",
                label="Players",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            mode_choice = gr.Radio(
                choices=[MODE_PVE, MODE_PVP],
                value=MODE_PVE,
                label="Mode",
            )
            color_choice = gr.Radio(
                choices=["Black", "White", "Random"],
                value="Black",
                label="Play as",
            )
            opponent_choice = gr.Dropdown(
                choices=list(OPPONENT_CHOICES.keys()),
                value=DEFAULT_OPPONENT,
                label="Opponent",
            )
            new_game_btn = gr.Button("New Game", variant="primary")

            with gr.Row():
                undo_btn = gr.Button("Undo")
                resign_btn = gr.Button("Resign", variant="stop")

            gr.Markdown("### Enter Move")
            coord_input = gr.Textbox(
                label="Coordinate (e.g. H8)",
                placeholder="H8",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button("Submit Move", elem_id="coord-submit")

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Move", "Time (s)"],
                datatype=["number", "str", "str", "str"],
                interactive=False,
                column_count=4,
            )

    board_outputs = [board_html, status_text, move_table, session_state]

    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )
    new_game_btn.click(
        fn=_new_game,
        inputs=[mode_choice, color_choice, opponent_choice, session_state],
        outputs=board_outputs + [color_info],
    )
    undo_btn.click(fn=_undo_move, inputs=[session_state], outputs=board_outputs)
    resign_btn.click(fn=_resign, inputs=[session_state], outputs=board_outputs)
