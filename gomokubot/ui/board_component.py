"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Optional

from gomokubot.game.board import COL_LABELS, GomokuGameState, format_point
from gomokubot.game.types import Point, Role

# Layout constants
CELL_SIZE = 36
MARGIN = 40
STONE_RADIUS = 15
CLICK_RADIUS = 17  # Invisible click target radius

# Colors
BG_COLOR = "#DCB35C"
LINE_COLOR = "#4A3728"
BLACK_STONE = "#1A1A1A"
WHITE_STONE = "#F5F5F5"
WHITE_STROKE = "#888"
LAST_MOVE_BLACK = "#E74C3C"  # marker on a black stone
LAST_MOVE_WHITE = "#3B82F6"  # marker on a white stone
BANNER_WIN = "#4ADE80"
BANNER_LOSS = "#F87171"
BANNER_DRAW = "#FFFFFF"


def board_px(size: int) -> int:
    return MARGIN * 2 + CELL_SIZE * (size - 1)


def _coord(row: int, col: int) -> tuple[int, int]:
    """Convert 0-indexed board coordinates to SVG pixel coordinates."""
    return MARGIN + col * CELL_SIZE, MARGIN + row * CELL_SIZE


def _star_points(size: int) -> list[Point]:
    center = size // 2
    stars = [Point(center, center)]
    if size >= 13:
        for r in (3, size - 4):
            for c in (3, size - 4):
                stars.append(Point(r, c))
    return stars


def _banner_color(message: str) -> str:
    if message.startswith("Draw"):
        return BANNER_DRAW
    if message.startswith("AI"):
        return BANNER_LOSS
    return BANNER_WIN


def render_board_svg(
    game_state: GomokuGameState,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
    eval_score: Optional[int] = None,
) -> str:
    """Render the board as an SVG string."""
    size = game_state.board.size
    px = board_px(size)
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{px}" height="{px}" '
        f'viewBox="0 0 {px} {px}" '
        f'id="gomoku-board">'
    )
    parts.append(f'<rect width="{px}" height="{px}" fill="{BG_COLOR}" rx="4"/>')

    # Grid lines
    lo, hi = MARGIN, MARGIN + (size - 1) * CELL_SIZE
    for i in range(size):
        p = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{p}" y1="{lo}" x2="{p}" y2="{hi}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )
        parts.append(
            f'<line x1="{lo}" y1="{p}" x2="{hi}" y2="{p}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )

    for star in _star_points(size):
        cx, cy = _coord(star.row, star.col)
        parts.append(f'<circle cx="{cx}" cy="{cy}" r="4" fill="{LINE_COLOR}"/>')

    # Column labels (top) and row labels (left)
    for i in range(size):
        x, y = _coord(i, i)
        parts.append(
            f'<text x="{x}" y="{MARGIN - 15}" text-anchor="middle" '
            f'font-size="13" font-family="monospace" fill="{LINE_COLOR}">'
            f'{COL_LABELS[i]}</text>'
        )
        parts.append(
            f'<text x="{MARGIN - 22}" y="{y + 5}" text-anchor="middle" '
            f'font-size="13" font-family="monospace" fill="{LINE_COLOR}">'
            f'{i + 1}</text>'
        )

    # Stones
    last_point: Optional[Point] = None
    if game_state.moves:
        last_point = game_state.moves[-1].point

    board = game_state.board
    for pt in board.points():
        role = board.at(pt)
        if role is Role.EMPTY:
            continue
        x, y = _coord(pt.row, pt.col)
        fill = BLACK_STONE if role is Role.BLACK else WHITE_STONE
        stroke = "none" if role is Role.BLACK else WHITE_STROKE
        parts.append(
            f'<circle cx="{x}" cy="{y}" r="{STONE_RADIUS}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
        )
        if highlight_last and pt == last_point:
            marker = LAST_MOVE_BLACK if role is Role.BLACK else LAST_MOVE_WHITE
            parts.append(f'<circle cx="{x}" cy="{y}" r="4" fill="{marker}"/>')

    # Clickable intersection targets (invisible circles)
    if clickable and not game_state.is_over:
        for pt in board.points():
            if not board.is_empty(pt):
                continue
            x, y = _coord(pt.row, pt.col)
            coord_str = format_point(pt)
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="{CLICK_RADIUS}" '
                f'fill="transparent" class="board-click" '
                f'data-coord="{coord_str}" style="cursor:pointer">'
                f'<title>{coord_str}</title></circle>'
            )

    if eval_score is not None:
        parts.append(
            f'<text x="{px - MARGIN}" y="{px - 12}" text-anchor="end" '
            f'font-size="12" font-family="monospace" fill="{LINE_COLOR}">'
            f'eval {eval_score:+d}</text>'
        )

    if game_over_message:
        color = _banner_color(game_over_message)
        mid = px // 2
        parts.append(
            f'<rect x="{MARGIN}" y="{mid - 30}" width="{px - 2 * MARGIN}" height="60" '
            f'fill="rgba(0, 0, 0, 0.6)" rx="8"/>'
        )
        parts.append(
            f'<text x="{mid}" y="{mid + 10}" text-anchor="middle" '
            f'font-size="28" font-weight="bold" font-family="sans-serif" '
            f'fill="{color}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the coordinate to
# the Gradio coordinate Textbox, then presses the submit button.
BOARD_CLICK_JS = """
() => {
    if (window._gomokuClickBound) return;
    window._gomokuClickBound = true;

    document.addEventListener('click', function(e) {
        const circle = e.target.closest('.board-click');
        if (!circle) return;
        const coord = circle.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (!container) return;
        const proto = container.tagName === 'TEXTAREA'
            ? window.HTMLTextAreaElement.prototype
            : window.HTMLInputElement.prototype;
        const nativeSetter = Object.getOwnPropertyDescriptor(proto, 'value')?.set;
        if (nativeSetter) {
            nativeSetter.call(container, coord);
        } else {
            container.value = coord;
        }
        container.dispatchEvent(new Event('input', { bubbles: true }));
        const btn = document.querySelector('#coord-submit');
        if (btn) btn.click();
    });
}
"""
