from __future__ import annotations

from .board import Board, Cell, Side

_GLYPHS = {Cell.EMPTY: "   ", Cell.WHITE_PAWN: " ◆ ", Cell.BLACK_PAWN: " ◇ "}


def _rule(left: str, mid: str, right: str, columns: int) -> str:
    return left + mid.join(["━━━"] * columns) + right


def render_board(board: Board, side: Side = Side.WHITE) -> str:
    """Box-drawing picture of the board as seen by `side`.

    Columns are always mirrored; rows are flipped when viewed from BLACK so
    the viewer's own pawns sit at the bottom.
    """
    rows = range(board.rows) if side == Side.WHITE else range(board.rows - 1, -1, -1)
    lines = [_rule("┏", "┳", "┓", board.columns)]
    for i, row in enumerate(rows):
        cells = (board.get_cell(row, column) for column in reversed(range(board.columns)))
        lines.append("┃" + "┃".join(_GLYPHS[c] for c in cells) + "┃")
        if i < board.rows - 1:
            lines.append(_rule("┣", "╋", "┫", board.columns))
    lines.append(_rule("┗", "┻", "┛", board.columns))
    return "\n".join(lines)
