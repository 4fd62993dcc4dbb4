"""Text forms of a position: FEN-style placement and Unicode glyph grids."""

from __future__ import annotations

from collections.abc import Sequence

from chessling.core.board import Board
from chessling.core.enums import Side
from chessling.core.piece import Piece
from chessling.core.position import Position
from chessling.core.types import BOARD_SIZE

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"

_SIDE_CHARS: dict[str, Side] = {"w": Side.FIRST, "b": Side.SECOND}


# ── FEN placement ────────────────────────────────────────────────────────────


def position_from_fen(fen: str) -> Position:
    """Parse placement plus optional side-to-move field.

    Ranks are listed from row 0 to row 7.  Castling, en-passant and clock
    fields are accepted for compatibility but ignored.
    """
    parts = fen.split()
    if not 1 <= len(parts) <= 6:
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    for row, rank_str in enumerate(ranks):
        col = 0
        for ch in rank_str:
            if ch.isdigit():
                skip = int(ch)
                if skip < 1 or skip > 8:
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += skip
                if col > BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                continue
            if col >= BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
            board[(row, col)] = Piece.from_char(ch)
            col += 1
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    side = Side.FIRST
    if len(parts) > 1:
        try:
            side = _SIDE_CHARS[parts[1]]
        except KeyError:
            raise ValueError(
                f"Invalid FEN side-to-move field: {parts[1]!r}"
            ) from None
    return Position(board, side)


def position_to_fen(position: Position) -> str:
    """Placement and side-to-move fields."""
    ranks: list[str] = []
    for cells in position.board.rows():
        rank = ""
        empty = 0
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                rank += str(empty)
                empty = 0
            rank += str(piece)
        if empty:
            rank += str(empty)
        ranks.append(rank)
    side = "w" if position.side_to_move == Side.FIRST else "b"
    return f"{'/'.join(ranks)} {side}"


# ── Glyph grids ──────────────────────────────────────────────────────────────


def board_from_symbols(rows: Sequence[Sequence[str]]) -> Board:
    """Build a board from 8 rows of 8 Unicode glyphs ("" for empty)."""
    if len(rows) != BOARD_SIZE or any(len(cells) != BOARD_SIZE for cells in rows):
        raise ValueError("Glyph grid must be 8x8")
    board = Board()
    for row, cells in enumerate(rows):
        for col, symbol in enumerate(cells):
            if symbol:
                board[(row, col)] = Piece.from_symbol(symbol)
    return board


def board_to_symbols(board: Board) -> list[list[str]]:
    """8x8 grid of Unicode glyphs, "" for empty squares."""
    return [[p.symbol if p else "" for p in cells] for cells in board.rows()]
