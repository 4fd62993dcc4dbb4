"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from chessling.core.enums import PieceKind, Side
from chessling.core.piece import Piece
from chessling.core.types import BOARD_SIZE, Square, is_on_board, square_name

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid of square contents, indexed by ``(row, col)``."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_on_board(sq):
            raise IndexError(f"Square off board: {sq!r}")
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_on_board(sq):
            raise IndexError(f"Square off board: {sq!r}")
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Square]:
        """Squares occupied by *side*, in row-major order."""
        return [
            (row, col)
            for row, cells in enumerate(self._grid)
            for col, piece in enumerate(cells)
            if piece is not None and piece.side == side
        ]

    def piece_count(self, side: Side | None = None) -> int:
        """Number of occupied squares, optionally restricted to *side*."""
        return sum(
            1
            for cells in self._grid
            for piece in cells
            if piece is not None and (side is None or piece.side == side)
        )

    def rows(self) -> list[list[Piece | None]]:
        """Copy of the grid, row 0 first."""
        return [cells.copy() for cells in self._grid]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = self.rows()
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Fixed starting layout: 8 pawns and 8 back-rank pieces per side."""
        b = cls()
        for side in Side:
            for col, kind in enumerate(_BACK_RANK):
                b[(side.home_row, col)] = Piece(side, kind)
                b[(side.pawn_row, col)] = Piece(side, PieceKind.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{square_name((row, 0))[1]} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
