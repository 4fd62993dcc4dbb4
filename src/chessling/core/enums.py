"""Core enumerations for the reduced chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """One of the two players.

    ``FIRST`` plays the white pieces from rows 6-7 and advances toward row 0;
    ``SECOND`` plays black from rows 0-1 and advances toward row 7.
    """

    FIRST = 0
    SECOND = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step."""
        return -1 if self is Side.FIRST else 1

    @property
    def home_row(self) -> int:
        """Row of this side's back rank."""
        return 7 if self is Side.FIRST else 0

    @property
    def pawn_row(self) -> int:
        """Row where this side's pawns start."""
        return 6 if self is Side.FIRST else 1

    @property
    def promotion_row(self) -> int:
        return self.opposite.home_row

    def __str__(self) -> str:
        return "white" if self is Side.FIRST else "black"


class PieceKind(IntEnum):
    """Piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
