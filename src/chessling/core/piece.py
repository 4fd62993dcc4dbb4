"""Piece value object and side classifier."""

from __future__ import annotations

from dataclasses import dataclass

from chessling.core.enums import PieceKind, Side

# FEN character ↔ (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "P": (Side.FIRST, PieceKind.PAWN),
    "N": (Side.FIRST, PieceKind.KNIGHT),
    "B": (Side.FIRST, PieceKind.BISHOP),
    "R": (Side.FIRST, PieceKind.ROOK),
    "Q": (Side.FIRST, PieceKind.QUEEN),
    "K": (Side.FIRST, PieceKind.KING),
    "p": (Side.SECOND, PieceKind.PAWN),
    "n": (Side.SECOND, PieceKind.KNIGHT),
    "b": (Side.SECOND, PieceKind.BISHOP),
    "r": (Side.SECOND, PieceKind.ROOK),
    "q": (Side.SECOND, PieceKind.QUEEN),
    "k": (Side.SECOND, PieceKind.KING),
}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.FIRST, PieceKind.PAWN): "♙",
    (Side.FIRST, PieceKind.KNIGHT): "♘",
    (Side.FIRST, PieceKind.BISHOP): "♗",
    (Side.FIRST, PieceKind.ROOK): "♖",
    (Side.FIRST, PieceKind.QUEEN): "♕",
    (Side.FIRST, PieceKind.KING): "♔",
    (Side.SECOND, PieceKind.PAWN): "♟",
    (Side.SECOND, PieceKind.KNIGHT): "♞",
    (Side.SECOND, PieceKind.BISHOP): "♝",
    (Side.SECOND, PieceKind.ROOK): "♜",
    (Side.SECOND, PieceKind.QUEEN): "♛",
    (Side.SECOND, PieceKind.KING): "♚",
}

_FEN_CHARS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}
_SYMBOL_MAP: dict[str, tuple[Side, PieceKind]] = {v: k for k, v in _UNICODE.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece identifier."""

    side: Side
    kind: PieceKind

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = first side, lowercase = second)."""
        return _FEN_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → first-side knight."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, kind)

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        """Create piece from a Unicode glyph, e.g. '♞' → second-side knight."""
        try:
            side, kind = _SYMBOL_MAP[symbol]
        except KeyError:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from None
        return cls(side, kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]

    def promoted(self) -> Piece:
        """Queen of the same side."""
        return Piece(self.side, PieceKind.QUEEN)


def side_of(identifier: Piece | str | None) -> Side | None:
    """Side owning *identifier*, or ``None`` for empty/unknown input.

    Accepts a :class:`Piece`, a FEN letter or a Unicode glyph.
    """
    if isinstance(identifier, Piece):
        return identifier.side
    if isinstance(identifier, str):
        entry = _CHAR_MAP.get(identifier) or _SYMBOL_MAP.get(identifier)
        if entry is not None:
            return entry[0]
    return None
