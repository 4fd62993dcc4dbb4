"""Move generation under the reduced rule set.

No castling, no en passant and no self-check filtering: a move that leaves
the mover's king capturable is still generated.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

from chessling.core.enums import PieceKind, Side
from chessling.core.move import Move
from chessling.core.types import BOARD_SIZE, Square, is_on_board

if TYPE_CHECKING:
    from chessling.core.piece import Piece
    from chessling.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Pawn capture columns, forward-left then forward-right.
_PAWN_CAPTURE_COLS: tuple[int, ...] = (-1, 1)

_Targets = tuple[tuple[tuple[Square, ...], ...], ...]  # [row][col] -> squares
_Rays = tuple[tuple[tuple[tuple[Square, ...], ...], ...], ...]  # [row][col] -> rays


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> _Targets:
    table: list[tuple[tuple[Square, ...], ...]] = []
    for row in range(BOARD_SIZE):
        row_targets: list[tuple[Square, ...]] = []
        for col in range(BOARD_SIZE):
            row_targets.append(
                tuple(
                    (row + dr, col + dc)
                    for dr, dc in offsets
                    if is_on_board((row + dr, col + dc))
                )
            )
        table.append(tuple(row_targets))
    return tuple(table)


def _build_rays(directions: tuple[tuple[int, int], ...]) -> _Rays:
    table: list[tuple[tuple[tuple[Square, ...], ...], ...]] = []
    for row in range(BOARD_SIZE):
        row_rays: list[tuple[tuple[Square, ...], ...]] = []
        for col in range(BOARD_SIZE):
            square_rays: list[tuple[Square, ...]] = []
            for dr, dc in directions:
                r, c = row + dr, col + dc
                ray: list[Square] = []
                while is_on_board((r, c)):
                    ray.append((r, c))
                    r += dr
                    c += dc
                square_rays.append(tuple(ray))
            row_rays.append(tuple(square_rays))
        table.append(tuple(row_rays))
    return tuple(table)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates destination squares for pieces of a :class:`Position`.

    Destinations come out in a fixed order: direction (or offset) list
    order, then increasing distance along each ray.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, sq: Square, occupant: Piece | None) -> list[Square]:
        """Destinations for *occupant* standing on *sq*.

        *occupant* must be the board's content at *sq*; it is trusted, not
        re-read.  An empty square has no destinations.
        """
        if not is_on_board(sq):
            raise IndexError(f"Square off board: {sq!r}")
        if occupant is None:
            return []
        return self._DISPATCH[occupant.kind](self, sq, occupant.side)

    def moves_from(self, sq: Square) -> list[Move]:
        """Moves for whatever piece stands on *sq*."""
        return [
            Move(sq, to_sq)
            for to_sq in self.legal_destinations(sq, self._board[sq])
        ]

    def generate_moves(self, side: Side | None = None) -> list[Move]:
        """All moves for *side* (default: side to move), sources row-major."""
        if side is None:
            side = self._pos.side_to_move
        moves: list[Move] = []
        for sq in self._board.pieces(side):
            moves.extend(self.moves_from(sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, side: Side) -> list[Square]:
        board = self._board
        row, col = sq
        step = side.forward
        targets: list[Square] = []

        one_step = (row + step, col)
        if is_on_board(one_step) and board[one_step] is None:
            targets.append(one_step)
            if row == side.pawn_row:
                two_step = (row + 2 * step, col)
                if board[two_step] is None:
                    targets.append(two_step)

        for dc in _PAWN_CAPTURE_COLS:
            cap_sq = (row + step, col + dc)
            if not is_on_board(cap_sq):
                continue
            target = board[cap_sq]
            if target is not None and target.side != side:
                targets.append(cap_sq)
        return targets

    def _gen_knight(self, sq: Square, side: Side) -> list[Square]:
        return self._gen_jumps(_KNIGHT_TARGETS[sq[0]][sq[1]], side)

    def _gen_king(self, sq: Square, side: Side) -> list[Square]:
        return self._gen_jumps(_KING_TARGETS[sq[0]][sq[1]], side)

    def _gen_bishop(self, sq: Square, side: Side) -> list[Square]:
        return self._gen_sliding(_BISHOP_RAYS[sq[0]][sq[1]], side)

    def _gen_rook(self, sq: Square, side: Side) -> list[Square]:
        return self._gen_sliding(_ROOK_RAYS[sq[0]][sq[1]], side)

    def _gen_queen(self, sq: Square, side: Side) -> list[Square]:
        return self._gen_sliding(_QUEEN_RAYS[sq[0]][sq[1]], side)

    def _gen_jumps(self, candidates: tuple[Square, ...], side: Side) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for to_sq in candidates:
            target = board[to_sq]
            if target is None or target.side != side:
                targets.append(to_sq)
        return targets

    def _gen_sliding(
        self,
        rays: tuple[tuple[Square, ...], ...],
        side: Side,
    ) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.side != side:
                    targets.append(to_sq)
                break
        return targets

    _DISPATCH: ClassVar[dict[PieceKind, Callable[..., list[Square]]]] = {
        PieceKind.PAWN: _gen_pawn,
        PieceKind.KNIGHT: _gen_knight,
        PieceKind.BISHOP: _gen_bishop,
        PieceKind.ROOK: _gen_rook,
        PieceKind.QUEEN: _gen_queen,
        PieceKind.KING: _gen_king,
    }
