"""Tests for MoveGenerator under the reduced rule set."""

import pytest

from chessling.core.board import Board
from chessling.core.enums import PieceKind, Side
from chessling.core.move import Move
from chessling.core.move_generator import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    MoveGenerator,
)
from chessling.core.notation import position_from_fen
from chessling.core.piece import Piece
from chessling.core.position import Position
from chessling.core.types import all_squares, is_on_board

BUSY_FEN = "r1bqk2r/pp1n1ppp/2p1pn2/3p4/1bPP4/2N1PN2/PP3PPP/R1BQKB1R w"


def destinations(position: Position, sq: tuple[int, int]) -> list[tuple[int, int]]:
    return MoveGenerator(position).legal_destinations(sq, position.board[sq])


def lone_piece(piece: Piece, sq: tuple[int, int]) -> Position:
    board = Board()
    board[sq] = piece
    return Position(board, piece.side)


# ── Pawns ────────────────────────────────────────────────────────────────────


class TestPawn:
    def test_initial_first_side_pawn(self) -> None:
        pos = Position.initial()
        assert destinations(pos, (6, 4)) == [(5, 4), (4, 4)]

    def test_initial_second_side_pawn(self) -> None:
        pos = Position.initial()
        assert destinations(pos, (1, 2)) == [(2, 2), (3, 2)]

    def test_two_step_blocked_on_destination(self) -> None:
        pos = position_from_fen("8/8/8/8/4p3/8/4P3/8 w")
        assert destinations(pos, (6, 4)) == [(5, 4)]

    def test_two_step_blocked_on_intermediate(self) -> None:
        pos = position_from_fen("8/8/8/8/8/4n3/4P3/8 w")
        assert destinations(pos, (6, 4)) == []

    def test_no_two_step_off_start_row(self) -> None:
        pos = position_from_fen("8/8/8/8/8/4P3/8/8 w")
        assert destinations(pos, (5, 4)) == [(4, 4)]

    def test_captures_follow_forward_step(self) -> None:
        pos = position_from_fen("8/8/8/3n1b2/4P3/8/8/8 w")
        assert destinations(pos, (4, 4)) == [(3, 4), (3, 3), (3, 5)]

    def test_no_diagonal_onto_empty_or_own(self) -> None:
        pos = position_from_fen("8/8/8/3N4/4P3/8/8/8 w")
        assert destinations(pos, (4, 4)) == [(3, 4)]

    def test_no_forward_capture(self) -> None:
        pos = position_from_fen("8/8/8/4p3/4P3/8/8/8 w")
        assert destinations(pos, (4, 4)) == []

    def test_edge_file_capture(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/p7/1N6 b")
        assert destinations(pos, (6, 0)) == [(7, 0), (7, 1)]

    def test_second_side_captures_toward_row_seven(self) -> None:
        pos = position_from_fen("8/8/8/4p3/3B1R2/8/8/8 b")
        assert destinations(pos, (3, 4)) == [(4, 4), (4, 3), (4, 5)]

    def test_pawn_on_last_row_has_no_moves(self) -> None:
        pos = lone_piece(Piece(Side.FIRST, PieceKind.PAWN), (0, 3))
        assert destinations(pos, (0, 3)) == []


# ── Knights / kings ─────────────────────────────────────────────────────────


class TestKnight:
    def test_initial_knight(self) -> None:
        pos = Position.initial()
        assert destinations(pos, (7, 1)) == [(5, 0), (5, 2)]

    def test_jumps_over_pieces(self) -> None:
        pos = Position.initial()
        assert destinations(pos, (0, 6)) == [(2, 5), (2, 7)]

    def test_offset_set_filtered_by_occupancy(self) -> None:
        pos = position_from_fen("8/8/3N1n2/8/4N3/8/8/8 w")
        expected = {
            (4 + dr, 4 + dc)
            for dr, dc in KNIGHT_OFFSETS
            if (4 + dr, 4 + dc) != (2, 3)
        }
        result = destinations(pos, (4, 4))
        assert set(result) == expected
        assert (2, 5) in result
        assert len(result) == len(set(result))


class TestKing:
    def test_corner(self) -> None:
        pos = lone_piece(Piece(Side.FIRST, PieceKind.KING), (7, 7))
        assert destinations(pos, (7, 7)) == [(6, 6), (6, 7), (7, 6)]

    def test_offset_set_filtered_by_occupancy(self) -> None:
        pos = position_from_fen("8/8/8/3Pp3/4K3/8/8/8 w")
        expected = {(4 + dr, 4 + dc) for dr, dc in KING_OFFSETS} - {(3, 3)}
        assert set(destinations(pos, (4, 4))) == expected

    def test_no_check_avoidance(self) -> None:
        # e3 is covered by the second side's rook but is still offered.
        pos = position_from_fen("8/8/8/8/8/r7/4K3/8 w")
        assert (5, 4) in destinations(pos, (6, 4))

    def test_initial_king_is_boxed_in(self) -> None:
        pos = Position.initial()
        assert destinations(pos, (7, 4)) == []


# ── Sliding pieces ───────────────────────────────────────────────────────────


class TestSliding:
    def test_rook_ray_scenario(self) -> None:
        # Rook d4, opposing pawn three squares right, friendly pawn two above.
        pos = position_from_fen("8/8/3P4/8/3R2p1/8/8/8 w")
        assert destinations(pos, (4, 3)) == [
            (3, 3),
            (5, 3), (6, 3), (7, 3),
            (4, 2), (4, 1), (4, 0),
            (4, 4), (4, 5), (4, 6),
        ]

    def test_bishop_order(self) -> None:
        pos = lone_piece(Piece(Side.SECOND, PieceKind.BISHOP), (1, 1))
        assert destinations(pos, (1, 1)) == [
            (0, 0),
            (0, 2),
            (2, 0),
            (2, 2), (3, 3), (4, 4), (5, 5), (6, 6), (7, 7),
        ]

    def test_queen_on_open_board(self) -> None:
        pos = lone_piece(Piece(Side.FIRST, PieceKind.QUEEN), (4, 3))
        assert len(destinations(pos, (4, 3))) == 27

    def test_initial_sliders_blocked(self) -> None:
        pos = Position.initial()
        for sq in [(7, 0), (7, 2), (7, 3), (0, 5), (0, 7)]:
            assert destinations(pos, sq) == []

    def test_captures_opposing_king(self) -> None:
        pos = position_from_fen("8/8/8/8/R6k/8/8/8 w")
        result = destinations(pos, (4, 0))
        assert result[-1] == (4, 7)

    @pytest.mark.parametrize(
        ("kind", "dirs"),
        [
            (PieceKind.BISHOP, BISHOP_DIRS),
            (PieceKind.ROOK, ROOK_DIRS),
            (PieceKind.QUEEN, QUEEN_DIRS),
        ],
    )
    def test_rays_stop_at_first_occupied(
        self, kind: PieceKind, dirs: tuple[tuple[int, int], ...]
    ) -> None:
        pos = position_from_fen(BUSY_FEN)
        board = pos.board
        for sq in all_squares():
            if board[sq] is not None:
                continue
            mover = Piece(Side.FIRST, kind)
            board[sq] = mover
            result = set(MoveGenerator(pos).legal_destinations(sq, mover))
            for dr, dc in dirs:
                r, c = sq[0] + dr, sq[1] + dc
                while is_on_board((r, c)):
                    target = board[(r, c)]
                    if target is None:
                        assert (r, c) in result
                    else:
                        assert ((r, c) in result) == (target.side != Side.FIRST)
                        r, c = r + dr, c + dc
                        while is_on_board((r, c)):
                            assert (r, c) not in result
                            r, c = r + dr, c + dc
                        break
                    r, c = r + dr, c + dc
            board[sq] = None


# ── Whole-board properties ──────────────────────────────────────────────────


class TestProperties:
    @pytest.mark.parametrize("kind", list(PieceKind))
    @pytest.mark.parametrize("side", list(Side))
    def test_never_off_board(self, kind: PieceKind, side: Side) -> None:
        for sq in all_squares():
            pos = lone_piece(Piece(side, kind), sq)
            for dest in destinations(pos, sq):
                assert is_on_board(dest)

    def test_never_onto_own_piece(self) -> None:
        pos = position_from_fen(BUSY_FEN)
        for sq in all_squares():
            piece = pos.board[sq]
            if piece is None:
                continue
            for dest in destinations(pos, sq):
                target = pos.board[dest]
                assert target is None or target.side != piece.side

    def test_empty_occupant_has_no_destinations(self) -> None:
        pos = Position.initial()
        gen = MoveGenerator(pos)
        assert gen.legal_destinations((4, 4), None) == []

    def test_off_board_source_raises(self) -> None:
        gen = MoveGenerator(Position.initial())
        with pytest.raises(IndexError):
            gen.legal_destinations((8, 0), Piece(Side.FIRST, PieceKind.ROOK))

    def test_deterministic_order(self) -> None:
        pos = position_from_fen(BUSY_FEN)
        first = MoveGenerator(pos).generate_moves()
        second = MoveGenerator(pos).generate_moves()
        assert first == second


class TestGenerateMoves:
    def test_initial_move_counts(self) -> None:
        pos = Position.initial()
        gen = MoveGenerator(pos)
        assert len(gen.generate_moves()) == 20
        assert len(gen.generate_moves(Side.SECOND)) == 20

    def test_defaults_to_side_to_move(self) -> None:
        pos = Position.initial()
        pos.side_to_move = Side.SECOND
        moves = MoveGenerator(pos).generate_moves()
        assert all(pos.board[m.from_sq].side == Side.SECOND for m in moves)

    def test_sources_in_row_major_order(self) -> None:
        moves = MoveGenerator(Position.initial()).generate_moves()
        assert moves[0] == Move((6, 0), (5, 0))
        assert moves[-1] == Move((7, 6), (5, 7))

    def test_moves_from(self) -> None:
        gen = MoveGenerator(Position.initial())
        assert gen.moves_from((6, 4)) == [
            Move((6, 4), (5, 4)),
            Move((6, 4), (4, 4)),
        ]
        assert gen.moves_from((4, 4)) == []
