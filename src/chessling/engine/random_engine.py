"""Auto-player: picks a uniformly random move for a designated side."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from chessling.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessling.core.enums import Side
    from chessling.core.move import Move
    from chessling.core.position import Position

_LOGGER = logging.getLogger(__name__)


class RandomMover:
    """Selects among all generated moves of a side with an injected RNG.

    Args:
        rng: Random source used for every choice.  Pass a seeded
            ``random.Random`` for reproducible games.
        seed: Convenience seed used when *rng* is not given.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def collect_moves(self, position: Position, side: Side) -> list[Move]:
        """Every (source, destination) pair available to *side*."""
        return MoveGenerator(position).generate_moves(side)

    def choose(self, position: Position, side: Side) -> Move | None:
        """Pick a move for *side* without playing it."""
        moves = self.collect_moves(position, side)
        if not moves:
            return None
        return self._rng.choice(moves)

    def choose_and_execute(self, position: Position, side: Side) -> Move | None:
        """Play a random move for *side*; ``None`` when nothing was played.

        Does nothing when it is not *side*'s turn or *side* has no moves.
        """
        if position.side_to_move != side:
            _LOGGER.debug(
                "Skipping auto move for %s: %s is to move", side, position.side_to_move
            )
            return None
        move = self.choose(position, side)
        if move is None:
            _LOGGER.debug("No moves available for %s", side)
            return None
        position.make_move(move)
        return move
