"""Human and automatic participants.

A player only says who it is and how its moves arrive; the controller owns
the board and does the playing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessling.core.enums import Side
from chessling.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessling.core.position import Position
    from chessling.game.interfaces import MoveScheduler


class _Seat(IPlayer):
    """Side and display name shared by both player kinds."""

    __slots__ = ("_side", "_name")

    def __init__(self, side: Side, name: str) -> None:
        self._side = side
        self._name = name

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._side!s}, {self._name!r})"


class HumanPlayer(_Seat):
    """Moves arrive as clicks through ``GameController.select``."""

    __slots__ = ()

    def __init__(self, side: Side, name: str = "") -> None:
        super().__init__(side, name or f"Player ({side!s})")

    @property
    def is_human(self) -> bool:
        return True

    @property
    def plays_immediately(self) -> bool:
        return False

    def request_move(self, position: Position) -> None:
        """Nothing to do until the next click."""

    def cancel(self) -> None:
        """Nothing is ever pending."""


class AutoPlayer(_Seat):
    """Plays a random move for its side.

    Without a *scheduler* the controller picks and plays the reply as soon as
    the side is due.  With one, for example
    :class:`chessling.engine.qt_bridge.AutoPlayTimer`, the prompt is handed
    over and the move lands when the scheduler calls
    ``controller.choose_and_execute``.
    """

    __slots__ = ("_scheduler",)

    def __init__(
        self,
        side: Side,
        name: str = "Random",
        scheduler: MoveScheduler | None = None,
    ) -> None:
        super().__init__(side, name)
        self._scheduler = scheduler

    @property
    def scheduler(self) -> MoveScheduler | None:
        return self._scheduler

    @property
    def is_human(self) -> bool:
        return False

    @property
    def plays_immediately(self) -> bool:
        return self._scheduler is None

    def request_move(self, position: Position) -> None:
        if self._scheduler is not None:
            self._scheduler.schedule(position)

    def cancel(self) -> None:
        if self._scheduler is not None:
            self._scheduler.cancel()
