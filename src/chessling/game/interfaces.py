"""Interfaces of the game layer.

The controller talks to players through :class:`IPlayer` only; deferred
automatic moves go through any object shaped like :class:`MoveScheduler`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Protocol

from chessling.core.enums import Side

if TYPE_CHECKING:
    from chessling.core.position import Position


# ── Turn cycle ───────────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Where the current turn stands."""

    NOT_STARTED = auto()
    AWAITING_SELECTION = auto()
    DESTINATION_CHOSEN = auto()  # a piece is selected, destinations offered
    THINKING = auto()  # an automatic player is on move


# ── Participants ─────────────────────────────────────────────────────────────


class MoveScheduler(Protocol):
    """Delivers an automatic move later, e.g. after a timer fires."""

    def schedule(self, position: Position) -> None: ...

    def cancel(self) -> None: ...


class IPlayer(ABC):
    """One side's participant, human or automatic."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @property
    @abstractmethod
    def plays_immediately(self) -> bool:
        """True if the controller should play this side's move itself as
        soon as it is due, without waiting on the player."""

    @abstractmethod
    def request_move(self, position: Position) -> None:
        """Tell the player its side is due to move in *position*."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop any move the player still has pending."""
