"""Qt bridge that plays automatic moves after a cancellable delay."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from chessling.core.enums import Side
from chessling.game.player import AutoPlayer

if TYPE_CHECKING:
    from chessling.core.position import Position
    from chessling.game.controller import GameController
    from chessling.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)


class AutoPlayTimer(QObject):
    """Schedules ``controller.choose_and_execute`` on a single-shot timer.

    The delay stands in for "thinking" time.  The side is captured when the
    move is scheduled; if the game was reset in the meantime the controller
    ignores the stale request.
    """

    move_played = pyqtSignal(object)  # Move
    no_move = pyqtSignal(object)  # Side

    DEFAULT_DELAY_MS = 500

    def __init__(
        self,
        controller: GameController,
        *,
        delay_ms: int = DEFAULT_DELAY_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._delay_ms = delay_ms
        self._pending_side: Side | None = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    @classmethod
    def from_settings(
        cls,
        controller: GameController,
        settings: EngineSettings,
        parent: QObject | None = None,
    ) -> AutoPlayTimer:
        return cls(controller, delay_ms=settings.think_delay_ms, parent=parent)

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def is_pending(self) -> bool:
        return self._pending_side is not None

    def set_delay(self, delay_ms: int) -> None:
        """Update the delay (takes effect on the next schedule)."""
        self._delay_ms = max(0, delay_ms)

    def create_player(self, side: Side, name: str = "Random") -> AutoPlayer:
        """Create an auto-player that schedules its moves on this timer."""
        return AutoPlayer(side, name, scheduler=self)

    def schedule(self, position: Position) -> None:
        """Queue an automatic move for the side to move in *position*."""
        self._pending_side = position.side_to_move
        self._timer.start(self._delay_ms)

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop a pending automatic move."""
        self._timer.stop()
        self._pending_side = None

    @pyqtSlot()
    def _on_timeout(self) -> None:
        side = self._pending_side
        self._pending_side = None
        if side is None:
            return

        move = self._controller.choose_and_execute(side)
        if move is None:
            _LOGGER.debug("Auto-player for %s made no move", side)
            self.no_move.emit(side)
            return
        self.move_played.emit(move)
