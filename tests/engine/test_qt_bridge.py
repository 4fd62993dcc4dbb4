"""Tests for the Qt auto-play timer."""

from __future__ import annotations

import random

import pytest
from PyQt6.QtTest import QSignalSpy

from chessling.core.enums import Side
from chessling.core.move import Move
from chessling.core.position import Position
from chessling.core.types import E2, E4, E5, E7
from chessling.engine.qt_bridge import AutoPlayTimer
from chessling.game.controller import GameController
from chessling.game.interfaces import GamePhase
from chessling.game.player import AutoPlayer, HumanPlayer
from chessling.settings import EngineSettings

pytestmark = pytest.mark.usefixtures("qapp")


def _human_vs_timer(delay_ms: int = 10_000) -> tuple[GameController, AutoPlayTimer]:
    ctrl = GameController(random.Random(5))
    timer = AutoPlayTimer(ctrl, delay_ms=delay_ms)
    ctrl.new_game(HumanPlayer(Side.FIRST), timer.create_player(Side.SECOND))
    return ctrl, timer


class TestAutoPlayTimer:
    def test_create_player(self) -> None:
        ctrl = GameController()
        timer = AutoPlayTimer(ctrl)
        player = timer.create_player(Side.SECOND, "Bot")
        assert isinstance(player, AutoPlayer)
        assert player.scheduler is timer
        assert not player.plays_immediately
        assert player.side == Side.SECOND
        assert player.name == "Bot"

    def test_human_move_schedules_reply(self) -> None:
        ctrl, timer = _human_vs_timer()
        assert not timer.is_pending
        assert ctrl.submit_move(Move(E2, E4))
        assert timer.is_pending
        assert ctrl.state.phase == GamePhase.THINKING

    def test_timeout_plays_for_scheduled_side(self) -> None:
        ctrl, timer = _human_vs_timer()
        ctrl.submit_move(Move(E2, E4))
        played = QSignalSpy(timer.move_played)

        timer._on_timeout()

        assert len(played) == 1
        assert ctrl.turn == Side.FIRST
        assert ctrl.state.ply_count == 2
        assert not timer.is_pending

    def test_cancel_drops_pending_move(self) -> None:
        ctrl, timer = _human_vs_timer()
        ctrl.submit_move(Move(E2, E4))
        timer.cancel()
        assert not timer.is_pending
        timer._on_timeout()
        assert ctrl.turn == Side.SECOND

    def test_manual_move_for_scheduled_side_rejected(self) -> None:
        ctrl, timer = _human_vs_timer()
        ctrl.submit_move(Move(E2, E4))
        assert not ctrl.submit_move(Move(E7, E5))
        assert timer.is_pending
        assert ctrl.state.ply_count == 1

        timer._on_timeout()
        assert ctrl.turn == Side.FIRST

    def test_reset_cancels_pending_move(self) -> None:
        ctrl, timer = _human_vs_timer()
        ctrl.submit_move(Move(E2, E4))
        ctrl.reset()
        assert not timer.is_pending
        assert ctrl.state.position == Position.initial()

    def test_stale_request_is_ignored(self) -> None:
        ctrl, timer = _human_vs_timer()
        stale = Position.initial()
        stale.side_to_move = Side.SECOND
        no_move = QSignalSpy(timer.no_move)

        timer.schedule(stale)
        timer._on_timeout()

        assert len(no_move) == 1
        assert no_move[0][0] == Side.SECOND
        assert ctrl.state.position == Position.initial()

    def test_timer_fires(self) -> None:
        ctrl, timer = _human_vs_timer(delay_ms=0)
        played = QSignalSpy(timer.move_played)
        ctrl.submit_move(Move(E2, E4))
        assert played.wait(2000)
        assert ctrl.turn == Side.FIRST

    def test_from_settings(self) -> None:
        ctrl = GameController()
        timer = AutoPlayTimer.from_settings(ctrl, EngineSettings(think_delay_ms=250))
        assert timer.delay_ms == 250
        timer.set_delay(-5)
        assert timer.delay_ms == 0
