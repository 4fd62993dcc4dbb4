"""Game management layer — controller, players, state machine.

Quick start::

    from chessling.core import Side, parse_square
    from chessling.game import AutoPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        first=HumanPlayer(Side.FIRST, "Alice"),
        second=AutoPlayer(Side.SECOND),
    )
    ctrl.select(parse_square("e2"))
    ctrl.select(parse_square("e4"))  # black replies at once

Hand ``AutoPlayer`` a scheduler such as
:class:`chessling.engine.qt_bridge.AutoPlayTimer` to delay its replies.
"""

from chessling.game.controller import GameController, GameEvents
from chessling.game.interfaces import GamePhase, IPlayer
from chessling.game.player import AutoPlayer, HumanPlayer
from chessling.game.state import GameState, MoveRecord, Selection

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AutoPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "Selection",
]
