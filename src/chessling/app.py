"""Terminal entry point: play a game on stdin/stdout."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable

from chessling.core.enums import Side
from chessling.core.move import Move
from chessling.core.notation import board_to_symbols
from chessling.core.types import parse_square, square_name
from chessling.game.controller import GameController
from chessling.game.interfaces import IPlayer
from chessling.game.player import AutoPlayer, HumanPlayer
from chessling.settings import PLAYER_KINDS, EngineSettings

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_settings(argv: list[str] | None = None) -> EngineSettings:
    """Build :class:`EngineSettings` from command-line arguments."""
    defaults = EngineSettings()
    parser = argparse.ArgumentParser(
        prog="chessling",
        description="Play reduced-rule chess in the terminal.",
    )
    parser.add_argument("--first", choices=PLAYER_KINDS, default=defaults.first_player)
    parser.add_argument(
        "--second", choices=PLAYER_KINDS, default=defaults.second_player
    )
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--max-plies", type=int, default=defaults.max_plies)
    parser.add_argument("--fen", default=defaults.start_fen)
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    return EngineSettings(
        first_player=args.first,
        second_player=args.second,
        seed=args.seed,
        start_fen=args.fen,
        max_plies=args.max_plies,
        log_level=args.log_level,
    )


def render(controller: GameController) -> str:
    """Glyph board with rank/file labels and the side to move."""
    lines: list[str] = []
    for row, cells in enumerate(board_to_symbols(controller.state.position.board)):
        text = " ".join(symbol or "·" for symbol in cells)
        lines.append(f"{square_name((row, 0))[1]} {text}")
    lines.append("  a b c d e f g h")
    lines.append(f"{controller.turn!s} to move")
    return "\n".join(lines)


def _make_player(kind: str, side: Side) -> IPlayer:
    if kind == "auto":
        return AutoPlayer(side)
    return HumanPlayer(side)


def _human_turn(controller: GameController, read: InputFn, write: OutputFn) -> bool:
    """Read commands until a move is played. Returns False to quit."""
    while True:
        text = read(f"{controller.turn!s}> ").strip().lower().replace(" ", "")
        if text in ("q", "quit"):
            return False
        try:
            if len(text) == 2:
                sq = parse_square(text)
                targets = controller.legal_destinations(sq)
                write(" ".join(square_name(t) for t in targets) or "(no moves)")
                continue
            move = Move.from_uci(text)
        except ValueError as exc:
            write(str(exc))
            continue
        if controller.submit_move(move):
            return True
        write(f"Illegal move: {move}")


def run_game(
    settings: EngineSettings,
    read: InputFn = input,
    write: OutputFn = print,
) -> GameController:
    """Play until quit, no moves remain, or the ply limit is reached.

    Automatic sides reply inside the controller; this loop only reads
    human moves.
    """
    controller = GameController(
        random.Random(settings.seed), max_plies=settings.max_plies
    )
    controller.events.on_move.append(
        lambda record, _state: write(f"{record.piece.side!s} plays {record.move}")
    )
    controller.new_game(
        _make_player(settings.first_player, Side.FIRST),
        _make_player(settings.second_player, Side.SECOND),
        fen=settings.start_fen,
    )

    while controller.state.ply_count < settings.max_plies:
        write(render(controller))
        cp = controller.current_player
        if cp is None or not cp.is_human:
            write(f"{controller.turn!s} has no moves")
            break
        if not _human_turn(controller, read, write):
            break

    _LOGGER.info("Game stopped after %d plies", controller.state.ply_count)
    return controller


def main(argv: list[str] | None = None) -> int:
    """Launch the terminal game."""
    try:
        settings = parse_settings(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run_game(settings)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
