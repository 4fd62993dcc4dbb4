"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessling.core.notation import position_from_fen

PLAYER_KINDS: tuple[str, ...] = ("human", "auto")


@dataclass
class EngineSettings:
    """All user-configurable settings."""

    # Players
    first_player: str = "human"
    second_player: str = "auto"

    # Auto-player
    think_delay_ms: int = 500
    seed: int | None = None

    # Game
    start_fen: str | None = None
    max_plies: int = 200

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for kind in (self.first_player, self.second_player):
            if kind not in PLAYER_KINDS:
                raise ValueError(f"Unknown player kind: {kind!r}")
        if self.think_delay_ms < 0:
            raise ValueError("think_delay_ms must be >= 0")
        if self.max_plies < 0:
            raise ValueError("max_plies must be >= 0")
        if self.start_fen:
            position_from_fen(self.start_fen)
