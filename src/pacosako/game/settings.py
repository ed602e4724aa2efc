"""Game settings data class."""

from __future__ import annotations

from dataclasses import dataclass

from pacosako.core.enums import LiftPolicy


@dataclass(frozen=True)
class GameSettings:
    """Policy knobs for a :class:`~pacosako.game.state.GameState`.

    Args:
        lift_policy: Whether the side to move must own a piece it lifts.
        auto_end_turn: Hand the turn to the opponent when a move completes.
    """

    lift_policy: LiftPolicy = LiftPolicy.OWNED
    auto_end_turn: bool = True

    # Presets
    @classmethod
    def play(cls) -> GameSettings:
        return cls(LiftPolicy.OWNED, True)

    @classmethod
    def editor(cls) -> GameSettings:
        """Free editing: lift anything, never change the side to move."""
        return cls(LiftPolicy.FREE, False)
