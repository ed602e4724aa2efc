"""Game management layer: action history and its storage.

Quick start::

    from pacosako.core import Color, Lift, Place, Tile
    from pacosako.game import GameState

    state = GameState()
    state.apply_action(Lift(Tile(4, 1)))
    state.apply_action(Place(Tile(4, 3)))
    assert state.side_to_move == Color.BLACK
"""

from pacosako.game.record import GameRecord
from pacosako.game.settings import GameSettings
from pacosako.game.state import ActionRecord, GameState

__all__ = [
    "ActionRecord",
    "GameRecord",
    "GameSettings",
    "GameState",
]
