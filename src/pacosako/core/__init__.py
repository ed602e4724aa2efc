"""Core domain layer — Paco Ŝako positions, actions and notations.

Pure Python with zero external dependencies.

Quick start::

    from pacosako.core import Lift, Place, Position, Tile, do_action

    pos = Position.initial()
    pos = do_action(pos, Lift(Tile(4, 1)))
    pos = do_action(pos, Place(Tile(4, 3)))
"""

from pacosako.core.action import (
    PROMOTE_CODE,
    Action,
    Lift,
    Place,
    Promote,
    action_from_code,
    action_to_code,
)
from pacosako.core.enums import Color, LiftPolicy, PieceType
from pacosako.core.errors import NotationSyntaxError, PacoSakoError, WireFormatError
from pacosako.core.hand import Hand, HoldingOne, HoldingPair, Idle
from pacosako.core.notation import (
    EMPTY_FEN,
    STARTING_FEN,
    parse_exchange,
    parse_library,
    position_from_fen,
    position_to_exchange,
    position_to_fen,
)
from pacosako.core.piece import Piece
from pacosako.core.position import Position
from pacosako.core.rules import do_action
from pacosako.core.types import Tile, parse_tile, tile_name

__all__ = [
    # Enums
    "Color",
    "LiftPolicy",
    "PieceType",
    # Types / helpers
    "Tile",
    "parse_tile",
    "tile_name",
    # Domain objects
    "Action",
    "Hand",
    "HoldingOne",
    "HoldingPair",
    "Idle",
    "Lift",
    "Piece",
    "Place",
    "Position",
    "Promote",
    "PROMOTE_CODE",
    "action_from_code",
    "action_to_code",
    "do_action",
    # Errors
    "NotationSyntaxError",
    "PacoSakoError",
    "WireFormatError",
    # Notation
    "EMPTY_FEN",
    "STARTING_FEN",
    "parse_exchange",
    "parse_library",
    "position_from_fen",
    "position_to_exchange",
    "position_to_fen",
]
