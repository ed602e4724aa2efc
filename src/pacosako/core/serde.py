"""JSON wire shape for pieces, actions and positions.

This is the format the UI and network layers exchange::

    {"pieceType": "Knight", "color": "White",
     "position": {"x": 6, "y": 0}, "identity": "6"}

    {"Lift": 12} | {"Place": 28} | {"Promote": "Queen"}

    {"pieces": [...], "liftedPieces": [...], "currentPlayer": "White"}
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pacosako.core.action import Action, Lift, Place, Promote
from pacosako.core.enums import Color, PieceType
from pacosako.core.errors import WireFormatError
from pacosako.core.hand import hand_from_pieces
from pacosako.core.piece import Piece
from pacosako.core.position import Position
from pacosako.core.types import Tile

_LOGGER = logging.getLogger(__name__)

_TYPE_BY_NAME: dict[str, PieceType] = {pt.label: pt for pt in PieceType}
_COLOR_BY_NAME: dict[str, Color] = {c.label: c for c in Color}


# ── Field helpers ───────────────────────────────────────────────────────────


def _field(d: Any, key: str) -> Any:
    if not isinstance(d, dict):
        raise WireFormatError(f"Expected an object, got {type(d).__name__}")
    try:
        return d[key]
    except KeyError:
        raise WireFormatError(f"Missing field: {key!r}") from None


def _int(value: Any, what: str) -> int:
    # bool is an int subclass; JSON true/false is not a coordinate.
    if not isinstance(value, int) or isinstance(value, bool):
        raise WireFormatError(f"{what} must be an integer, got {value!r}")
    return value


def _type_from_name(name: Any) -> PieceType:
    try:
        return _TYPE_BY_NAME[name]
    except (KeyError, TypeError):
        raise WireFormatError(f"Unknown piece type: {name!r}") from None


def _color_from_name(name: Any) -> Color:
    try:
        return _COLOR_BY_NAME[name]
    except (KeyError, TypeError):
        raise WireFormatError(f"Unknown color: {name!r}") from None


def _tile_from_index(value: Any) -> Tile:
    index = _int(value, "Tile index")
    if not (0 <= index < 64):
        raise WireFormatError(f"Tile index out of range: {index}")
    return Tile.from_index(index)


# ── Piece ───────────────────────────────────────────────────────────────────


def piece_to_dict(piece: Piece) -> dict[str, Any]:
    return {
        "pieceType": piece.piece_type.label,
        "color": piece.color.label,
        "position": {"x": piece.position.file, "y": piece.position.rank},
        "identity": piece.identity,
    }


def dict_to_piece(d: Any) -> Piece:
    coords = _field(d, "position")
    tile = Tile(_int(_field(coords, "x"), "x"), _int(_field(coords, "y"), "y"))
    if not tile.is_valid:
        raise WireFormatError(f"Piece position off the board: {tile!r}")

    identity = _field(d, "identity")
    if not isinstance(identity, str):
        raise WireFormatError(f"Identity must be a string, got {identity!r}")

    return Piece(
        piece_type=_type_from_name(_field(d, "pieceType")),
        color=_color_from_name(_field(d, "color")),
        position=tile,
        identity=identity,
    )


# ── Action ──────────────────────────────────────────────────────────────────


def action_to_dict(action: Action) -> dict[str, Any]:
    if isinstance(action, Lift):
        return {"Lift": action.tile.index}
    if isinstance(action, Place):
        return {"Place": action.tile.index}
    if isinstance(action, Promote):
        return {"Promote": action.piece_type.label}
    raise TypeError(f"Not an action: {action!r}")


def dict_to_action(d: Any) -> Action:
    if not isinstance(d, dict) or len(d) != 1:
        raise WireFormatError(f"An action is an object with one key, got {d!r}")

    ((kind, value),) = d.items()
    if kind == "Lift":
        return Lift(_tile_from_index(value))
    if kind == "Place":
        return Place(_tile_from_index(value))
    if kind == "Promote":
        return Promote(_type_from_name(value))
    raise WireFormatError(f"Unknown action kind: {kind!r}")


# ── Position ────────────────────────────────────────────────────────────────


def position_to_dict(position: Position) -> dict[str, Any]:
    return {
        "pieces": [piece_to_dict(p) for p in position.pieces],
        "liftedPieces": [piece_to_dict(p) for p in position.lifted_pieces],
        "currentPlayer": position.current_player.label,
    }


def _piece_list(value: Any, what: str) -> list[Piece]:
    if not isinstance(value, list):
        raise WireFormatError(f"{what} must be a list")
    return [dict_to_piece(item) for item in value]


def dict_to_position(d: Any) -> Position:
    pieces = _piece_list(_field(d, "pieces"), "pieces")
    lifted = _piece_list(_field(d, "liftedPieces"), "liftedPieces")
    current = _color_from_name(_field(d, "currentPlayer"))

    try:
        hand = hand_from_pieces(lifted)
        position = Position(tuple(pieces), hand, current)
        position.validate()
    except ValueError as exc:
        _LOGGER.debug("Rejected position payload: %s", exc)
        raise WireFormatError(str(exc)) from exc
    return position


# ── JSON text ───────────────────────────────────────────────────────────────


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise WireFormatError(f"Invalid JSON: {exc.msg}") from exc


def action_to_json(action: Action) -> str:
    return json.dumps(action_to_dict(action))


def action_from_json(text: str) -> Action:
    return dict_to_action(_loads(text))


def position_to_json(position: Position) -> str:
    return json.dumps(position_to_dict(position))


def position_from_json(text: str) -> Position:
    return dict_to_position(_loads(text))
