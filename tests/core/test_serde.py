"""Tests for the JSON wire shape."""

import json

import pytest

from pacosako.core.action import Lift, Place, Promote
from pacosako.core.enums import Color, PieceType
from pacosako.core.errors import WireFormatError
from pacosako.core.hand import HoldingPair
from pacosako.core.piece import Piece
from pacosako.core.position import Position
from pacosako.core.rules import do_action
from pacosako.core.serde import (
    action_from_json,
    action_to_dict,
    action_to_json,
    dict_to_action,
    dict_to_piece,
    dict_to_position,
    piece_to_dict,
    position_from_json,
    position_to_dict,
    position_to_json,
)
from pacosako.core.types import Tile


def _piece_dict(**overrides):
    d = {
        "pieceType": "Knight",
        "color": "White",
        "position": {"x": 6, "y": 0},
        "identity": "6",
    }
    d.update(overrides)
    return d


class TestPiece:
    def test_shape(self) -> None:
        piece = Piece(PieceType.KNIGHT, Color.WHITE, Tile(6, 0), "6")
        assert piece_to_dict(piece) == _piece_dict()

    def test_decode(self) -> None:
        piece = dict_to_piece(_piece_dict(color="Black", pieceType="Queen"))
        assert piece == Piece(PieceType.QUEEN, Color.BLACK, Tile(6, 0), "6")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"pieceType": "Pawns"},
            {"pieceType": "pawn"},
            {"pieceType": 1},
            {"color": "Red"},
            {"position": {"x": 8, "y": 0}},
            {"position": {"x": True, "y": 0}},
            {"position": {"x": "1", "y": 0}},
            {"position": [1, 0]},
            {"identity": 6},
        ],
    )
    def test_invalid_fields_raise(self, overrides) -> None:
        with pytest.raises(WireFormatError):
            dict_to_piece(_piece_dict(**overrides))

    def test_missing_field_raises(self) -> None:
        d = _piece_dict()
        del d["identity"]
        with pytest.raises(WireFormatError, match="identity"):
            dict_to_piece(d)


class TestAction:
    def test_shapes(self) -> None:
        assert action_to_dict(Lift(Tile(4, 1))) == {"Lift": 12}
        assert action_to_dict(Place(Tile(4, 3))) == {"Place": 28}
        assert action_to_dict(Promote(PieceType.QUEEN)) == {"Promote": "Queen"}

    def test_decode(self) -> None:
        assert dict_to_action({"Lift": 12}) == Lift(Tile(4, 1))
        assert dict_to_action({"Place": 63}) == Place(Tile(7, 7))
        assert dict_to_action({"Promote": "Knight"}) == Promote(PieceType.KNIGHT)

    @pytest.mark.parametrize(
        "payload",
        [
            {"Jump": 1},
            {"Lift": 64},
            {"Lift": -1},
            {"Place": "12"},
            {"Promote": "Emperor"},
            {"Lift": 1, "Place": 2},
            {},
            [1],
        ],
    )
    def test_invalid_raises(self, payload) -> None:
        with pytest.raises(WireFormatError):
            dict_to_action(payload)

    def test_json_text(self) -> None:
        assert json.loads(action_to_json(Place(Tile(0, 1)))) == {"Place": 8}
        assert action_from_json('{"Promote": "Rook"}') == Promote(PieceType.ROOK)


class TestPosition:
    def test_shape(self, initial: Position) -> None:
        d = position_to_dict(initial)
        assert set(d) == {"pieces", "liftedPieces", "currentPlayer"}
        assert len(d["pieces"]) == 32
        assert d["liftedPieces"] == []
        assert d["currentPlayer"] == "White"

    def test_round_trip_keeps_identity(self, initial: Position) -> None:
        assert position_from_json(position_to_json(initial)) == initial

    def test_round_trip_with_hand(self, initial: Position) -> None:
        lifted = do_action(initial, Lift(Tile(4, 1))).with_current_player(Color.BLACK)
        decoded = dict_to_position(position_to_dict(lifted))
        assert decoded == lifted
        assert decoded.lifted_pieces[0].position == Tile(4, 1)

    def test_three_lifted_rejected(self, initial: Position) -> None:
        d = position_to_dict(Position())
        d["liftedPieces"] = [piece_to_dict(p) for p in initial.pieces[:3]]
        with pytest.raises(WireFormatError):
            dict_to_position(d)

    def test_same_color_lifted_pair_decodes(self) -> None:
        d = {
            "pieces": [],
            "liftedPieces": [
                _piece_dict(identity="1"),
                _piece_dict(identity="2", pieceType="Pawn"),
            ],
            "currentPlayer": "White",
        }
        pos = dict_to_position(d)
        assert isinstance(pos.hand, HoldingPair)
        assert {p.color for p in pos.lifted_pieces} == {Color.WHITE}
        assert position_to_dict(pos) == d

    def test_same_color_stack_rejected(self) -> None:
        d = {
            "pieces": [
                _piece_dict(identity="1"),
                _piece_dict(identity="2", pieceType="Pawn"),
            ],
            "liftedPieces": [],
            "currentPlayer": "White",
        }
        with pytest.raises(WireFormatError):
            dict_to_position(d)

    def test_bad_json_raises(self) -> None:
        with pytest.raises(WireFormatError, match="Invalid JSON"):
            position_from_json("{not json")

    def test_pieces_must_be_list(self) -> None:
        with pytest.raises(WireFormatError):
            dict_to_position({"pieces": {}, "liftedPieces": [], "currentPlayer": "White"})
