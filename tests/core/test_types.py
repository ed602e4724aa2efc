"""Tests for tiles, enums and action codes."""

import pytest

from pacosako.core.action import (
    PROMOTE_CODE,
    Lift,
    Place,
    Promote,
    action_from_code,
    action_to_code,
)
from pacosako.core.enums import Color, PieceType
from pacosako.core.types import ALL_TILES, Tile, parse_tile, tile_name


class TestTile:
    def test_index_formula(self) -> None:
        assert Tile(0, 0).index == 0
        assert Tile(7, 0).index == 7
        assert Tile(0, 1).index == 8
        assert Tile(7, 7).index == 63
        assert Tile(6, 3).index == 30

    def test_from_index(self) -> None:
        assert Tile.from_index(30) == Tile(6, 3)
        assert Tile.from_index(63) == Tile(7, 7)

    def test_index_is_bijective(self) -> None:
        assert [t.index for t in ALL_TILES] == list(range(64))
        assert len(set(ALL_TILES)) == 64

    def test_equality_needs_both_components(self) -> None:
        assert Tile(1, 2) == Tile(1, 2)
        assert Tile(1, 2) != Tile(2, 1)

    def test_is_valid(self) -> None:
        assert Tile(0, 7).is_valid
        assert not Tile(8, 0).is_valid
        assert not Tile(0, -1).is_valid


class TestTileNames:
    def test_name(self) -> None:
        assert tile_name(Tile(6, 3)) == "g4"
        assert tile_name(Tile(0, 0)) == "a1"
        assert str(Tile(7, 7)) == "h8"

    def test_out_of_range_uses_placeholder(self) -> None:
        assert tile_name(Tile(8, 0)) == "X1"
        assert tile_name(Tile(0, 9)) == "aX"
        assert tile_name(Tile(-1, -1)) == "XX"

    def test_parse(self) -> None:
        assert parse_tile("e4") == Tile(4, 3)
        assert parse_tile("h8") == Tile(7, 7)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44"])
    def test_parse_invalid_raises(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_tile(name)


class TestEnums:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_promotion_rank(self) -> None:
        assert Color.WHITE.promotion_rank == 7
        assert Color.BLACK.promotion_rank == 0

    def test_labels(self) -> None:
        assert Color.BLACK.label == "Black"
        assert [pt.label for pt in PieceType] == [
            "Pawn", "Rook", "Knight", "Bishop", "Queen", "King",
        ]


class TestActionCodes:
    def test_lift_codes(self) -> None:
        assert action_to_code(Lift(Tile(0, 0))) == 1
        assert action_to_code(Lift(Tile(7, 7))) == 64

    def test_place_codes(self) -> None:
        assert action_to_code(Place(Tile(0, 0))) == 65
        assert action_to_code(Place(Tile(7, 7))) == 128

    def test_promote_code_has_no_type(self) -> None:
        assert action_to_code(Promote(PieceType.QUEEN)) == PROMOTE_CODE
        assert action_to_code(Promote(PieceType.KNIGHT)) == PROMOTE_CODE

    def test_decode(self) -> None:
        assert action_from_code(13) == Lift(Tile(4, 1))
        assert action_from_code(65 + 28) == Place(Tile(4, 3))

    @pytest.mark.parametrize("code", [0, 129, 200, -1])
    def test_decode_invalid_raises(self, code: int) -> None:
        with pytest.raises(ValueError):
            action_from_code(code)
