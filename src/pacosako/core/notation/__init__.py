"""Notation package: exchange grid and extended FEN parsing and serialization."""

from pacosako.core.notation.exchange import (
    library_to_string,
    parse_exchange,
    parse_library,
    position_to_exchange,
)
from pacosako.core.notation.fen import (
    EMPTY_FEN,
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)
from pacosako.core.notation.models import (
    BlackOnly,
    Empty,
    Pair,
    TileState,
    WhiteOnly,
    tile_state,
)

__all__ = [
    "EMPTY_FEN",
    "STARTING_FEN",
    "BlackOnly",
    "Empty",
    "Pair",
    "TileState",
    "WhiteOnly",
    "tile_state",
    "position_from_fen",
    "position_to_fen",
    "position_to_exchange",
    "parse_exchange",
    "parse_library",
    "library_to_string",
]
