"""Per-tile summary shared by the notation codecs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from pacosako.core.enums import Color, PieceType
from pacosako.core.position import Position
from pacosako.core.types import Tile


@dataclass(frozen=True, slots=True)
class Empty:
    pass


@dataclass(frozen=True, slots=True)
class WhiteOnly:
    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class BlackOnly:
    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class Pair:
    white: PieceType
    black: PieceType


TileState: TypeAlias = Empty | WhiteOnly | BlackOnly | Pair

EMPTY = Empty()


def make_tile_state(white: PieceType | None, black: PieceType | None) -> TileState:
    """Tile state from the optional white and black occupant types."""
    if white is None and black is None:
        return EMPTY
    if black is None:
        return WhiteOnly(white)
    if white is None:
        return BlackOnly(black)
    return Pair(white, black)


def tile_state(position: Position, tile: Tile) -> TileState:
    """Summarise the resting pieces on *tile*. Lifted pieces are ignored."""
    white = position.piece_at(tile, Color.WHITE)
    black = position.piece_at(tile, Color.BLACK)
    return make_tile_state(
        white.piece_type if white else None,
        black.piece_type if black else None,
    )


def position_from_states(rows: Iterable[Iterable[TileState]]) -> Position:
    """Build a position from rows of tile states, rank 8 first.

    Used by every importer: the hand is idle, White moves, and identities
    are handed out in reading order.
    """
    layout: list[tuple[Tile, Color, PieceType]] = []
    for row_index, row in enumerate(rows):
        rank = 7 - row_index
        for file, state in enumerate(row):
            tile = Tile(file, rank)
            if isinstance(state, WhiteOnly):
                layout.append((tile, Color.WHITE, state.piece_type))
            elif isinstance(state, BlackOnly):
                layout.append((tile, Color.BLACK, state.piece_type))
            elif isinstance(state, Pair):
                layout.append((tile, Color.WHITE, state.white))
                layout.append((tile, Color.BLACK, state.black))
    return Position.from_layout(layout)


def states_by_rank(position: Position) -> list[list[TileState]]:
    """Tile states as rows of 8, rank 8 first."""
    return [
        [tile_state(position, Tile(file, rank)) for file in range(8)]
        for rank in range(7, -1, -1)
    ]
