"""Exchange notation: the plain-text 8×8 grid used to share positions.

Each tile is a two-character cell, white occupant first::

    .. .. .. .. .K .. .. ..     black king only
    .. .. PN .. .. .. .. ..     white pawn + black knight union
    P. P. P. P. P. P. P. P.     white pawns only

Rank 8 is the first row. A *library* is several grids separated by a line
holding only ``-``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from pacosako.core.errors import NotationSyntaxError
from pacosako.core.notation.models import (
    BlackOnly,
    Empty,
    Pair,
    TileState,
    WhiteOnly,
    make_tile_state,
    position_from_states,
    states_by_rank,
)
from pacosako.core.piece import CHAR_TYPES, TYPE_CHARS
from pacosako.core.position import Position

_LOGGER = logging.getLogger(__name__)

_CELL_RE = re.compile(r"[PRNBQK.]{2}")
_LIBRARY_SEPARATOR = "-"


# ── Export ──────────────────────────────────────────────────────────────────


def _cell_text(state: TileState) -> str:
    if isinstance(state, Empty):
        return ".."
    if isinstance(state, WhiteOnly):
        return TYPE_CHARS[state.piece_type] + "."
    if isinstance(state, BlackOnly):
        return "." + TYPE_CHARS[state.piece_type]
    if isinstance(state, Pair):
        return TYPE_CHARS[state.white] + TYPE_CHARS[state.black]
    raise TypeError(f"Not a tile state: {state!r}")


def position_to_exchange(position: Position) -> str:
    """Render the resting pieces of *position* as an 8-line grid."""
    return "\n".join(
        " ".join(_cell_text(state) for state in row)
        for row in states_by_rank(position)
    )


def library_to_string(positions: Iterable[Position]) -> str:
    """Render several positions as one library text."""
    return f"\n{_LIBRARY_SEPARATOR}\n".join(position_to_exchange(p) for p in positions)


# ── Import ──────────────────────────────────────────────────────────────────


def _parse_cell(text: str) -> TileState:
    if _CELL_RE.fullmatch(text) is None:
        raise NotationSyntaxError("exchange notation")
    white, black = (CHAR_TYPES.get(ch) for ch in text)
    return make_tile_state(white, black)


def _parse_row(line: str) -> list[TileState]:
    cells = [_parse_cell(cell) for cell in line.split(" ")]
    if len(cells) != 8:
        raise NotationSyntaxError("exchange notation")
    return cells


def parse_exchange(text: str) -> Position:
    """Parse an 8-line grid into a :class:`Position`.

    The result has an idle hand, White to move and fresh identities. Any
    deviation from the grammar raises :class:`NotationSyntaxError`.
    """
    lines = text.rstrip("\n").split("\n")
    if len(lines) != 8:
        _LOGGER.debug("Exchange grid has %d rows", len(lines))
        raise NotationSyntaxError("exchange notation")
    return position_from_states(_parse_row(line) for line in lines)


def parse_library(text: str) -> list[Position]:
    """Parse a library of grids separated by ``-`` lines.

    Blank lines around separators are ignored. Fails as a whole on the first
    malformed grid.
    """
    groups: list[list[str]] = [[]]
    for line in text.split("\n"):
        if line.strip() == _LIBRARY_SEPARATOR:
            groups.append([])
        else:
            groups[-1].append(line)

    positions: list[Position] = []
    for group in groups:
        grid = "\n".join(group).strip("\n")
        if not grid.strip():
            continue
        positions.append(parse_exchange(grid))
    return positions
