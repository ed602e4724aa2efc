"""Extended FEN parsing and serialization.

Single pieces use the usual FEN letters (uppercase white, lowercase black).
A union is one letter from a 21-letter alphabet, one per unordered pair of
types. The lowercase letter of pair ``(x, y)`` means black ``x`` with white
``y``; the uppercase letter is the mirror, white ``x`` with black ``y``.
Pairs of equal types are written uppercase.

Only the board field carries information. The remaining fields exist for
compatibility with variant-chess viewers and are written as placeholders.
"""

from __future__ import annotations

import logging

from pacosako.core.enums import PieceType
from pacosako.core.errors import NotationSyntaxError
from pacosako.core.notation.models import (
    BlackOnly,
    Empty,
    Pair,
    TileState,
    WhiteOnly,
    position_from_states,
    states_by_rank,
)
from pacosako.core.piece import CHAR_TYPES, TYPE_CHARS
from pacosako.core.position import Position

_LOGGER = logging.getLogger(__name__)

EMPTY_FEN = "8/8/8/8/8/8/8/8 w 0 AHah - -"
STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w 0 AHah - -"

_TRAILING_FIELDS = "w 0 AHah - -"

_TYPE_ORDER: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
)
_PAIR_ALPHABET = "acdefghijlmostuvwxyz_"


def _build_pair_table() -> dict[tuple[PieceType, PieceType], str]:
    pairs = [
        (low, high)
        for i, low in enumerate(_TYPE_ORDER)
        for high in _TYPE_ORDER[i:]
    ]
    return dict(zip(pairs, _PAIR_ALPHABET))


# (lower type, higher type) -> letter. The only table; both directions use it.
_PAIR_TABLE: dict[tuple[PieceType, PieceType], str] = _build_pair_table()
_PAIR_TABLE_REV: dict[str, tuple[PieceType, PieceType]] = {
    v: k for k, v in _PAIR_TABLE.items()
}


# ── Characters ──────────────────────────────────────────────────────────────


def _pair_char(white: PieceType, black: PieceType) -> str:
    if (black, white) in _PAIR_TABLE:
        char = _PAIR_TABLE[(black, white)]
        return char.upper() if white == black else char
    return _PAIR_TABLE[(white, black)].upper()


def _state_char(state: TileState) -> str:
    if isinstance(state, WhiteOnly):
        return TYPE_CHARS[state.piece_type]
    if isinstance(state, BlackOnly):
        return TYPE_CHARS[state.piece_type].lower()
    if isinstance(state, Pair):
        return _pair_char(state.white, state.black)
    raise TypeError(f"Not an occupied tile state: {state!r}")


def _char_state(ch: str) -> TileState:
    if ch in CHAR_TYPES:
        return WhiteOnly(CHAR_TYPES[ch])
    if ch.upper() in CHAR_TYPES and ch.islower():
        return BlackOnly(CHAR_TYPES[ch.upper()])

    pair = _PAIR_TABLE_REV.get(ch.lower())
    if pair is None:
        raise NotationSyntaxError("FEN")
    first, second = pair
    if ch.isupper():
        return Pair(white=first, black=second)
    return Pair(white=second, black=first)


# ── Export ──────────────────────────────────────────────────────────────────


def _rank_text(row: list[TileState]) -> str:
    text = ""
    empty = 0
    for state in row:
        if isinstance(state, Empty):
            empty += 1
            continue
        if empty:
            text += str(empty)
            empty = 0
        text += _state_char(state)
    if empty:
        text += str(empty)
    return text


def position_to_fen(position: Position) -> str:
    """Serialise the resting pieces of *position* to extended FEN."""
    board = "/".join(_rank_text(row) for row in states_by_rank(position))
    return f"{board} {_TRAILING_FIELDS}"


# ── Import ──────────────────────────────────────────────────────────────────


def _parse_rank(text: str) -> list[TileState]:
    row: list[TileState] = []
    for ch in text:
        if ch in "0123456789":
            step = int(ch)
            if not (1 <= step <= 8):
                raise NotationSyntaxError("FEN")
            row.extend(Empty() for _ in range(step))
        else:
            row.append(_char_state(ch))
        if len(row) > 8:
            raise NotationSyntaxError("FEN")
    if len(row) != 8:
        raise NotationSyntaxError("FEN")
    return row


def position_from_fen(fen: str) -> Position:
    """Parse extended FEN into a :class:`Position`.

    Only the board field is read; the hand is idle, White moves, and every
    piece gets a fresh identity.
    """
    parts = fen.split()
    if not parts:
        raise NotationSyntaxError("FEN")

    ranks = parts[0].split("/")
    if len(ranks) != 8:
        _LOGGER.debug("FEN board has %d ranks: %r", len(ranks), fen)
        raise NotationSyntaxError("FEN")
    return position_from_states([_parse_rank(rank) for rank in ranks])
