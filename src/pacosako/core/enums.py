"""Core enumerations for the Paco Ŝako domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color. Also used as "side to move"."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank index of this color's back row."""
        return 0 if self is Color.WHITE else 7

    @property
    def promotion_rank(self) -> int:
        """Rank index where this color's pawns promote (the opponent's home row)."""
        return self.opposite.home_rank

    @property
    def label(self) -> str:
        """Capitalised name used on the wire, e.g. ``"White"``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece types, in the order used by the notation tables."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6

    @property
    def label(self) -> str:
        """Capitalised name used on the wire, e.g. ``"Knight"``."""
        return self.name.capitalize()


class LiftPolicy(IntEnum):
    """Who may lift pieces from a tile."""

    FREE = auto()  # editor: anything may be lifted
    OWNED = auto()  # play: the side to move must own a piece on the tile
