"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from pacosako.core.enums import Color, PieceType
from pacosako.core.types import Tile

# Type letter used by both notations (colour is carried elsewhere)
TYPE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
CHAR_TYPES: dict[str, PieceType] = {v: k for k, v in TYPE_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for one physical piece.

    ``identity`` is assigned when the piece is created and survives every
    action, so consumers can follow the same piece across snapshots.
    """

    piece_type: PieceType
    color: Color
    position: Tile
    identity: str

    # ── Derived copies ───────────────────────────────────────────────────

    def moved_to(self, tile: Tile) -> Piece:
        return replace(self, position=tile)

    def promoted_to(self, piece_type: PieceType) -> Piece:
        return replace(self, piece_type=piece_type)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Type letter, uppercase for white and lowercase for black."""
        char = TYPE_CHARS[self.piece_type]
        return char if self.color == Color.WHITE else char.lower()
