"""Action value objects and their compact integer codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pacosako.core.enums import PieceType
from pacosako.core.types import Tile


@dataclass(frozen=True, slots=True)
class Lift:
    """Pick up everything resting on *tile*."""

    tile: Tile

    def __str__(self) -> str:
        return f"lift {self.tile}"


@dataclass(frozen=True, slots=True)
class Place:
    """Put the lifted pieces down on *tile*."""

    tile: Tile

    def __str__(self) -> str:
        return f"place {self.tile}"


@dataclass(frozen=True, slots=True)
class Promote:
    """Turn the side to move's promotable pawn into *piece_type*."""

    piece_type: PieceType

    def __str__(self) -> str:
        return f"promote {self.piece_type.label}"


Action: TypeAlias = Lift | Place | Promote

# ── Compact codes ───────────────────────────────────────────────────────────
#
# 1..64 lift, 65..128 place, 129 promote (the type is not encoded).

PROMOTE_CODE = 129


def action_to_code(action: Action) -> int:
    """Encode *action* as a single integer in 1..129."""
    if isinstance(action, Lift):
        return 1 + action.tile.index
    if isinstance(action, Place):
        return 65 + action.tile.index
    if isinstance(action, Promote):
        return PROMOTE_CODE
    raise TypeError(f"Not an action: {action!r}")


def action_from_code(code: int) -> Lift | Place:
    """Decode a lift/place code. Promotion codes carry no type and are rejected."""
    if 1 <= code <= 64:
        return Lift(Tile.from_index(code - 1))
    if 65 <= code <= 128:
        return Place(Tile.from_index(code - 65))
    raise ValueError(f"Invalid action code: {code!r}")
