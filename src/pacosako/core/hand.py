"""Hand state: the pieces lifted between a Lift and a terminating Place.

Only three shapes exist, so a hand can never hold more than two pieces:

* :class:`Idle`: nothing lifted.
* :class:`HoldingOne`: a single piece, either freshly lifted or picked
  up from a union during a chain.
* :class:`HoldingPair`: two pieces, either a whole union lifted from its
  tile (one of each color) or a same-colored pair handed over by the rules
  engine during a chain.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from pacosako.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Idle:
    @property
    def pieces(self) -> tuple[Piece, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class HoldingOne:
    piece: Piece

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return (self.piece,)


@dataclass(frozen=True, slots=True)
class HoldingPair:
    first: Piece
    second: Piece

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return (self.first, self.second)


Hand: TypeAlias = Idle | HoldingOne | HoldingPair

IDLE = Idle()


def hand_from_pieces(pieces: Iterable[Piece]) -> Hand:
    """Build the hand matching *pieces*; more than two is an error."""
    held = tuple(pieces)
    if not held:
        return IDLE
    if len(held) == 1:
        return HoldingOne(held[0])
    if len(held) == 2:
        return HoldingPair(held[0], held[1])
    raise ValueError(f"A hand holds at most two pieces, got {len(held)}")
