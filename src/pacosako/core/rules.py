"""Action state machine: apply Lift / Place / Promote to a Position.

Every handler returns a new :class:`Position` or ``None`` when the action is
not allowed in the current state. Positions are never modified in place, so
a rejected action leaves the caller's value untouched.

The machine only guards structure (hand cardinality, one piece per color
per tile). Strategic legality is the business of a rules engine upstream.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from pacosako.core.action import Action, Lift, Place, Promote
from pacosako.core.enums import LiftPolicy, PieceType
from pacosako.core.hand import IDLE, HoldingOne, HoldingPair, hand_from_pieces
from pacosako.core.position import Position
from pacosako.core.types import Tile

_LOGGER = logging.getLogger(__name__)


def do_action(
    position: Position,
    action: Action,
    policy: LiftPolicy = LiftPolicy.FREE,
) -> Position | None:
    """Apply *action* to *position*.

    *policy* only affects :class:`Lift`; see :func:`lift`.
    """
    if isinstance(action, Lift):
        result = lift(position, action.tile, policy)
    elif isinstance(action, Place):
        result = place(position, action.tile)
    elif isinstance(action, Promote):
        result = promote(position, action.piece_type)
    else:
        raise TypeError(f"Not an action: {action!r}")

    if result is None:
        _LOGGER.debug("Rejected %s", action)
    return result


# ── Lift ────────────────────────────────────────────────────────────────────


def lift(
    position: Position,
    tile: Tile,
    policy: LiftPolicy = LiftPolicy.FREE,
) -> Position | None:
    """Move every piece on *tile* into the hand.

    Only one lift may be pending. Under :attr:`LiftPolicy.OWNED` the side to
    move must own at least one piece on the tile. Lifting an empty tile under
    the free policy changes nothing.
    """
    if not position.is_idle:
        return None

    lifted = position.pieces_at(tile)
    if policy == LiftPolicy.OWNED and not any(
        p.color == position.current_player for p in lifted
    ):
        return None

    remaining = tuple(p for p in position.pieces if p.position != tile)
    return replace(position, pieces=remaining, hand=hand_from_pieces(lifted))


# ── Place ───────────────────────────────────────────────────────────────────


def place(position: Position, tile: Tile) -> Position | None:
    """Put the hand down on *tile*."""
    hand = position.hand
    if isinstance(hand, HoldingOne):
        return _place_single(position, hand, tile)
    if isinstance(hand, HoldingPair):
        return _place_pair(position, hand, tile)
    return None


def _place_single(position: Position, hand: HoldingOne, tile: Tile) -> Position | None:
    placed = hand.piece.moved_to(tile)
    occupants = position.pieces_at(tile)

    if not occupants:
        return replace(position, pieces=position.pieces + (placed,), hand=IDLE)

    if len(occupants) == 1:
        if occupants[0].color == placed.color:
            return None
        return replace(position, pieces=position.pieces + (placed,), hand=IDLE)

    # Union on the target: chain. Our own piece of the union comes up.
    partner = next(p for p in occupants if p.color == placed.color)
    remaining = tuple(p for p in position.pieces if p != partner)
    return replace(position, pieces=remaining + (placed,), hand=HoldingOne(partner))


def _place_pair(position: Position, hand: HoldingPair, tile: Tile) -> Position | None:
    if position.pieces_at(tile):
        return None
    # Two pieces of one color can never rest on the same tile.
    if hand.first.color == hand.second.color:
        return None
    landed = tuple(p.moved_to(tile) for p in hand.pieces)
    return replace(position, pieces=position.pieces + landed, hand=IDLE)


# ── Promote ─────────────────────────────────────────────────────────────────


def promote(position: Position, piece_type: PieceType) -> Position | None:
    """Rewrite the side to move's single promotable pawn as *piece_type*."""
    candidates = position.promotable_pawns(position.current_player)
    if len(candidates) != 1:
        return None

    pawn = candidates[0]
    pieces = tuple(p.promoted_to(piece_type) if p == pawn else p for p in position.pieces)
    return replace(position, pieces=pieces)


def has_pending_promotion(position: Position) -> bool:
    """True when the side to move has exactly one pawn waiting to promote."""
    return len(position.promotable_pawns(position.current_player)) == 1
