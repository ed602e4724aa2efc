"""Position — immutable snapshot of pieces, hand and side to move."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from pacosako.core.enums import Color, PieceType
from pacosako.core.hand import IDLE, Hand, Idle
from pacosako.core.piece import Piece
from pacosako.core.types import Tile

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True, eq=False)
class Position:
    """Pieces resting on the board, pieces in hand, and the side to move.

    ``pieces`` is an unordered collection: two positions compare equal when
    they hold the same pieces regardless of order. Positions are never
    mutated; :func:`pacosako.core.rules.do_action` returns new ones.
    """

    pieces: tuple[Piece, ...] = ()
    hand: Hand = field(default=IDLE)
    current_player: Color = Color.WHITE

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting layout, identities ``"0"`` to ``"31"``."""
        layout: list[tuple[Tile, Color, PieceType]] = []
        for f, pt in enumerate(_BACK_RANK):
            layout.append((Tile(f, 0), Color.WHITE, pt))
        for f in range(8):
            layout.append((Tile(f, 1), Color.WHITE, PieceType.PAWN))
        for f in range(8):
            layout.append((Tile(f, 6), Color.BLACK, PieceType.PAWN))
        for f, pt in enumerate(_BACK_RANK):
            layout.append((Tile(f, 7), Color.BLACK, pt))
        return cls.from_layout(layout)

    @classmethod
    def from_layout(cls, layout: Iterable[tuple[Tile, Color, PieceType]]) -> Position:
        """Build a position with an idle hand and White to move.

        Every piece gets a fresh sequential identity in iteration order.
        """
        pieces = tuple(
            Piece(piece_type, color, tile, str(i))
            for i, (tile, color, piece_type) in enumerate(layout)
        )
        return cls(pieces)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def lifted_pieces(self) -> tuple[Piece, ...]:
        return self.hand.pieces

    @property
    def is_idle(self) -> bool:
        """True when no piece is in hand."""
        return isinstance(self.hand, Idle)

    def all_pieces(self) -> Iterator[Piece]:
        """Resting pieces followed by lifted pieces."""
        yield from self.pieces
        yield from self.hand.pieces

    def pieces_at(self, tile: Tile) -> tuple[Piece, ...]:
        """Pieces resting on *tile* (0, 1 or 2 of them)."""
        return tuple(p for p in self.pieces if p.position == tile)

    def piece_at(self, tile: Tile, color: Color) -> Piece | None:
        for p in self.pieces:
            if p.position == tile and p.color == color:
                return p
        return None

    def promotable_pawns(self, color: Color) -> list[Piece]:
        """*color*'s resting pawns standing on the opponent's home row."""
        rank = color.promotion_rank
        return [
            p
            for p in self.pieces
            if p.color == color
            and p.piece_type == PieceType.PAWN
            and p.position.rank == rank
        ]

    # ── Derived copies ───────────────────────────────────────────────────

    def with_current_player(self, color: Color) -> Position:
        return replace(self, current_player=color)

    # ── Validation ───────────────────────────────────────────────────────

    def validate(self) -> None:
        """Raise ``ValueError`` if a structural invariant is broken."""
        seen_tiles: set[tuple[Tile, Color]] = set()
        for p in self.pieces:
            if not p.position.is_valid:
                raise ValueError(f"Piece {p.identity!r} is off the board: {p.position!r}")
            key = (p.position, p.color)
            if key in seen_tiles:
                raise ValueError(
                    f"Two {p.color.name} pieces on {p.position}"
                )
            seen_tiles.add(key)

        identities = [p.identity for p in self.all_pieces()]
        if len(identities) != len(set(identities)):
            raise ValueError("Piece identities are not unique")

    @property
    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and self.hand == other.hand
            and frozenset(self.pieces) == frozenset(other.pieces)
        )

    def __hash__(self) -> int:
        return hash((frozenset(self.pieces), self.hand, self.current_player))

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                here = self.pieces_at(Tile(file, rank))
                row.append("".join(sorted(str(p) for p in here)).ljust(2, "."))
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a  b  c  d  e  f  g  h")
        held = ", ".join(f"{p}@{p.position}" for p in self.hand.pieces) or "-"
        rows.append(f"to move: {self.current_player}, in hand: {held}")
        return "\n".join(rows)
