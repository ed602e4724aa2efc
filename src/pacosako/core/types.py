"""Tile value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Coordinates are not bounds-checked on construction; callers pass in-range
values. :attr:`Tile.is_valid` is available where a check is wanted.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILE_NAMES = "abcdefgh"
_RANK_NAMES = "12345678"
_PLACEHOLDER = "X"


@dataclass(frozen=True, slots=True, order=True)
class Tile:
    """A board square addressed by (file, rank), both 0–7."""

    file: int
    rank: int

    @classmethod
    def from_index(cls, index: int) -> Tile:
        """Tile for a flat index 0–63."""
        return cls(index % 8, index // 8)

    @property
    def index(self) -> int:
        """Flat index ``file + 8 * rank``."""
        return self.file + 8 * self.rank

    @property
    def is_valid(self) -> bool:
        return 0 <= self.file < 8 and 0 <= self.rank < 8

    def __str__(self) -> str:
        return tile_name(self)


def _lookup(table: str, i: int) -> str:
    return table[i] if 0 <= i < len(table) else _PLACEHOLDER


def tile_name(tile: Tile) -> str:
    """Human-readable name, e.g. ``Tile(6, 3)`` → ``'g4'``.

    Out-of-range components render as ``'X'`` rather than failing.
    """
    return _lookup(_FILE_NAMES, tile.file) + _lookup(_RANK_NAMES, tile.rank)


def parse_tile(name: str) -> Tile:
    """Parse a tile name, e.g. ``'e4'`` → ``Tile(4, 3)``."""
    if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in _RANK_NAMES:
        raise ValueError(f"Invalid tile name: {name!r}")
    return Tile(_FILE_NAMES.index(name[0]), _RANK_NAMES.index(name[1]))


ALL_TILES: tuple[Tile, ...] = tuple(Tile.from_index(i) for i in range(64))
