"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

from pacosako.core.enums import Color, PieceType
from pacosako.core.position import Position
from pacosako.core.types import Tile

Placement = tuple[tuple[int, int], Color, PieceType]


@pytest.fixture
def initial() -> Position:
    return Position.initial()


@pytest.fixture
def make_position() -> Callable[..., Position]:
    """Build a position from ``((file, rank), color, type)`` placements."""

    def _make(*placements: Placement, to_move: Color = Color.WHITE) -> Position:
        layout = [(Tile(f, r), color, pt) for (f, r), color, pt in placements]
        return Position.from_layout(layout).with_current_player(to_move)

    return _make


@pytest.fixture(autouse=True)
def _debug_logging(caplog: pytest.LogCaptureFixture) -> Iterator[None]:
    """Capture the package's debug logs so tests can assert on them."""
    with caplog.at_level(logging.DEBUG, logger="pacosako"):
        yield
