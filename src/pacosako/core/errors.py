"""Exception types raised by the decoding layers."""

from __future__ import annotations


class PacoSakoError(Exception):
    """Base class for all errors raised by this package."""


class NotationSyntaxError(PacoSakoError, ValueError):
    """Grid or FEN text does not match the notation grammar."""

    def __init__(self, notation: str = "notation") -> None:
        super().__init__(f"Invalid {notation} syntax")


class WireFormatError(PacoSakoError, ValueError):
    """A JSON payload does not have the expected wire shape."""
