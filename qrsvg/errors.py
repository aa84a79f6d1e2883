"""Error types."""

from __future__ import annotations


class QRSvgError(Exception):
    """Base error for all qrsvg operations."""


class GenerationError(QRSvgError):
    """The matrix generator could not encode the value at the requested level."""
