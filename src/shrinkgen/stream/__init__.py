"""Restartable lazy sequences."""

from .stream import Stream

__all__ = [
    "Stream",
]
