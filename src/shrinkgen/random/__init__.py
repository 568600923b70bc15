"""Seeded random sources."""

from .source import RandomSource, INT32_MIN, INT32_MAX, INT64_MIN, INT64_MAX, check_int_bounds

__all__ = [
    "RandomSource",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "check_int_bounds",
]
