"""shrinkgen – value generation and shrinking for property-based tests."""

from .errors import ShrinkgenError, ConfigurationError, GenerationExhaustedError, UsagePolicyViolation
from .random import RandomSource
from .stream import Stream
from .arbitrary import (
    Arbitrary,
    Shrinkable,
    SetConstraints,
    array_of,
    deduplicate,
    filter_arbitrary,
    integer,
    map_arbitrary,
    set_of,
)

__version__ = "0.1.0"

__all__ = [
    "ShrinkgenError",
    "ConfigurationError",
    "GenerationExhaustedError",
    "UsagePolicyViolation",
    "RandomSource",
    "Stream",
    "Arbitrary",
    "Shrinkable",
    "SetConstraints",
    "array_of",
    "deduplicate",
    "filter_arbitrary",
    "integer",
    "map_arbitrary",
    "set_of",
]
