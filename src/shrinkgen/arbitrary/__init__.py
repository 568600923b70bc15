"""Generators producing values together with their shrink trees."""

from .shrinkable import Shrinkable
from .definition import Arbitrary, ArbitraryMixin, FilterArbitrary, MapArbitrary, filter_arbitrary, map_arbitrary
from .integer import IntegerArbitrary, integer, halving_shrinkable, shrink_integer
from .array import ArrayArbitrary, array_of, max_length_from_min_length
from .unique import deduplicate, build_compare_filter
from .set import SetConstraints, set_of, normalize_set_constraints, build_complete_set_constraints

__all__ = [
    "Shrinkable",
    "Arbitrary",
    "ArbitraryMixin",
    "FilterArbitrary",
    "MapArbitrary",
    "filter_arbitrary",
    "map_arbitrary",
    "IntegerArbitrary",
    "integer",
    "halving_shrinkable",
    "shrink_integer",
    "ArrayArbitrary",
    "array_of",
    "max_length_from_min_length",
    "deduplicate",
    "build_compare_filter",
    "SetConstraints",
    "set_of",
    "normalize_set_constraints",
    "build_complete_set_constraints",
]
