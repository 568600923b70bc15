"""Reference generators for exercising generation and shrinking."""

from .arbitraries import (
    CounterArbitrary,
    ForwardArbitrary,
    ForwardArrayArbitrary,
    SingleUseArbitrary,
    WithShrinkArbitrary,
    Generated,
    UsageViolation,
    GenerationOutcome,
    counter,
    forward,
    forward_array,
    single,
    with_shrink,
)

__all__ = [
    "CounterArbitrary",
    "ForwardArbitrary",
    "ForwardArrayArbitrary",
    "SingleUseArbitrary",
    "WithShrinkArbitrary",
    "Generated",
    "UsageViolation",
    "GenerationOutcome",
    "counter",
    "forward",
    "forward_array",
    "single",
    "with_shrink",
]
