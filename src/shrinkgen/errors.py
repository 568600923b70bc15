"""Error taxonomy shared by every generator in the package."""


class ShrinkgenError(Exception):
    """Base class for errors raised by shrinkgen itself."""


class ConfigurationError(ShrinkgenError):
    """Raised when a generator is built from invalid or conflicting constraints."""


class GenerationExhaustedError(ShrinkgenError):
    """Raised when a filtered generator runs out of attempts."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class UsagePolicyViolation(ShrinkgenError):
    """Raised when a single-use generator is asked for a second value."""
