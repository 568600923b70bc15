import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


@dataclass
class Settings:
    max_filter_attempts: int = 1000
    default_seed: int = 42
    num_samples: int = 10

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from SHRINKGEN_* environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            max_filter_attempts=_env_int("SHRINKGEN_MAX_FILTER_ATTEMPTS", defaults.max_filter_attempts, minimum=1),
            default_seed=_env_int("SHRINKGEN_SEED", defaults.default_seed, minimum=0),
            num_samples=_env_int("SHRINKGEN_NUM_SAMPLES", defaults.num_samples, minimum=0),
        )


def _env_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
