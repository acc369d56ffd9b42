from __future__ import annotations

from .config import Config, ConfigError


class ConfigurationError(Exception):
    """Raised by `require()` when a configuration could not be built."""

    def __init__(self, error: ConfigError):
        super().__init__(error.message)
        self.error = error


def require(result: Config | ConfigError) -> Config:
    if isinstance(result, ConfigError):
        raise ConfigurationError(result)
    return result
