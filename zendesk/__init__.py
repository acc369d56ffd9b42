from .config import Config, ConfigError, build, build_from_environment
from .errors import ConfigurationError, require
from .http import auth_for, make_client

__all__ = [
    "Config",
    "ConfigError",
    "ConfigurationError",
    "auth_for",
    "build",
    "build_from_environment",
    "make_client",
    "require",
]
