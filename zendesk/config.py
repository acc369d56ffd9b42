from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

ENV_URL = "ZENDESK_API_URL"
ENV_USERNAME = "ZENDESK_API_USERNAME"
ENV_TOKEN = "ZENDESK_API_TOKEN"
ENV_PASSWORD = "ZENDESK_API_PASSWORD"


class ConfigError(str, Enum):
    """Reasons a `Config` could not be built. Exactly one is reported per failure."""

    MISSING_USERNAME = "missing_username"
    MISSING_URL = "missing_url"
    MISSING_AUTH = "missing_auth"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ConfigError.MISSING_USERNAME: f"Zendesk username is not set ({ENV_USERNAME}).",
    ConfigError.MISSING_URL: f"Zendesk URL is not set ({ENV_URL}).",
    ConfigError.MISSING_AUTH: f"Zendesk token or password is required ({ENV_TOKEN} or {ENV_PASSWORD}).",
}


@dataclass(frozen=True)
class Config:
    """Connection settings for Zendesk's API.

    Build it with `build()` or `build_from_environment()`; both guarantee that
    `url` and `username` are present and that at least one of `token` or
    `password` is set.
    """

    url: str
    username: str
    token: str | None
    password: str | None

    def __repr__(self) -> str:
        token_state = "(set)" if self.token is not None else "(empty)"
        password_state = "(set)" if self.password is not None else "(empty)"
        return (
            f"Config(url={self.url!r}, username={self.username!r}, "
            f"token={token_state}, password={password_state})"
        )


def build(
        url: str,
        username: str,
        password: str | None = None,
        token: str | None = None,
) -> Config | ConfigError:
    """Build a `Config` from explicit values.

    `url` and `username` are taken as given; only the presence of a token or a
    password is checked.
    """
    if token is None and password is None:
        return ConfigError.MISSING_AUTH
    return Config(url=url, username=username, token=token, password=password)


def build_from_environment(environ: Mapping[str, Any] | None = None) -> Config | ConfigError:
    """Build a `Config` from the ZENDESK_API_* variables.

    `environ` defaults to `os.environ`. A missing URL is reported before a
    missing username, and both before missing credentials.
    """
    if environ is None:
        environ = os.environ

    url = _lookup(environ, ENV_URL)
    if url is None:
        return ConfigError.MISSING_URL
    username = _lookup(environ, ENV_USERNAME)
    if username is None:
        return ConfigError.MISSING_USERNAME

    token = _lookup(environ, ENV_TOKEN)
    password = _lookup(environ, ENV_PASSWORD)
    return build(url, username, password=password, token=token)


def _lookup(environ: Mapping[str, Any], key: str) -> str | None:
    # unset, non-text and undecodable values all count as absent
    value = environ.get(key)
    if not isinstance(value, str):
        return None
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value
