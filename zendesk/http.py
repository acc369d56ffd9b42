from __future__ import annotations

import logging
from importlib import metadata

import httpx

from .config import Config

log = logging.getLogger(__name__)


def package_version() -> str:
    try:
        return metadata.version("zendesk")
    except Exception:
        return "0.0.0"


def auth_for(cfg: Config) -> tuple[str, str]:
    """Basic-auth pair for Zendesk. An API token takes priority over a password."""
    if cfg.token is not None:
        return f"{cfg.username}/token", cfg.token
    return cfg.username, cfg.password or ""


def auth_scheme(cfg: Config) -> str:
    return "token" if cfg.token is not None else "password"


def make_client(cfg: Config, *, timeout_s: float = 15.0) -> httpx.Client:
    base_url = cfg.url.rstrip("/")
    log.debug("zendesk client for %s using %s auth", base_url, auth_scheme(cfg))
    return httpx.Client(
        base_url=base_url,
        auth=httpx.BasicAuth(*auth_for(cfg)),
        timeout=timeout_s,
        headers={"User-Agent": f"zendesk-python/{package_version()}"},
        follow_redirects=True,
    )
