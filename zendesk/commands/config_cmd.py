from __future__ import annotations

import logging

import typer

from .. import console
from ..config import Config, ConfigError, build_from_environment
from ..http import auth_scheme

log = logging.getLogger(__name__)

app = typer.Typer(help="Inspect the Zendesk connection settings taken from the environment.")


def _load_or_exit() -> Config:
    result = build_from_environment()
    if isinstance(result, ConfigError):
        log.debug("configuration rejected: %s", result.value)
        console.err(result.message)
        raise typer.Exit(code=2)
    return result


@app.command("check")
def check_config() -> None:
    """Validate ZENDESK_API_* variables."""
    _load_or_exit()
    console.ok("Zendesk configuration is valid.")


@app.command("show")
def show_config() -> None:
    """Print the resolved configuration with credentials masked."""
    cfg = _load_or_exit()
    token_state = "(set)" if cfg.token is not None else "(empty)"
    password_state = "(set)" if cfg.password is not None else "(empty)"
    console.console.print(
        f"url={cfg.url} username={cfg.username} token={token_state} password={password_state} auth={auth_scheme(cfg)}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
