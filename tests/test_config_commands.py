from __future__ import annotations

from typer.testing import CliRunner

from zendesk import config, main


def _set_env(monkeypatch, **values) -> None:
    for key in (config.ENV_URL, config.ENV_USERNAME, config.ENV_TOKEN, config.ENV_PASSWORD):
        monkeypatch.delenv(key, raising=False)
    for key, value in values.items():
        monkeypatch.setenv(key, value)


def test_config_check_ok(monkeypatch) -> None:
    _set_env(
        monkeypatch,
        ZENDESK_API_URL="http://zendesk.com",
        ZENDESK_API_USERNAME="username",
        ZENDESK_API_TOKEN="abc123",
    )
    result = CliRunner().invoke(main.app, ["config", "check"])
    assert result.exit_code == 0
    assert "Zendesk configuration is valid." in result.output


def test_config_check_missing_url(monkeypatch) -> None:
    _set_env(monkeypatch, ZENDESK_API_USERNAME="username", ZENDESK_API_TOKEN="abc123")
    result = CliRunner().invoke(main.app, ["config", "check"])
    assert result.exit_code == 2
    assert "ZENDESK_API_URL" in result.output


def test_config_check_missing_auth(monkeypatch) -> None:
    _set_env(monkeypatch, ZENDESK_API_URL="http://zendesk.com", ZENDESK_API_USERNAME="username")
    result = CliRunner().invoke(main.app, ["config", "check"])
    assert result.exit_code == 2
    assert "ZENDESK_API_TOKEN" in result.output


def test_config_show_masks_credentials(monkeypatch) -> None:
    _set_env(
        monkeypatch,
        ZENDESK_API_URL="http://zendesk.com",
        ZENDESK_API_USERNAME="username",
        ZENDESK_API_PASSWORD="hunter2",
    )
    result = CliRunner().invoke(main.app, ["config", "show"])
    assert result.exit_code == 0
    assert "url=http://zendesk.com" in result.output
    assert "token=(empty)" in result.output
    assert "password=(set)" in result.output
    assert "auth=password" in result.output
    assert "hunter2" not in result.output


def test_config_show_missing_username(monkeypatch) -> None:
    _set_env(monkeypatch, ZENDESK_API_URL="http://zendesk.com", ZENDESK_API_TOKEN="abc123")
    result = CliRunner().invoke(main.app, ["config", "show"])
    assert result.exit_code == 2
    assert "ZENDESK_API_USERNAME" in result.output


def test_verbose_flag_sets_up_logging(monkeypatch) -> None:
    _set_env(
        monkeypatch,
        ZENDESK_API_URL="http://zendesk.com",
        ZENDESK_API_USERNAME="username",
        ZENDESK_API_TOKEN="abc123",
    )
    calls = []
    monkeypatch.setattr(main, "setup_logging", lambda verbose: calls.append(verbose))
    app = main._build_app()
    result = CliRunner().invoke(app, ["-v", "config", "check"])
    assert result.exit_code == 0
    assert calls == [True]
