from __future__ import annotations

from core.config import AppSettings, _parse_env_lines, write_user_env_vars


def test_defaults_point_at_local_backend(monkeypatch):
    for key in ("CINE_LIST_API_BASE_URL", "CINE_LIST_APP_ORIGIN", "CINE_LIST_RESET_PASSWORD_RELATIVE"):
        monkeypatch.delenv(key, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "http://localhost:8081"
    assert settings.reset_password_relative is True
    assert settings.follow_redirects is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CINE_LIST_API_BASE_URL", "https://cine.example.com")
    monkeypatch.setenv("CINE_LIST_RESET_PASSWORD_RELATIVE", "false")
    monkeypatch.setenv("CINE_LIST_HTTP_TIMEOUT_SECONDS", "3.5")

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "https://cine.example.com"
    assert settings.reset_password_relative is False
    assert settings.http_timeout_seconds == 3.5


def test_write_user_env_vars_merges_existing(tmp_path):
    env_path = tmp_path / "cine-list" / ".env"
    write_user_env_vars({"CINE_LIST_API_BASE_URL": "http://a"}, env_path)
    write_user_env_vars({"CINE_LIST_APP_ORIGIN": "http://b"}, env_path)

    data = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    assert data == {
        "CINE_LIST_API_BASE_URL": "http://a",
        "CINE_LIST_APP_ORIGIN": "http://b",
    }


def test_parse_env_lines_skips_comments_and_quotes():
    text = '# comment\n\nKEY="value"\nBROKEN\nOTHER=\'x\'\n'

    assert _parse_env_lines(text) == {"KEY": "value", "OTHER": "x"}
