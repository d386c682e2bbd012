"""Tests for environment configuration."""

from pathlib import Path

import pytest

import settings


def test_state_path_override(monkeypatch, tmp_path):
    monkeypatch.setenv("GITPET_STATE_PATH", str(tmp_path / "pet.json"))
    assert settings.state_path() == tmp_path / "pet.json"


def test_state_path_under_xdg(monkeypatch, tmp_path):
    monkeypatch.delenv("GITPET_STATE_PATH")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert settings.state_path() == tmp_path / "gh" / "gh-pet.json"


def test_state_path_under_home(monkeypatch, tmp_path):
    monkeypatch.delenv("GITPET_STATE_PATH")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert settings.state_path() == Path(tmp_path) / ".config" / "gh" / "gh-pet.json"


@pytest.mark.parametrize("raw,expected", [(None, 10.0), ("2.5", 2.5), ("soon", 10.0)])
def test_http_timeout(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("GITPET_HTTP_TIMEOUT", raising=False)
    else:
        monkeypatch.setenv("GITPET_HTTP_TIMEOUT", raw)
    assert settings.http_timeout() == expected


@pytest.mark.parametrize("raw,expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("", False)])
def test_count_issues(monkeypatch, raw, expected):
    monkeypatch.setenv("GITPET_COUNT_ISSUES", raw)
    assert settings.count_issues() is expected


def test_blank_login_and_token_are_none(monkeypatch):
    monkeypatch.setenv("GITPET_LOGIN", "  ")
    monkeypatch.setenv("GITHUB_TOKEN", "")
    assert settings.login_override() is None
    assert settings.github_token() is None
