"""Shared pytest fixtures for the GitPet tests."""

import json
import os
from datetime import datetime

import pytest

from models.event import Event
from store import StateStore

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def load_week_fixture():
    """Return (now, login, events) from the week_events fixture."""
    with open(os.path.join(FIXTURES_DIR, "week_events.json")) as f:
        data = json.load(f)
    now = datetime.fromisoformat(data["now"].replace("Z", "+00:00"))
    events = [Event(**e) for e in data["events"]]
    return now, data["login"], events


@pytest.fixture
def week():
    return load_week_fixture()


@pytest.fixture
def raw_week_events():
    with open(os.path.join(FIXTURES_DIR, "week_events.json")) as f:
        return json.load(f)["events"]


@pytest.fixture
def store(tmp_path):
    return StateStore(tmp_path / "gh" / "gh-pet.json")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the real profile, gh login and Gemini."""
    monkeypatch.setenv("GITPET_STATE_PATH", str(tmp_path / "default-state.json"))
    for name in ("GITPET_LOGIN", "GITHUB_TOKEN", "GITPET_COUNT_ISSUES", "GEMINI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
