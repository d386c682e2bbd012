"""
Runtime configuration, read from the environment at call time.

Every entry point calls load_dotenv() first, so any of these can also live in
a local .env file:

  GITPET_STATE_PATH     state file (default: $XDG_CONFIG_HOME/gh/gh-pet.json)
  GITPET_LOGIN          GitHub login, skips asking the gh CLI
  GITHUB_TOKEN          token for the HTTP events fallback
  GITPET_HTTP_TIMEOUT   seconds for event fetches (default 10)
  GITPET_COUNT_ISSUES   let opened issues feed mood and activity total
"""

import os
from pathlib import Path
from typing import Optional

STATE_FILE_NAME = "gh-pet.json"
DEFAULT_HTTP_TIMEOUT = 10.0

_TRUTHY = {"1", "true", "yes", "on"}


def state_path() -> Path:
    override = os.environ.get("GITPET_STATE_PATH")
    if override:
        return Path(override).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return Path(config_home) / "gh" / STATE_FILE_NAME


def login_override() -> Optional[str]:
    login = os.environ.get("GITPET_LOGIN", "").strip()
    return login or None


def github_token() -> Optional[str]:
    token = os.environ.get("GITHUB_TOKEN", "").strip()
    return token or None


def http_timeout() -> float:
    raw = os.environ.get("GITPET_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_HTTP_TIMEOUT


def count_issues() -> bool:
    return os.environ.get("GITPET_COUNT_ISSUES", "").strip().lower() in _TRUTHY
