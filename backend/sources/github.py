"""
GitHub event source.

Events come from the `gh` CLI when it is installed and authenticated, and
from the public REST API over HTTP otherwise. Any failure (missing login,
network, auth, unparsable response) raises EventSourceError; callers must
not mutate state when that happens.
"""

import json
import logging
import re
import subprocess
from typing import Any, Optional

import httpx
from pydantic import ValidationError

import settings
from models.event import Event

logger = logging.getLogger(__name__)

API_ROOT = "https://api.github.com"
USER_AGENT = "gitpet"

_LOGIN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")


class EventSourceError(Exception):
    """The activity feed could not be retrieved."""


def _run_gh(args: list[str], timeout: float) -> str:
    result = subprocess.run(
        ["gh", *args],
        capture_output=True,
        text=True,
        timeout=timeout,
        check=True,
    )
    return result.stdout


def resolve_login() -> str:
    """GITPET_LOGIN if set, else whoever the gh CLI is logged in as."""
    login = settings.login_override()
    if login:
        return login
    try:
        login = _run_gh(["api", "user", "--jq", ".login"], settings.http_timeout()).strip()
    except (OSError, subprocess.SubprocessError) as e:
        raise EventSourceError(f"gh api user failed: {e}") from e
    if not login:
        raise EventSourceError("unable to determine GitHub login")
    return login


def check_login(login: str) -> str:
    if not _LOGIN.fullmatch(login or ""):
        raise EventSourceError(f"invalid GitHub login: {login!r}")
    return login


def parse_events(raw: Any) -> list[Event]:
    if not isinstance(raw, list):
        raise EventSourceError("unable to parse events: expected a JSON array")
    try:
        return [Event.model_validate(item) for item in raw]
    except ValidationError as e:
        raise EventSourceError(f"unable to parse events: {e}") from e


def fetch_events_gh(login: str, timeout: Optional[float] = None) -> list[Event]:
    check_login(login)
    timeout = timeout if timeout is not None else settings.http_timeout()
    out = _run_gh(["api", f"users/{login}/events"], timeout)
    try:
        raw = json.loads(out)
    except ValueError as e:
        raise EventSourceError(f"unable to parse events: {e}") from e
    return parse_events(raw)


def fetch_events_http(
    login: str,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.Client] = None,
) -> list[Event]:
    check_login(login)
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    timeout = timeout if timeout is not None else settings.http_timeout()

    owns_client = client is None
    if client is None:
        client = httpx.Client(base_url=API_ROOT, timeout=timeout)
    try:
        response = client.get(f"/users/{login}/events", headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise EventSourceError(f"github api request failed: {e}") from e
    finally:
        if owns_client:
            client.close()

    if response.status_code >= 400:
        raise EventSourceError(f"github api error: {response.text.strip()}")
    try:
        raw = response.json()
    except ValueError as e:
        raise EventSourceError(f"unable to parse events: {e}") from e
    return parse_events(raw)


def fetch_events(login: str, token: Optional[str] = None, prefer_gh: bool = True) -> list[Event]:
    """
    Recent public events for `login`.

    With prefer_gh the gh CLI is tried first; a missing or failing CLI drops
    through to the HTTP API. A response that arrives but does not parse is
    fatal and not retried.
    """
    if prefer_gh:
        try:
            return fetch_events_gh(login)
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("gh api events failed (%s), falling back to HTTP", e)
    return fetch_events_http(login, token=token or settings.github_token())
