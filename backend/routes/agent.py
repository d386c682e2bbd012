import asyncio
import json
import logging
import random
from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Request, Response
from pydantic import BaseModel, Field, ValidationError, field_validator

import keeper
import settings
from render.text import render_status
from sources.github import EventSourceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["agent"])

NDJSON = "application/x-ndjson"


# ---------- Request schema ----------

class AgentUser(BaseModel):
    login: Optional[str] = ""

    @field_validator("login", mode="before")
    @classmethod
    def _null_login(cls, v):
        return "" if v is None else v


class AgentRequest(BaseModel):
    input: Optional[str] = ""
    user: Optional[AgentUser] = Field(default_factory=AgentUser)

    # chat clients send explicit nulls for absent fields
    @field_validator("input", mode="before")
    @classmethod
    def _null_input(cls, v):
        return "" if v is None else v

    @field_validator("user", mode="before")
    @classmethod
    def _null_user(cls, v):
        return AgentUser() if v is None else v


# ---------- Helpers ----------

def guess_login(text: str) -> str:
    """'show pet for octocat' -> 'octocat'. Needs at least three words."""
    words = text.split()
    if len(words) >= 3:
        return words[-1]
    return ""


def read_token(x_github_token: Optional[str], authorization: Optional[str]) -> Optional[str]:
    token = (x_github_token or "").strip()
    if token:
        return token
    auth = (authorization or "").strip()
    if auth.lower().startswith("bearer "):
        return auth[7:].strip() or None
    return None


def _event_line(event: str, data: str = "") -> str:
    payload = {"event": event}
    if data:
        payload["data"] = data
    return json.dumps(payload, ensure_ascii=False) + "\n"


def ndjson_reply(text: str) -> Response:
    """ack / text / done, the shape the chat client renders."""
    body = _event_line("ack") + _event_line("text", text) + _event_line("done")
    return Response(content=body, media_type=NDJSON, status_code=200)


# ---------- Endpoint ----------

@router.post("/agent")
async def handle_agent(
    request: Request,
    x_github_token: Optional[str] = Header(default=None),
    authorization: Optional[str] = Header(default=None),
):
    """
    Chat-extension handler. Renders the pet for the requesting user from their
    last week of public activity. This surface keeps no state: every request
    starts from a fresh default pet.

    Failures are reported inside the chat stream, not as HTTP errors.
    """
    try:
        body = AgentRequest.model_validate_json(await request.body())
    except ValidationError:
        raise HTTPException(status_code=400, detail="invalid json")

    login = body.user.login.strip() or guess_login(body.input)
    if not login:
        return ndjson_reply("GitPet stumbled: missing user login")

    token = read_token(x_github_token, authorization)
    try:
        state = await asyncio.to_thread(keeper.preview, login, token)
    except EventSourceError as e:
        logger.warning("Event fetch for %s failed: %s", login, e)
        return ndjson_reply(f"GitPet stumbled: {e}")

    text = render_status(
        state,
        random.Random(),
        keeper=login,
        count_issues=settings.count_issues(),
    )
    return ndjson_reply(text)
