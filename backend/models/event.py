from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


PUSH = "PushEvent"
PULL_REQUEST = "PullRequestEvent"
PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
PULL_REQUEST_REVIEW_COMMENT = "PullRequestReviewCommentEvent"
ISSUE_COMMENT = "IssueCommentEvent"
ISSUES = "IssuesEvent"
CREATE = "CreateEvent"


class Event(BaseModel):
    type: str                   # GitHub event type, e.g. "PushEvent"
    created_at: datetime
    payload: Optional[Any] = None    # parsed lazily per type

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


# ---------- Type-specific payloads ----------

class Commit(BaseModel):
    message: str = ""


class PushPayload(BaseModel):
    size: int = 0
    commits: list[Commit] = Field(default_factory=list)


class PullRequestInfo(BaseModel):
    merged: bool = False


class PullRequestPayload(BaseModel):
    pull_request: PullRequestInfo = Field(default_factory=PullRequestInfo)


class CreatePayload(BaseModel):
    ref_type: str = ""      # "repository" | "branch" | "tag"
