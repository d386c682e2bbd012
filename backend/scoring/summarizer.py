"""
Activity summarizer: reduces raw GitHub events to an ActivitySummary.

Only events newer than the trailing window (7 days before `now`) count; an
event exactly on the cutoff is already too old. Each recognized event type
adds to one or more counters:

  PushEvent                      commits (+ large_commits, fix/doc/refactor)
  PullRequestEvent               merged_prs, merged PRs only
  PullRequestReviewEvent         reviews
  PullRequestReviewCommentEvent  reviews AND doc_comments
  IssueCommentEvent              doc_comments
  IssuesEvent                    issues
  CreateEvent                    new_repos, ref_type "repository" only

Unknown types are ignored. A recognized event whose payload does not parse
contributes nothing; it never aborts the summary.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from pydantic import ValidationError

from models import event as ev
from models.activity import ActivitySummary
from models.event import CreatePayload, Event, PullRequestPayload, PushPayload
from scoring.vocabulary import is_doc, is_fix, is_refactor

logger = logging.getLogger(__name__)

WINDOW = timedelta(days=7)
LARGE_PUSH_SIZE = 10


def _cutoff(now: Optional[datetime]) -> datetime:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now - WINDOW


def _count_push(payload: PushPayload, counts: dict[str, int]) -> None:
    counts["commits"] += len(payload.commits)
    if payload.size >= LARGE_PUSH_SIZE:
        counts["large_commits"] += 1
    for commit in payload.commits:
        if is_fix(commit.message):
            counts["fix_commits"] += 1
        if is_doc(commit.message):
            counts["doc_commits"] += 1
        if is_refactor(commit.message):
            counts["refactor_commits"] += 1


def _count_event(event: Event, counts: dict[str, int]) -> None:
    payload = event.payload or {}

    if event.type == ev.PUSH:
        _count_push(PushPayload.model_validate(payload), counts)
    elif event.type == ev.PULL_REQUEST:
        if PullRequestPayload.model_validate(payload).pull_request.merged:
            counts["merged_prs"] += 1
    elif event.type == ev.PULL_REQUEST_REVIEW:
        counts["reviews"] += 1
    elif event.type == ev.PULL_REQUEST_REVIEW_COMMENT:
        # a review comment is both a review and written feedback
        counts["reviews"] += 1
        counts["doc_comments"] += 1
    elif event.type == ev.ISSUE_COMMENT:
        counts["doc_comments"] += 1
    elif event.type == ev.ISSUES:
        counts["issues"] += 1
    elif event.type == ev.CREATE:
        if CreatePayload.model_validate(payload).ref_type == "repository":
            counts["new_repos"] += 1


def summarize(events: Iterable[Event], now: Optional[datetime] = None) -> ActivitySummary:
    """Aggregate the events that fall inside the trailing window ending at `now`."""
    cutoff = _cutoff(now)
    counts = {name: 0 for name in ActivitySummary.model_fields}

    for event in events:
        if event.created_at <= cutoff:
            continue
        try:
            _count_event(event, counts)
        except ValidationError:
            logger.debug("Skipping %s with malformed payload", event.type)

    return ActivitySummary(**counts)
