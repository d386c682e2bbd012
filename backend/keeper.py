"""
Pet keeper: the I/O around the scoring engine, shared by every front-end.

Each operation loads state, talks to the collaborators (event source, git
probe, Gemini) and saves. Nothing is written unless the whole transition was
computed; an EventSourceError or StateStoreError propagates to the caller.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import settings
from gemini.client import generate_suggestions
from models.pet import PetState
from render.suggestions import DEFAULT_COUNT, personality_for, template_suggestions
from render.text import mood_descriptor
from scoring.engine import feed_pet
from scoring.evolution import reward_commit
from scoring.summarizer import summarize
from sources.github import EventSourceError, fetch_events, resolve_login
from sources.workspace import has_local_changes, last_commit_subject
from store import StateStore

logger = logging.getLogger(__name__)


def status(store: StateStore) -> PetState:
    return store.load()


def feed(
    store: StateStore,
    login: Optional[str] = None,
    token: Optional[str] = None,
    now: Optional[datetime] = None,
    cwd: Optional[Union[str, Path]] = None,
) -> PetState:
    """Sync the last week of GitHub activity into the stored pet."""
    previous = store.load()
    login = login or resolve_login()
    events = fetch_events(login, token=token)
    thoughts = has_local_changes(cwd)

    state = feed_pet(previous, events, thoughts, now=now, count_issues=settings.count_issues())
    store.save(state)
    logger.info("Fed %s: mood %d -> %d, %s", login, previous.mood, state.mood, state.evolution.value)
    return state


def post_commit(
    store: StateStore,
    now: Optional[datetime] = None,
    cwd: Optional[Union[str, Path]] = None,
) -> tuple[PetState, str]:
    """
    Reward the commit that was just made. The activity sync is best effort:
    without network the pet still gets its commit boost.
    """
    previous = store.load()
    subject = last_commit_subject(cwd)

    summary = None
    try:
        events = fetch_events(resolve_login())
    except EventSourceError as e:
        logger.warning("Skipping activity sync after commit: %s", e)
    else:
        summary = summarize(events, now)

    state = reward_commit(previous, summary, now=now, count_issues=settings.count_issues())
    store.save(state)
    return state, subject


def preview(
    login: str,
    token: Optional[str] = None,
    now: Optional[datetime] = None,
) -> PetState:
    """Stateless pet built from a fresh default, for surfaces without a local profile."""
    events = fetch_events(login, token=token, prefer_gh=False)
    return feed_pet(PetState(), events, now=now, count_issues=settings.count_issues())


async def suggest(store: StateStore, count: int = DEFAULT_COUNT) -> tuple[PetState, list[str]]:
    state = store.load()
    personality = personality_for(state)

    messages = await generate_suggestions(personality, mood_descriptor(state.mood), count)
    if not messages:
        logger.info("Using built-in suggestions for %s", personality)
        messages = template_suggestions(personality, count)
    return state, messages
