"""
Scoring engine: public entry point tying the summarizer to the evolver.

  events --summarize--> ActivitySummary --evolve--> PetState

The summary stored on the new state carries the thought-fragment signal, so
what is persisted is exactly what the evolver saw.
"""

from datetime import datetime
from typing import Iterable, Optional

from models.event import Event
from models.pet import PetState
from scoring.evolution import evolve
from scoring.summarizer import summarize


def feed_pet(
    previous: PetState,
    events: Iterable[Event],
    has_local_thoughts: bool = False,
    now: Optional[datetime] = None,
    count_issues: bool = False,
) -> PetState:
    summary = summarize(events, now)
    summary = summary.model_copy(update={"thought_fragments": int(has_local_thoughts)})
    return evolve(previous, summary, has_local_thoughts, now=now, count_issues=count_issues)
