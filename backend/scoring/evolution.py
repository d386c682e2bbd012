"""
State evolver: the pure transition from (previous PetState, ActivitySummary)
to the next PetState.

Counters:
  logic_shards += commits + merged_prs*3
  kindness     += reviews*2

Mood (clamped to 0-100):
  idle window (activity total 0)  -> mood - 1
  otherwise                       -> mood + commits + merged_prs*5 + reviews + doc_comments
  uncommitted local work          -> +1 on top of either branch

Evolution, highest score wins, ties go to the earlier entry:
  Pioneer   commits + new_repos*2
  Guardian  reviews*2 + merged_prs*2 + fix_commits
  Bard      doc_comments*2 + doc_commits
  Void      refactor_commits*2
An idle window always reverts to Lonely.

Issues only feed the activity total and mood when count_issues is set.
"""

from datetime import datetime, timezone
from typing import Optional

from models.activity import ActivitySummary
from models.pet import MOOD_MAX, MOOD_MIN, STATE_VERSION, Evolution, PetState

COMMIT_MOOD_BOOST = 3


def _clamp_mood(mood: int) -> int:
    return max(MOOD_MIN, min(MOOD_MAX, mood))


def format_sync_time(now: Optional[datetime] = None) -> str:
    """UTC timestamp in the RFC 3339 form stored as last_sync."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def activity_total(summary: ActivitySummary, count_issues: bool = False) -> int:
    total = (
        summary.commits
        + summary.merged_prs
        + summary.reviews
        + summary.doc_comments
        + summary.refactor_commits
        + summary.new_repos
    )
    if count_issues:
        total += summary.issues
    return total


def evolution_scores(summary: ActivitySummary) -> list[tuple[Evolution, int]]:
    """Competing scores in precedence order."""
    return [
        (Evolution.PIONEER, summary.commits + summary.new_repos * 2),
        (Evolution.GUARDIAN, summary.reviews * 2 + summary.merged_prs * 2 + summary.fix_commits),
        (Evolution.BARD, summary.doc_comments * 2 + summary.doc_commits),
        (Evolution.VOID, summary.refactor_commits * 2),
    ]


def evolution_for(summary: ActivitySummary, count_issues: bool = False) -> Evolution:
    if activity_total(summary, count_issues) == 0:
        return Evolution.LONELY

    scores = evolution_scores(summary)
    best, best_score = scores[0]
    for label, score in scores[1:]:
        if score > best_score:
            best, best_score = label, score
    return best


def mood_gain(summary: ActivitySummary, count_issues: bool = False) -> int:
    gain = summary.commits + summary.merged_prs * 5 + summary.reviews + summary.doc_comments
    if count_issues:
        gain += summary.issues
    return gain


def evolve(
    previous: PetState,
    summary: ActivitySummary,
    has_local_thoughts: bool = False,
    now: Optional[datetime] = None,
    count_issues: bool = False,
) -> PetState:
    """
    Compute the next state. `previous` is left untouched and the summary is
    stored verbatim as the new activity.
    """
    if activity_total(summary, count_issues) == 0:
        mood = _clamp_mood(previous.mood - 1)
    else:
        mood = _clamp_mood(previous.mood + mood_gain(summary, count_issues))
    if has_local_thoughts:
        mood = _clamp_mood(mood + 1)

    return PetState(
        version=STATE_VERSION,
        last_sync=format_sync_time(now),
        mood=mood,
        kindness=previous.kindness + summary.reviews * 2,
        logic_shards=previous.logic_shards + summary.commits + summary.merged_prs * 3,
        evolution=evolution_for(summary, count_issues),
        activity=summary.model_copy(),
    )


def reward_commit(
    previous: PetState,
    summary: Optional[ActivitySummary] = None,
    now: Optional[datetime] = None,
    count_issues: bool = False,
) -> PetState:
    """
    Post-commit transition: a flat mood boost and one logic shard per commit.

    When a fresh summary is available it refreshes activity, counters and
    evolution first; the summary does not move mood here. A pet that was
    Lonely wakes up as a Pioneer.
    """
    state = previous.model_copy(deep=True)

    if summary is not None:
        state.activity = summary.model_copy()
        state.evolution = evolution_for(summary, count_issues)
        state.logic_shards += summary.commits + summary.merged_prs * 3
        state.kindness += summary.reviews * 2

    state.mood = _clamp_mood(state.mood + COMMIT_MOOD_BOOST)
    state.logic_shards += 1
    state.last_sync = format_sync_time(now)
    state.version = STATE_VERSION
    if state.evolution == Evolution.LONELY:
        state.evolution = Evolution.PIONEER
    return state
