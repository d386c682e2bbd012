"""
Tests for the state evolver: counters, mood arithmetic and clamping,
evolution precedence, and the post-commit reward.
"""

import random
from datetime import datetime, timezone

import pytest

from models.activity import ActivitySummary
from models.pet import Evolution, PetState
from scoring.evolution import (
    activity_total,
    evolution_for,
    evolution_scores,
    evolve,
    format_sync_time,
    reward_commit,
)

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


# ── Counters and bookkeeping ───────────────────────────────────────────────


class TestCounters:
    def test_logic_and_kindness_accumulate(self):
        previous = PetState(kindness=4, logic_shards=10)
        summary = ActivitySummary(commits=3, merged_prs=2, reviews=5)
        state = evolve(previous, summary, now=NOW)
        assert state.logic_shards == 10 + 3 + 2 * 3
        assert state.kindness == 4 + 5 * 2

    def test_counters_never_decrease_when_idle(self):
        previous = PetState(kindness=7, logic_shards=12)
        state = evolve(previous, ActivitySummary(), now=NOW)
        assert state.kindness == 7
        assert state.logic_shards == 12

    def test_sync_metadata(self):
        state = evolve(PetState(), ActivitySummary(commits=1), now=NOW)
        assert state.version == 1
        assert state.last_sync == "2026-01-15T12:00:00Z"

    def test_summary_is_stored_verbatim(self):
        summary = ActivitySummary(commits=2, large_commits=1, thought_fragments=1, issues=4)
        state = evolve(PetState(), summary, has_local_thoughts=True, now=NOW)
        assert state.activity == summary

    def test_previous_state_is_not_mutated(self):
        previous = PetState(mood=50, kindness=1, logic_shards=1)
        snapshot = previous.model_copy(deep=True)
        evolve(previous, ActivitySummary(commits=9, reviews=2), now=NOW)
        assert previous == snapshot


# ── Mood ───────────────────────────────────────────────────────────────────


class TestMood:
    def test_idle_decays_by_one(self):
        assert evolve(PetState(mood=40), ActivitySummary(), now=NOW).mood == 39

    def test_idle_decay_floors_at_zero(self):
        assert evolve(PetState(mood=0), ActivitySummary(), now=NOW).mood == 0

    @pytest.mark.parametrize("mood", [0, 1, 5, 50, 100])
    def test_all_zero_summary_from_any_state(self, mood):
        previous = PetState(mood=mood, evolution=Evolution.BARD, kindness=3)
        state = evolve(previous, ActivitySummary(), now=NOW)
        assert state.mood == max(0, mood - 1)
        assert state.evolution == Evolution.LONELY

    def test_active_gain(self):
        summary = ActivitySummary(commits=2, merged_prs=1, reviews=3, doc_comments=4)
        assert evolve(PetState(mood=10), summary, now=NOW).mood == 10 + 2 + 5 + 3 + 4

    def test_refactor_only_week_is_active_but_gains_nothing(self):
        summary = ActivitySummary(refactor_commits=2)
        state = evolve(PetState(mood=10), summary, now=NOW)
        assert state.mood == 10
        assert state.evolution == Evolution.VOID

    def test_gain_caps_at_100(self):
        summary = ActivitySummary(merged_prs=30)
        assert evolve(PetState(mood=90), summary, now=NOW).mood == 100

    def test_local_thoughts_bonus_when_active(self):
        summary = ActivitySummary(commits=1)
        assert evolve(PetState(mood=10), summary, True, now=NOW).mood == 12

    def test_local_thoughts_bonus_when_idle(self):
        assert evolve(PetState(mood=10), ActivitySummary(), True, now=NOW).mood == 10

    def test_local_thoughts_bonus_respects_cap(self):
        assert evolve(PetState(mood=100), ActivitySummary(commits=1), True, now=NOW).mood == 100

    def test_mood_stays_bounded_over_many_feeds(self):
        rng = random.Random(1234)
        state = PetState()
        for _ in range(200):
            if rng.random() < 0.4:
                summary = ActivitySummary()
            else:
                summary = ActivitySummary(
                    commits=rng.randint(0, 15),
                    merged_prs=rng.randint(0, 4),
                    reviews=rng.randint(0, 6),
                    doc_comments=rng.randint(0, 6),
                )
            state = evolve(state, summary, rng.random() < 0.5, now=NOW)
            assert 0 <= state.mood <= 100


# ── Issues switch ──────────────────────────────────────────────────────────


class TestIssues:
    def test_issues_ignored_by_default(self):
        summary = ActivitySummary(issues=3)
        assert activity_total(summary) == 0
        state = evolve(PetState(mood=10), summary, now=NOW)
        assert state.mood == 9
        assert state.evolution == Evolution.LONELY

    def test_issues_counted_when_enabled(self):
        summary = ActivitySummary(issues=3)
        assert activity_total(summary, count_issues=True) == 3
        state = evolve(PetState(mood=10), summary, now=NOW, count_issues=True)
        assert state.mood == 13
        # no category scores issues, so Pioneer keeps its 0-0 tie
        assert state.evolution == Evolution.PIONEER


# ── Evolution ──────────────────────────────────────────────────────────────


class TestEvolution:
    def test_scores_in_precedence_order(self):
        summary = ActivitySummary(
            commits=1, new_repos=2, reviews=3, merged_prs=4, fix_commits=5,
            doc_comments=6, doc_commits=7, refactor_commits=8,
        )
        assert evolution_scores(summary) == [
            (Evolution.PIONEER, 1 + 4),
            (Evolution.GUARDIAN, 6 + 8 + 5),
            (Evolution.BARD, 12 + 7),
            (Evolution.VOID, 16),
        ]

    def test_commits_only_is_pioneer(self):
        assert evolution_for(ActivitySummary(commits=4)) == Evolution.PIONEER

    def test_guardian(self):
        summary = ActivitySummary(reviews=3, merged_prs=2, fix_commits=1)
        assert evolution_for(summary) == Evolution.GUARDIAN

    def test_bard(self):
        assert evolution_for(ActivitySummary(doc_comments=3, commits=2)) == Evolution.BARD

    def test_void(self):
        summary = ActivitySummary(commits=3, refactor_commits=2)
        assert evolution_for(summary) == Evolution.VOID

    def test_tie_keeps_earlier_category(self):
        # pioneer 4, guardian 4
        assert evolution_for(ActivitySummary(commits=4, reviews=2)) == Evolution.PIONEER
        # guardian 2, bard 2
        assert evolution_for(ActivitySummary(reviews=1, doc_comments=1)) == Evolution.GUARDIAN
        # bard 2, void 2
        assert evolution_for(ActivitySummary(doc_commits=2, refactor_commits=1)) == Evolution.BARD

    def test_idle_is_lonely_even_with_stale_scores(self):
        # fix/doc commit counts alone do not make a week active
        summary = ActivitySummary(fix_commits=3, doc_commits=3, large_commits=1)
        assert evolution_for(summary) == Evolution.LONELY

    def test_evolve_replaces_previous_label(self):
        previous = PetState(evolution=Evolution.GUARDIAN)
        state = evolve(previous, ActivitySummary(commits=1), now=NOW)
        assert state.evolution == Evolution.PIONEER


# ── Post-commit reward ─────────────────────────────────────────────────────


class TestRewardCommit:
    def test_boost_without_sync(self):
        previous = PetState(mood=10, logic_shards=2)
        state = reward_commit(previous, now=NOW)
        assert state.mood == 13
        assert state.logic_shards == 3
        assert state.last_sync == "2026-01-15T12:00:00Z"
        assert state.version == 1

    def test_lonely_wakes_as_pioneer(self):
        assert reward_commit(PetState(), now=NOW).evolution == Evolution.PIONEER

    def test_other_labels_survive_without_sync(self):
        previous = PetState(evolution=Evolution.BARD)
        assert reward_commit(previous, now=NOW).evolution == Evolution.BARD

    def test_boost_caps_at_100(self):
        assert reward_commit(PetState(mood=99), now=NOW).mood == 100

    def test_sync_refreshes_counters_but_not_mood(self):
        previous = PetState(mood=20, kindness=1, logic_shards=1)
        summary = ActivitySummary(commits=2, merged_prs=1, reviews=3, fix_commits=4)
        state = reward_commit(previous, summary, now=NOW)
        assert state.mood == 23
        assert state.logic_shards == 1 + 2 + 3 + 1
        assert state.kindness == 1 + 6
        assert state.evolution == Evolution.GUARDIAN
        assert state.activity == summary

    def test_idle_sync_still_wakes_the_pet(self):
        previous = PetState(evolution=Evolution.VOID)
        state = reward_commit(previous, ActivitySummary(), now=NOW)
        assert state.evolution == Evolution.PIONEER


def test_format_sync_time_converts_to_utc():
    from datetime import timedelta

    local = datetime(2026, 1, 15, 14, 30, 5, 999, tzinfo=timezone(timedelta(hours=2)))
    assert format_sync_time(local) == "2026-01-15T12:30:05Z"
    assert format_sync_time(datetime(2026, 1, 15, 12, 0, 0)) == "2026-01-15T12:00:00Z"
