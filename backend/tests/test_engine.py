"""End-to-end scoring over the fixture week."""

from models.pet import Evolution, PetState
from scoring.engine import feed_pet


class TestFeedPet:
    def test_fixture_week_from_default_pet(self, week):
        now, _, events = week
        state = feed_pet(PetState(), events, now=now)
        # commits 5, merged 1, reviews 2, doc comments 2
        assert state.mood == 5 + 5 + 5 + 2 + 2
        assert state.logic_shards == 5 + 3
        assert state.kindness == 4
        # pioneer 7 ties guardian 7; pioneer declared first
        assert state.evolution == Evolution.PIONEER
        assert state.last_sync == "2026-01-15T12:00:00Z"

    def test_thought_fragment_recorded_on_activity(self, week):
        now, _, events = week
        state = feed_pet(PetState(), events, has_local_thoughts=True, now=now)
        assert state.activity.thought_fragments == 1
        assert state.mood == 20

    def test_issues_switch(self, week):
        now, _, events = week
        state = feed_pet(PetState(), events, now=now, count_issues=True)
        assert state.mood == 20

    def test_stale_week_goes_lonely(self, week):
        now, _, events = week
        old_only = [e for e in events if e.created_at.day == 1]
        previous = PetState(mood=30, evolution=Evolution.GUARDIAN)
        state = feed_pet(previous, old_only, now=now)
        assert state.evolution == Evolution.LONELY
        assert state.mood == 29
