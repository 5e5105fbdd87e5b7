"""
Tests for Feed, Play, Rest and Status transitions.
"""

import pytest

from internal.internal import apply_action
from internal.modules.actions import ActionManager, ActionType
from internal.modules.needs.needs_manager import NeedsManager
from pet.state import PetState
from config import Config
from shared_models.pet_models import StatReading


def make_pet(hunger=5, happiness=6, health=8):
    return PetState(pet_type="Dog", name="Rex", hunger=hunger, happiness=happiness, health=health)


def types(events):
    return [event.event_type for event in events]


class TestFeed:
    def test_feed_reduces_hunger_and_restores_health(self, no_treat):
        state, events = apply_action(make_pet(), ActionType.FEED, no_treat)
        # feed: hunger 2, health 9; tick: hunger 3, happiness 5
        assert state.stats() == {"hunger": 3, "happiness": 5, "health": 9}
        assert types(events) == ["action:feed:started", "action:feed:satisfied", "tick:hour_passed"]
        assert events[1].data == {"name": "Rex", "hunger": 2, "health": 9}

    def test_feed_when_full_has_minimal_effect(self, no_treat):
        state, events = apply_action(make_pet(hunger=1), ActionType.FEED, no_treat)
        assert state.stats() == {"hunger": 2, "happiness": 5, "health": 8}
        assert types(events) == ["action:feed:started", "action:feed:minimal", "tick:hour_passed"]

    def test_feed_clamps(self, no_treat):
        state, events = apply_action(make_pet(hunger=2, health=10), ActionType.FEED, no_treat)
        assert events[1].data["hunger"] == 1
        assert events[1].data["health"] == 10
        assert state.hunger == 2


class TestPlay:
    def test_play_raises_happiness_and_hunger(self, no_treat):
        state, events = apply_action(make_pet(), ActionType.PLAY, no_treat)
        # play: happiness 8, hunger 6; tick: hunger 7, happiness 7
        assert state.stats() == {"hunger": 7, "happiness": 7, "health": 8}
        assert types(events) == ["action:play:started", "action:play:fun", "tick:hour_passed"]

    def test_hunger_gate_precedes_health_gate(self, no_treat):
        state, events = apply_action(make_pet(hunger=9, health=1), ActionType.PLAY, no_treat)
        assert types(events) == [
            "action:play:started",
            "action:play:too_hungry",
            "tick:hour_passed",
            "tick:starving",
            "tick:critical:hunger",
            "tick:critical:health",
        ]
        assert state.stats() == {"hunger": 10, "happiness": 5, "health": 1}

    def test_hunger_gate_starts_at_eight(self, no_treat):
        _, events = apply_action(make_pet(hunger=8), ActionType.PLAY, no_treat)
        assert "action:play:too_hungry" in types(events)
        _, events = apply_action(make_pet(hunger=7), ActionType.PLAY, no_treat)
        assert "action:play:fun" in types(events)

    def test_too_weak_to_play(self, no_treat):
        state, events = apply_action(make_pet(health=2), ActionType.PLAY, no_treat)
        assert types(events) == [
            "action:play:started",
            "action:play:too_weak",
            "tick:hour_passed",
            "tick:critical:health",
        ]
        assert state.stats() == {"hunger": 6, "happiness": 5, "health": 2}

    def test_health_three_can_play(self, no_treat):
        _, events = apply_action(make_pet(health=3), ActionType.PLAY, no_treat)
        assert "action:play:fun" in types(events)


class TestRest:
    def test_rest_restores_health_and_costs_happiness(self, no_treat):
        state, events = apply_action(make_pet(), ActionType.REST, no_treat)
        # rest: health 10, happiness 5; tick: hunger 6, happiness 4
        assert state.stats() == {"hunger": 6, "happiness": 4, "health": 10}
        assert types(events) == ["action:rest:rested", "tick:hour_passed"]
        assert events[0].data == {"name": "Rex", "health": 10, "happiness": 5}

    def test_rest_is_unconditional(self, no_treat):
        state, events = apply_action(make_pet(hunger=10, happiness=1, health=10), ActionType.REST, no_treat)
        assert events[0].data == {"name": "Rex", "health": 10, "happiness": 1}
        assert types(events) == [
            "action:rest:rested",
            "tick:hour_passed",
            "tick:starving",
            "tick:unhappy",
            "tick:critical:hunger",
            "tick:critical:happiness",
        ]
        assert state.stats() == {"hunger": 10, "happiness": 1, "health": 7}


class TestStatus:
    def test_status_does_not_mutate_or_pass_time(self, fixed_random):
        rng = fixed_random()
        pet = make_pet()
        state, events = apply_action(pet, ActionType.STATUS, rng)
        assert state == pet
        assert types(events) == ["status:snapshot"]
        assert rng.calls == []

    def test_status_snapshot_flags_critical_stats(self, no_treat):
        _, events = apply_action(make_pet(hunger=8, happiness=2, health=3), ActionType.STATUS, no_treat)
        stats = events[0].data["stats"]
        assert events[0].data["name"] == "Rex"
        assert events[0].data["pet_type"] == "Dog"
        assert stats["hunger"] == {
            "label": "Hunger", "value": 8, "max_value": 10,
            "critical": True, "annotation": "(High — critical!)",
        }
        assert stats["happiness"]["annotation"] == "(Low — needs attention!)"
        assert stats["health"]["annotation"] == "(Low — urgent!)"

    def test_status_snapshot_without_warnings(self, no_treat):
        _, events = apply_action(make_pet(hunger=7, happiness=3, health=4), ActionType.STATUS, no_treat)
        stats = events[0].data["stats"]
        assert not any(reading["critical"] for reading in stats.values())
        assert all(reading["annotation"] == "" for reading in stats.values())


def test_example_scenario(no_treat):
    state = make_pet()
    state, events = apply_action(state, ActionType.FEED, no_treat)
    assert state.stats() == {"hunger": 3, "happiness": 5, "health": 9}
    assert not any(t.startswith("tick:critical") for t in types(events))

    state, events = apply_action(state, ActionType.PLAY, no_treat)
    assert events[1].data == {"name": "Rex", "happiness": 7, "hunger": 4}
    assert state.stats() == {"hunger": 5, "happiness": 6, "health": 9}


def test_action_manager_rejects_unknown_action(no_treat):
    manager = ActionManager(NeedsManager())
    with pytest.raises(ValueError):
        manager.perform_action("dance", make_pet(), no_treat)


def test_action_manager_counts_executions(no_treat):
    manager = ActionManager(NeedsManager())
    state = make_pet()
    for action in (ActionType.FEED, ActionType.FEED, ActionType.STATUS):
        state, _ = manager.perform_action(action, state, no_treat)
    assert manager.get_action_status(ActionType.FEED) == {"total_executions": 2}
    assert manager.get_action_status()["status"] == {"total_executions": 1}
    assert manager.get_action_status()["rest"] == {"total_executions": 0}


def test_stat_reading_maximum_follows_stat_scale():
    reading = StatReading(label="Health", value=4)
    assert reading.max_value == Config.STAT_MAX
    assert reading.annotation == ""
    assert not reading.critical
