import dataclasses

import pytest

from beestrap.event import Event, EventType, GameState
from beestrap.hive import Bee, BeeType, create_hive
from beestrap.player import Player


def test_game_state_defaults_start_at_zero():
    state = GameState()
    assert (state.round, state.hits, state.stings) == (0, 0, 0)
    assert state.hive == []
    assert state.player == Player()


def test_game_state_default_hives_are_not_shared():
    first = GameState()
    second = GameState()
    first.hive.append(Bee(BeeType.QUEEN, 100))
    assert second.hive == []


def test_snapshot_equals_original():
    state = GameState(hive=create_hive(1, 5, 25), round=3, hits=2, stings=1)
    assert state.snapshot() == state


def test_snapshot_is_independent_of_original():
    state = GameState(hive=create_hive(1, 2, 3), round=4)
    copy = state.snapshot()
    copy.hive[0].take_damage()
    copy.hive.pop()
    copy.player.take_damage(BeeType.QUEEN)
    copy.round += 1
    assert state.hive == create_hive(1, 2, 3)
    assert state.player == Player()
    assert state.round == 4


def test_event_carries_its_fields():
    state = GameState(round=25)
    event = Event(EventType.HIVE_ATTACK, "Test Message", state)
    assert event.kind is EventType.HIVE_ATTACK
    assert event.message == "Test Message"
    assert event.state.round == 25


def test_event_is_immutable():
    event = Event(EventType.PLAYER_ATTACK, "Test Message", GameState())
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.message = "changed"
    assert event.message == "Test Message"


def test_events_keep_each_distinct_type():
    kinds = [EventType.PLAYER_ATTACK, EventType.HIVE_ATTACK, EventType.GAME_FINISHED]
    events = [Event(kind, "Test Message", GameState()) for kind in kinds]
    assert [event.kind for event in events] == kinds
    assert len({event.kind for event in events}) == 3