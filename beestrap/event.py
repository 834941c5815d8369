"""Game state and the events the game engine reports to the client."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from beestrap.hive import Bee
from beestrap.player import Player


class EventType(Enum):
    """What kind of thing an event reports."""

    PLAYER_ATTACK = 0
    HIVE_ATTACK = 1
    GAME_FINISHED = 2


@dataclass
class GameState:
    """The player, the hive and the turn statistics of a running game."""

    player: Player = field(default_factory=Player)
    hive: list[Bee] = field(default_factory=list)
    round: int = 0
    hits: int = 0
    stings: int = 0

    def snapshot(self) -> GameState:
        """Return an independent copy of this state."""
        return copy.deepcopy(self)


@dataclass(frozen=True)
class Event:
    """A message from the game engine: its kind, a description and the state after it."""

    kind: EventType
    message: str
    state: GameState