"""Bees of the hive: their kinds, their health and how they take damage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BeeType(Enum):
    """The kinds of bee that live in the hive."""

    QUEEN = 0
    WORKER = 1
    DRONE = 2

    @property
    def label(self) -> str:
        """Lower-case display name, e.g. ``worker bee``."""
        return _LABELS[self]

    @property
    def article_label(self) -> str:
        """Display name with its article, e.g. ``the Queen bee``."""
        return _ARTICLE_LABELS[self]

    def __str__(self) -> str:
        return self.label


_LABELS = {
    BeeType.QUEEN: "Queen bee",
    BeeType.WORKER: "worker bee",
    BeeType.DRONE: "drone bee",
}

_ARTICLE_LABELS = {
    BeeType.QUEEN: "the Queen bee",
    BeeType.WORKER: "a worker bee",
    BeeType.DRONE: "a drone bee",
}

_SHORT_NAMES = {
    BeeType.QUEEN: "Queen",
    BeeType.WORKER: "Worker",
    BeeType.DRONE: "Drone",
}

# Damage a bee of each kind takes from a single player hit.
_DAMAGE_AGAINST = {
    BeeType.QUEEN: 10,
    BeeType.WORKER: 25,
    BeeType.DRONE: 30,
}

# Starting health and miss chance (percent) for each kind of bee.
_DEFAULTS = {
    BeeType.QUEEN: (100, 10),
    BeeType.WORKER: (75, 15),
    BeeType.DRONE: (60, 20),
}


@dataclass
class Bee:
    """A single bee with its kind, remaining health and chance to miss."""

    bee_type: BeeType
    health: int
    miss_chance: int = 0

    def take_damage(self) -> bool:
        """Apply one player hit; return True if the bee is now dead."""
        self.health -= _DAMAGE_AGAINST[self.bee_type]
        return self.health <= 0

    def hit_message(self, died: bool) -> str:
        """Describe the outcome of a hit on this bee."""
        if died:
            return f"You killed {self.bee_type.article_label}."
        return (
            f"Direct Hit! {_SHORT_NAMES[self.bee_type]} took "
            f"{_DAMAGE_AGAINST[self.bee_type]} hit points. {self.health} HP left."
        )


def create_bees(bee_type, num: int, miss_chance: int | None = None) -> list[Bee]:
    """Create ``num`` fresh bees of one kind, optionally with a custom miss chance.

    Raises ValueError for an unknown bee type or a negative count.
    """
    kind = BeeType(bee_type)
    if num < 0:
        raise ValueError(f"number of bees must not be negative: {num}")
    health, default_miss = _DEFAULTS[kind]
    miss = default_miss if miss_chance is None else miss_chance
    return [Bee(kind, health, miss) for _ in range(num)]


def create_hive(num_queens: int, num_workers: int, num_drones: int) -> list[Bee]:
    """Create a hive: queens first, then workers, then drones."""
    return [
        *create_bees(BeeType.QUEEN, num_queens),
        *create_bees(BeeType.WORKER, num_workers),
        *create_bees(BeeType.DRONE, num_drones),
    ]