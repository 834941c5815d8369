"""The player character and the damage bee stings deal to it."""

from __future__ import annotations

from dataclasses import dataclass

from beestrap.hive import BeeType

# Damage the player takes from a sting by each kind of bee.
_DAMAGE_FROM = {
    BeeType.QUEEN: 10,
    BeeType.WORKER: 5,
    BeeType.DRONE: 1,
}


@dataclass
class Player:
    """The player's health and percentage chance to miss a strike."""

    health: int = 100
    miss_chance: int = 10

    def take_damage(self, bee_type) -> bool:
        """Apply a sting from a bee of ``bee_type``; return True if the player died."""
        self.health -= _DAMAGE_FROM[BeeType(bee_type)]
        return self.health <= 0

    def hit_message(self, bee_type, died: bool) -> str:
        """Describe a sting from a bee of ``bee_type``."""
        who = BeeType(bee_type).article_label
        if died:
            return f"{who[0].upper()}{who[1:]} just killed you!"
        return f"Sting! You just got stun by {who}. You have {self.health} HP left."


def create_player(miss_chance: int | None = None) -> Player:
    """Create a player at full health, with a default miss chance of 10%."""
    if miss_chance is None:
        return Player()
    return Player(miss_chance=miss_chance)