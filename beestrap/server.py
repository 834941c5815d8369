"""The game engine: turn order, damage resolution and win/loss detection."""

from __future__ import annotations

import random
import threading

from beestrap.event import GameState
from beestrap.hive import BeeType, create_hive
from beestrap.player import create_player
from beestrap.protocol import CommunicationProtocol, Protocol

# Miss rolls are drawn uniformly from 0..100 inclusive.
_ROLL_RANGE = 101


class GameServer:
    """Runs a game, alternating player and hive turns over a protocol."""

    def __init__(
        self,
        communication: Protocol,
        state: GameState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.communication = communication
        self.state = state if state is not None else GameState()
        self.finished = False
        self._rng = rng if rng is not None else random.Random()

    def run(self) -> None:
        """Play rounds until either the queen or the player dies."""
        while True:
            self.state.round += 1

            self.players_turn()
            if self.finished:
                return

            self.hives_turn()
            if self.finished:
                return

    def players_turn(self) -> None:
        """Wait for the player's strike, then resolve it against a random bee."""
        self.communication.wait_for_player()

        hive = self.state.hive
        index = self._rng.randrange(len(hive))
        bee = hive[index]

        if self._rng.randrange(_ROLL_RANGE) < self.state.player.miss_chance:
            self.communication.hit_response(
                "Miss! You just missed the hive, better luck next time!", self.state
            )
            return

        self.state.hits += 1

        died = bee.take_damage()
        message = bee.hit_message(died)

        if died and bee.bee_type is BeeType.QUEEN:
            self.finished = True
            self.communication.game_finished_response(message, self.state)
            return

        if died:
            del hive[index]

        self.communication.hit_response(message, self.state)

    def hives_turn(self) -> None:
        """Let a random bee try to sting the player."""
        bee = self.state.hive[self._rng.randrange(len(self.state.hive))]
        player = self.state.player

        if self._rng.randrange(_ROLL_RANGE) <= bee.miss_chance:
            message = f"Buzz! That was close! The {bee.bee_type} just missed you!"
            self.communication.sting_response(message, self.state)
            return

        self.state.stings += 1

        died = player.take_damage(bee.bee_type)
        message = player.hit_message(bee.bee_type, died)

        if died:
            self.finished = True
            self.communication.game_finished_response(message, self.state)
            return

        self.communication.sting_response(message, self.state)


def start_server() -> CommunicationProtocol:
    """Start a new game in a background thread and return its protocol."""
    communication = CommunicationProtocol()
    server = GameServer(
        communication,
        GameState(player=create_player(), hive=create_hive(1, 5, 25)),
    )
    threading.Thread(target=server.run, name="game-server", daemon=True).start()
    return communication