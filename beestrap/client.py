"""Command-line front end for the game."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from beestrap.event import EventType, GameState
from beestrap.hive import BeeType
from beestrap.protocol import Protocol
from beestrap.server import start_server

_COMMANDS = ("hit", "auto")

_INTRO = """🐝 Welcome to Bees In The Trap 🐝

The hive is restless, and you're standing right in the buzz zone.
Armed with nothing but courage and a sharp eye, you must take down the swarm before they sting you into oblivion.

Each turn, you can strike the hive... but beware:
- You might miss entirely.
- They might miss too.
- Every bee type fights differently. Watch out for the Queen.

⚔️ OBJECTIVE:
Destroy the hive before it destroys you.

Commands:
> hit       — Attempt a strike on the hive
> auto      — Let fate decide and simulate the entire game

Let the stinger-slinging begin..."""

_COMMAND_ERROR = """Invalid Command!

Commands:
> hit       — Attempt a strike on the hive
> auto      — Let fate decide and simulate the entire game"""

_SUMMARY = """
📜 Game Summary
============================
Rounds played : {round}
Total hits    : {hits}
Total stings  : {stings}

👤 Player Status
----------------------------
Final Health  : {health}
Fate          : {players_fate}

🐝 Hive Status
----------------------------
Queen Bee     : {queens_fate}
Worker Bees   : {workers} remaining
Drone Bees    : {drones} remaining

{commentary}
"""


class Client:
    """Reads player commands, drives the game and prints its outcome."""

    def __init__(
        self,
        communication: Protocol,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
    ) -> None:
        self.communication = communication
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout

    def run(self) -> None:
        """Play until the game finishes, then print the summary."""
        auto_play = False
        self.print_intro()

        while True:
            if not auto_play:
                command = self.read_command()
                while command not in _COMMANDS:
                    self.print_command_error()
                    command = self.read_command()
                auto_play = command == "auto"

            for event in self._turn_events():
                print(event.message, file=self.writer)
                if event.kind is EventType.GAME_FINISHED:
                    self.print_game_summary(event.state)
                    return

    def _turn_events(self):
        yield self.communication.hit()
        yield self.communication.wait_for_cpu()

    def print_intro(self) -> None:
        """Print the welcome text and the list of commands."""
        print(_INTRO, file=self.writer)

    def read_command(self) -> str:
        """Prompt for and return one line of input without its newline.

        Raises EOFError if the input ends before a full line was read.
        """
        print("> ", end="", file=self.writer)
        self.writer.flush()
        line = self.reader.readline()
        if not line.endswith("\n"):
            raise EOFError("unexpected end of input")
        return line.replace("\n", "")

    def print_command_error(self) -> None:
        """Tell the player the command was not understood."""
        print(_COMMAND_ERROR, file=self.writer)

    def print_game_summary(self, state: GameState) -> None:
        """Print the final statistics and the fate of player and hive."""
        if state.player.health <= 0:
            players_fate = "You perished in the swarm."
            commentary = "The hive overwhelmed you. Your story ends in silence..."
        else:
            players_fate = "You survived the hive!"
            commentary = "Victory! The hive has fallen. Peace returns to the meadow."

        queen = next((bee for bee in state.hive if bee.bee_type is BeeType.QUEEN), None)
        if queen is None:
            queens_fate = "Unsure..."
        elif queen.health > 0:
            queens_fate = "Alive"
        else:
            queens_fate = "Dead"

        workers = sum(bee.bee_type is BeeType.WORKER for bee in state.hive)
        drones = sum(bee.bee_type is BeeType.DRONE for bee in state.hive)

        self.writer.write(
            _SUMMARY.format(
                round=state.round,
                hits=state.hits,
                stings=state.stings,
                health=state.player.health,
                players_fate=players_fate,
                queens_fate=queens_fate,
                workers=workers,
                drones=drones,
                commentary=commentary,
            )
        )


def main(argv=None) -> int:
    """Start a game on standard input and output; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="beestrap", description="Take down the hive before it stings you."
    )
    parser.parse_args(argv)

    client = Client(start_server(), sys.stdin, sys.stdout)
    try:
        client.run()
    except (OSError, EOFError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())