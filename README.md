# beestrap

Bees In The Trap is a turn-based terminal game. You face a hive of
one Queen, five worker bees and twenty-five drone bees. Each round you
strike at a random bee, and then a random bee strikes back. Kill the Queen
and you win. Lose all your health and the hive wins.

## Installing

```
pip install .
```

## Playing

```
beestrap
```

At the `>` prompt, type one of these commands:

- `hit`: strike once at the hive. The hive then takes its turn.
- `auto`: play the rest of the game automatically.

Any other input prints the list of commands again. If the input ends
before a command is entered, the game stops, prints the error and exits
with status 1. `beestrap --help` shows a short usage line; the command
takes no other options.

### The rules

| Bee    | Health | Damage it takes per hit | Damage it deals | Chance to miss |
|--------|--------|-------------------------|-----------------|----------------|
| Queen  | 100    | 10                      | 10              | 10%            |
| Worker | 75     | 25                      | 5               | 15%            |
| Drone  | 60     | 30                      | 1               | 20%            |

You start with 100 health and a 10% chance to miss. A bee that dies is
removed from the hive. The game ends when the Queen dies or when you do.
A summary then shows the rounds played, hits, stings, your final health,
whether the Queen is alive and how many worker and drone bees are left.

## Using it as a library

The modules are:

- `beestrap.hive`: `BeeType`, `Bee`, `create_bees()` and `create_hive()`.
- `beestrap.player`: `Player` and `create_player()`.
- `beestrap.event`: `EventType`, `GameState` and `Event`.
- `beestrap.protocol`: the `Protocol` interface and `CommunicationProtocol`.
- `beestrap.server`: `GameServer` and `start_server()`.
- `beestrap.client`: the terminal front end `Client` and `main()`.

`start_server()` runs a new game in a background thread and returns the
`CommunicationProtocol` a client uses to talk to it:

```python
from beestrap.event import EventType
from beestrap.server import start_server

protocol = start_server()
while True:
    event = protocol.hit()
    print(event.message)
    if event.kind is EventType.GAME_FINISHED:
        break
    event = protocol.wait_for_cpu()
    print(event.message)
    if event.kind is EventType.GAME_FINISHED:
        break
print(event.state.round, event.state.hits, event.state.stings)
```

Each `Event` carries a copy of the `GameState` taken when it was sent.

`GameServer` can also be driven directly: give it any object with the
`Protocol` methods, a starting `GameState` and, for repeatable games, a
`random.Random` instance, then call `run()`, `players_turn()` or
`hives_turn()`.

`Client(communication, reader, writer)` accepts any protocol and any
text streams for input and output, so a game can be run against your own
streams.

## Running the tests

```
pip install .[test]
pytest
```