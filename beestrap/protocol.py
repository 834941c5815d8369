"""Message flow between the game engine and the client."""

from __future__ import annotations

import queue
import threading
from typing import Protocol as _TypingProtocol
from typing import Generic, TypeVar

from beestrap.event import Event, EventType, GameState

_T = TypeVar("_T")


class Protocol(_TypingProtocol):
    """What the client and the game engine need from a communication channel."""

    def hit(self) -> Event:
        ...

    def wait_for_cpu(self) -> Event:
        ...

    def wait_for_player(self) -> None:
        ...

    def hit_response(self, message: str, state: GameState) -> None:
        ...

    def sting_response(self, message: str, state: GameState) -> None:
        ...

    def game_finished_response(self, message: str, state: GameState) -> None:
        ...


class _Channel(Generic[_T]):
    """A rendezvous channel: a send blocks until its item has been received."""

    def __init__(self) -> None:
        self._queue: queue.Queue[tuple[_T, threading.Event]] = queue.Queue()

    def send(self, item: _T) -> None:
        delivered = threading.Event()
        self._queue.put((item, delivered))
        delivered.wait()

    def receive(self) -> _T:
        item, delivered = self._queue.get()
        delivered.set()
        return item


class CommunicationProtocol:
    """Coordinates player input and game events between two threads."""

    def __init__(self) -> None:
        self._hit_signal: _Channel[None] = _Channel()
        self._events: _Channel[Event] = _Channel()

    def hit(self) -> Event:
        """Signal a player strike and block until the engine reports its outcome."""
        self._hit_signal.send(None)
        return self._events.receive()

    def wait_for_cpu(self) -> Event:
        """Block until the hive has finished its turn and return the event."""
        return self._events.receive()

    def wait_for_player(self) -> None:
        """Block until the player strikes."""
        self._hit_signal.receive()

    def _send(self, kind: EventType, message: str, state: GameState) -> None:
        self._events.send(Event(kind, message, state.snapshot()))

    def hit_response(self, message: str, state: GameState) -> None:
        """Report that the player has attacked."""
        self._send(EventType.PLAYER_ATTACK, message, state)

    def sting_response(self, message: str, state: GameState) -> None:
        """Report that the hive has attacked."""
        self._send(EventType.HIVE_ATTACK, message, state)

    def game_finished_response(self, message: str, state: GameState) -> None:
        """Report that the game has finished."""
        self._send(EventType.GAME_FINISHED, message, state)