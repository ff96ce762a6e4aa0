"""Commands sent to the game loop and the thread-safe queue that carries them."""

from __future__ import annotations

import threading
from collections import deque
from enum import Enum
from typing import Any


class CommandType(Enum):
    """Kinds of command.

    The numbering is part of the protocol: NEXT shares its value with BACK,
    and PREVIOUS with EXIT, so those pairs are aliases of one another.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    STILL = 4
    RESTART = 5
    NEXT = 6
    PREVIOUS = 7
    BACK = 6
    EXIT = 7
    STATUS = 8


class Command:
    """A request for the game loop to do one thing."""

    def __init__(self, type: CommandType) -> None:
        self.type = type

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type.name})"


class StatusCommand(Command):
    """A command whose issuer waits for the game loop to fill in a status."""

    def __init__(self, type: CommandType = CommandType.STATUS) -> None:
        super().__init__(type)
        self._status: Any = None
        self._ready = threading.Event()
        self._lock = threading.Lock()

    def wait_status(self, timeout: float | None = None) -> Any:
        """Block until the status is set and return it.

        Raises TimeoutError if ``timeout`` seconds pass first.
        """
        if not self._ready.wait(timeout):
            raise TimeoutError("status was not set in time")
        return self._status

    def set_status(self, status: Any) -> None:
        """Provide the status, waking the waiter. May be called only once."""
        with self._lock:
            if self._ready.is_set():
                raise RuntimeError("Status has already been set.")
            self._status = status
            self._ready.set()


class CommandQueue:
    """A first-in, first-out queue of commands shared between threads."""

    def __init__(self) -> None:
        self._items: deque[Command] = deque()
        self._lock = threading.Lock()

    def push(self, command: Command) -> None:
        with self._lock:
            self._items.append(command)

    def pop(self) -> Command:
        """Remove and return the oldest command; IndexError if there is none."""
        with self._lock:
            if not self._items:
                raise IndexError("pop from an empty command queue")
            return self._items.popleft()

    def empty(self) -> bool:
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)