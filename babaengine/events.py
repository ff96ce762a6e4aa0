"""Sources of commands for the game loop: the API queue and the terminal."""

from __future__ import annotations

import queue
import sys
import threading
from abc import ABC, abstractmethod
from typing import TextIO

from .commands import Command, CommandQueue, CommandType

_KEY_COMMANDS: dict[str, CommandType] = {
    "a": CommandType.LEFT,
    "left": CommandType.LEFT,
    "w": CommandType.UP,
    "up": CommandType.UP,
    "d": CommandType.RIGHT,
    "right": CommandType.RIGHT,
    "s": CommandType.DOWN,
    "down": CommandType.DOWN,
    "space": CommandType.STILL,
    "r": CommandType.RESTART,
    "n": CommandType.NEXT,
    "p": CommandType.PREVIOUS,
    "q": CommandType.BACK,
    "escape": CommandType.EXIT,
    "esc": CommandType.EXIT,
    "\x1b": CommandType.EXIT,
}


def command_for_key(key: str) -> CommandType | None:
    """The command bound to ``key``, or None if the key is not bound.

    Key names are case-insensitive; a blank key stands for the space bar.
    """
    name = key.strip().lower() or "space"
    return _KEY_COMMANDS.get(name)


class EventSource(ABC):
    """Something the game loop can ask for the next command without blocking."""

    @abstractmethod
    def poll_command(self) -> Command | None:
        """Return a pending command, or None if there is none yet."""


class ApiEventSource(EventSource):
    """Takes commands pushed onto a queue by the API server."""

    def __init__(self, command_queue: CommandQueue) -> None:
        self.command_queue = command_queue

    def poll_command(self) -> Command | None:
        if self.command_queue.empty():
            return None
        return self.command_queue.pop()


class TerminalEventSource(EventSource):
    """Reads one key name per line from a text stream.

    Lines are read on a background thread so that polling never blocks.
    The end of the stream counts as a request to exit.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._lines: queue.Queue[str] = queue.Queue()
        self._reader: threading.Thread | None = None

    def _ensure_reader(self) -> None:
        if self._reader is None:
            self._reader = threading.Thread(target=self._read_lines, daemon=True)
            self._reader.start()

    def _read_lines(self) -> None:
        for line in self._stream:
            self._lines.put(line)
        self._lines.put("")

    def poll_command(self) -> Command | None:
        self._ensure_reader()
        try:
            line = self._lines.get_nowait()
        except queue.Empty:
            return None
        if line == "":
            return Command(CommandType.EXIT)
        command_type = command_for_key(line)
        return None if command_type is None else Command(command_type)