"""The game loop: takes commands, plays turns and moves between levels."""

from __future__ import annotations

import time
from collections.abc import Iterable
from enum import Enum

from .blocks import MoveDirection
from .commands import Command, CommandType, StatusCommand
from .events import EventSource
from .loader import LevelInfo, LevelLoader
from .logic import GameLogic
from .manager import GameManager, Renderer
from .status import StatusReport

_DIRECTIONS = {
    CommandType.LEFT: MoveDirection.LEFT,
    CommandType.RIGHT: MoveDirection.RIGHT,
    CommandType.UP: MoveDirection.UP,
    CommandType.DOWN: MoveDirection.DOWN,
    CommandType.STILL: MoveDirection.STILL,
}


class GameMode(Enum):
    HEADLESS = "headless"
    WINDOWED = "windowed"


class Game:
    """Runs levels from ``loader`` driven by commands from ``event_sources``.

    In headless mode nothing is drawn; in windowed mode the renderer, if
    given, is shown every change of state.
    """

    def __init__(
        self,
        event_sources: EventSource | Iterable[EventSource],
        loader: LevelLoader,
        mode: GameMode = GameMode.WINDOWED,
        renderer: Renderer | None = None,
        *,
        win_timeout: float = 3.0,
        win_poll: float = 1.0,
    ) -> None:
        if isinstance(event_sources, EventSource):
            event_sources = [event_sources]
        self.loader = loader
        self.mode = mode
        self.win_timeout = win_timeout
        self.win_poll = win_poll
        self.level_info: LevelInfo = loader.current_level()
        self.manager = GameManager(
            event_sources,
            self.level_info,
            renderer if mode is GameMode.WINDOWED else None,
        )
        info = self.level_info
        self.logic = GameLogic(info.size_x, info.size_y, info.blocks)

    def start(self) -> None:
        """Play until an EXIT command arrives."""
        while True:
            command = self.handle(self.manager.wait_until_command())
            if command.type is CommandType.EXIT:
                break

    def handle(self, command: Command) -> Command:
        """Carry out one command and return the command that ends the turn.

        When the level is won, the win procedure runs and its last command
        is returned instead.
        """
        command_type = command.type
        if command_type in _DIRECTIONS:
            self.logic.move(_DIRECTIONS[command_type])
        elif command_type is CommandType.RESTART:
            self.restart_level()
        elif command_type is CommandType.NEXT:
            self.load_next_level()
        elif command_type is CommandType.STATUS:
            self._answer_status(command)

        if self.logic.level_completed():
            command = self._win_procedure()

        self.manager.update_game_state(self.logic.level_map())
        return command

    def restart_level(self) -> None:
        self._load(self.loader.current_level())

    def load_next_level(self) -> None:
        self._load(self.loader.next_level())

    def _load(self, info: LevelInfo) -> None:
        self.level_info = info
        self.logic.load_level(info.size_x, info.size_y, info.blocks)
        self.manager.update_level(info)

    def build_status(self) -> StatusReport:
        """A snapshot of the current level for API clients."""
        info = self.level_info
        return StatusReport(
            level_id=info.level_id,
            level_name=info.level_name,
            level_size=(info.size_x, info.size_y),
            level_completed=self.logic.level_completed(),
            blocks=self.logic.level_map(),
            rules=self.logic.rules_summary(),
        )

    def _answer_status(self, command: Command) -> None:
        if isinstance(command, StatusCommand):
            command.set_status(self.build_status())

    def _win_procedure(self) -> Command:
        self.manager.update_game_state(self.logic.level_map())
        print("Level Completed!")

        start = time.monotonic()
        while True:
            command = self.manager.wait_until_command(self.win_poll)
            command_type = command.type
            if command_type is CommandType.RESTART:
                self.restart_level()
                return command
            if command_type is CommandType.NEXT:
                self.load_next_level()
                return command
            if command_type is CommandType.STATUS:
                self._answer_status(command)

            if time.monotonic() - start > self.win_timeout:
                print("Time limit exceeded! Automatically proceeding to next level.")
                break
            if command_type is CommandType.EXIT:
                break

        self.load_next_level()
        return command