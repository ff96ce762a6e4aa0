"""Waiting for commands from several sources and keeping the shown game state."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from itertools import cycle

from .commands import Command, CommandType
from .events import EventSource
from .loader import LevelInfo

GameState = dict[str, list[tuple[int, int]]]
Renderer = Callable[[LevelInfo, GameState], None]


class GameManager:
    """Polls its event sources in turn and hands the game state to a renderer."""

    idle_sleep = 0.001

    def __init__(
        self,
        event_sources: Iterable[EventSource],
        level: LevelInfo,
        renderer: Renderer | None = None,
    ) -> None:
        self.event_sources = list(event_sources)
        if not self.event_sources:
            raise ValueError("at least one event source is required")
        self.renderer = renderer
        self.level = level
        self.game_state: GameState = dict(level.blocks)
        self._render()

    def _render(self) -> None:
        if self.renderer is not None:
            self.renderer(self.level, self.game_state)

    def wait_until_command(self, max_wait_time: float | None = None) -> Command:
        """Poll the sources round-robin until one yields a command.

        With ``max_wait_time`` set, a STILL command is returned once that
        many seconds have passed without any command.
        """
        start = time.monotonic()
        rounds = len(self.event_sources)
        for polled, source in enumerate(cycle(self.event_sources), start=1):
            command = source.poll_command()
            if command is not None:
                return command
            if max_wait_time is not None and time.monotonic() - start > max_wait_time:
                return Command(CommandType.STILL)
            if polled % rounds == 0:
                time.sleep(self.idle_sleep)
        raise AssertionError("unreachable")

    def update_level(self, level: LevelInfo) -> None:
        """Switch to a new level, showing its initial blocks."""
        self.level = level
        self.game_state = dict(level.blocks)
        self._render()

    def update_game_state(self, state: GameState) -> None:
        """Show a new arrangement of blocks."""
        self.game_state = state
        self._render()