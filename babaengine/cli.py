"""Command-line entry point: choose how the game is controlled and start it."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .commands import CommandQueue
from .events import ApiEventSource, TerminalEventSource
from .factory import BLOCK_NAMES
from .game import Game, GameMode
from .loader import LevelInfo, LevelLoader
from .server import GameServer

PROG = "babaengine"
USAGE = f"Usage: {PROG} -mode <api|keyboard> [-port <port>]"
DEFAULT_PORT = 8000

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class UsageError(ValueError):
    """The command line could not be understood."""


@dataclass(frozen=True)
class CliOptions:
    mode: str = ""
    port: int = DEFAULT_PORT
    game_mode: GameMode = GameMode.WINDOWED


def _parse_port(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise UsageError(f"Invalid port number: {text}")
    value = int(match.group(1))
    if not -(2**31) <= value < 2**31:
        raise UsageError(f"Invalid port number: {text}")
    return value % 65536


def parse_args(argv: Sequence[str]) -> CliOptions:
    """Read the options from ``argv`` (without the program name)."""
    args = list(argv)
    if len(args) < 2:
        raise UsageError("")

    mode = ""
    port = DEFAULT_PORT
    game_mode = GameMode.WINDOWED
    it = iter(args)
    for arg in it:
        if arg == "-mode":
            mode = next(it, None)
            if mode is None:
                raise UsageError("Missing value for -mode.")
        elif arg == "-port":
            value = next(it, None)
            if value is None:
                raise UsageError("Missing value for -port.")
            port = _parse_port(value)
        elif arg == "-headless":
            game_mode = GameMode.HEADLESS
        else:
            raise UsageError(f"Unknown argument: {arg}")

    if mode not in ("api", "keyboard") and game_mode is GameMode.WINDOWED:
        raise UsageError("Mode must be either 'api' or 'keyboard'.")
    return CliOptions(mode=mode, port=port, game_mode=game_mode)


def _render_text(level: LevelInfo, state: dict[str, list[tuple[int, int]]]) -> None:
    grid = [["." for _ in range(level.size_x)] for _ in range(level.size_y)]
    for name, positions in sorted(state.items(), reverse=True):
        symbol = name[0] if name in BLOCK_NAMES else name.removeprefix("TEXT_")[0].lower()
        for x, y in positions:
            if 0 <= x < level.size_x and 0 <= y < level.size_y:
                grid[y][x] = symbol
    print(f"{level.level_name}:")
    print("\n".join("".join(row) for row in grid))


def _run(options: CliOptions) -> None:
    loader = LevelLoader()
    if options.game_mode is GameMode.HEADLESS or options.mode == "api":
        command_queue = CommandQueue()
        server = GameServer(command_queue)
        server.run_in_background(options.port)
        try:
            if options.game_mode is GameMode.HEADLESS:
                game = Game(ApiEventSource(command_queue), loader, GameMode.HEADLESS)
            else:
                game = Game(
                    [ApiEventSource(command_queue), TerminalEventSource()],
                    loader,
                    GameMode.WINDOWED,
                    _render_text,
                )
            game.start()
        finally:
            server.shutdown()
    else:
        Game(TerminalEventSource(), loader, GameMode.WINDOWED, _render_text).start()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        if str(exc):
            print(f"Error: {exc}", file=sys.stderr)
        print(USAGE)
        return 1

    try:
        _run(options)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())