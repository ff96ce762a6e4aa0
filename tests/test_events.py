import io
import time

import pytest

from babaengine.commands import Command, CommandQueue, CommandType
from babaengine.events import (
    ApiEventSource,
    EventSource,
    TerminalEventSource,
    command_for_key,
)


def poll_until(source, deadline=2.0):
    end = time.monotonic() + deadline
    while time.monotonic() < end:
        command = source.poll_command()
        if command is not None:
            return command
        time.sleep(0.001)
    return None


@pytest.mark.parametrize(
    "key, expected",
    [
        ("a", CommandType.LEFT),
        ("Left", CommandType.LEFT),
        ("w", CommandType.UP),
        ("UP", CommandType.UP),
        ("d", CommandType.RIGHT),
        ("right", CommandType.RIGHT),
        ("s", CommandType.DOWN),
        ("down", CommandType.DOWN),
        ("space", CommandType.STILL),
        (" ", CommandType.STILL),
        ("r", CommandType.RESTART),
        ("n", CommandType.NEXT),
        ("p", CommandType.PREVIOUS),
        ("q", CommandType.BACK),
        ("escape", CommandType.EXIT),
        ("\x1b", CommandType.EXIT),
    ],
)
def test_command_for_key(key, expected):
    assert command_for_key(key) is expected


def test_unbound_key_gives_none():
    assert command_for_key("x") is None


def test_event_source_is_abstract():
    with pytest.raises(TypeError):
        EventSource()


def test_api_source_returns_queued_commands_in_order():
    q = CommandQueue()
    first, second = Command(CommandType.UP), Command(CommandType.DOWN)
    q.push(first)
    q.push(second)
    source = ApiEventSource(q)
    assert source.poll_command() is first
    assert source.poll_command() is second
    assert source.poll_command() is None
    assert q.empty()


def test_terminal_source_reads_keys():
    source = TerminalEventSource(io.StringIO("w\n"))
    command = poll_until(source)
    assert command is not None
    assert command.type is CommandType.UP


def test_terminal_source_skips_unknown_keys():
    source = TerminalEventSource(io.StringIO("x\nd\n"))
    command = poll_until(source)
    assert command is not None
    assert command.type is CommandType.RIGHT


def test_terminal_blank_line_means_still():
    source = TerminalEventSource(io.StringIO("\n"))
    command = poll_until(source)
    assert command is not None
    assert command.type is CommandType.STILL


def test_terminal_end_of_stream_exits():
    source = TerminalEventSource(io.StringIO(""))
    command = poll_until(source)
    assert command is not None
    assert command.type is CommandType.EXIT
    assert source.poll_command() is None