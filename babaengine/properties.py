"""Properties that rules attach to block concepts, and the shared property registry."""

from __future__ import annotations

from collections.abc import Iterable


class Property:
    """A behaviour that a concept gains when a rule such as ``X IS PROP`` holds.

    The base class is inert: it neither stops, pushes, moves, wins nor destroys.
    Subclasses switch the simple behaviours on through the class flags below.
    """

    stopping: bool = False
    pushable: bool = False
    moveable: bool = False

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def blocks_to_delete(self, executed_by, blocks_in_cell: Iterable) -> set:
        """Blocks that this property destroys in the cell of ``executed_by``."""
        return set()

    def stops(self, block) -> bool:
        """Whether a block carrying this property stops ``block`` from entering."""
        return self.stopping

    def is_pushed_by(self, block) -> bool:
        """Whether a block carrying this property is pushed by ``block``."""
        return self.pushable

    def is_moveable(self) -> bool:
        """Whether blocks carrying this property move with the player's input."""
        return self.moveable

    def is_win(self, blocks_in_cell: Iterable) -> bool:
        """Whether the given cell contents make the level won."""
        return False


def _first_with(prop_name: str, blocks_in_cell: Iterable):
    prop = _PROPERTIES[prop_name]
    return next((b for b in blocks_in_cell if prop in b.concept.properties), None)


class StopProperty(Property):
    """Stops every block that tries to enter its cell."""

    stopping = True

    def __init__(self) -> None:
        super().__init__("STOP")

    def stops(self, block) -> bool:
        return self.stopping


class PushProperty(Property):
    """Is pushed by every block that moves into it."""

    pushable = True

    def __init__(self) -> None:
        super().__init__("PUSH")

    def is_pushed_by(self, block) -> bool:
        return self.pushable


class YouProperty(Property):
    """Moves with the player's input."""

    moveable = True

    def __init__(self) -> None:
        super().__init__("YOU")

    def is_moveable(self) -> bool:
        return self.moveable


class WinProperty(Property):
    def __init__(self) -> None:
        super().__init__("WIN")

    def is_win(self, blocks_in_cell: Iterable) -> bool:
        return any(b.concept.has_property("YOU") for b in blocks_in_cell)


class DefeatProperty(Property):
    """Destroys one YOU block sharing the cell."""

    def __init__(self) -> None:
        super().__init__("DEFEAT")

    def blocks_to_delete(self, executed_by, blocks_in_cell: Iterable) -> set:
        victim = _first_with("YOU", blocks_in_cell)
        return set() if victim is None else {victim}


class HotProperty(Property):
    """Destroys one MELT block sharing the cell."""

    def __init__(self) -> None:
        super().__init__("HOT")

    def blocks_to_delete(self, executed_by, blocks_in_cell: Iterable) -> set:
        victim = _first_with("MELT", blocks_in_cell)
        return set() if victim is None else {victim}


class ShutProperty(Property):
    """Stops movers that are not KEY; destroys itself together with an OPEN block."""

    def __init__(self) -> None:
        super().__init__("SHUT")

    def stops(self, block) -> bool:
        return not block.concept.has_property("KEY")

    def blocks_to_delete(self, executed_by, blocks_in_cell: Iterable) -> set:
        opener = _first_with("OPEN", blocks_in_cell)
        return set() if opener is None else {executed_by, opener}


class SinkProperty(Property):
    """Destroys everything in its cell, itself included."""

    def __init__(self) -> None:
        super().__init__("SINK")

    def blocks_to_delete(self, executed_by, blocks_in_cell: Iterable) -> set:
        to_delete = set()
        for block in blocks_in_cell:
            if block is not executed_by:
                to_delete.add(executed_by)
            to_delete.add(block)
        return to_delete


_PROPERTIES: dict[str, Property] = {
    "STOP": StopProperty(),
    "PUSH": PushProperty(),
    "WIN": WinProperty(),
    "YOU": YouProperty(),
    "DEFEAT": DefeatProperty(),
    "SHUT": ShutProperty(),
    "OPEN": Property("OPEN"),
    "HOT": HotProperty(),
    "MELT": Property("MELT"),
    "SINK": SinkProperty(),
}


def get_property(name: str) -> Property:
    """Return the shared property instance registered under ``name``."""
    try:
        return _PROPERTIES[name]
    except KeyError:
        raise KeyError(f"unknown property: {name}") from None


def property_names() -> tuple[str, ...]:
    """Names of all known properties, in registration order."""
    return tuple(_PROPERTIES)