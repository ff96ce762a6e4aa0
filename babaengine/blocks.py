"""Blocks on the map and the concepts (BABA, WALL, TEXT, ...) they belong to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .properties import Property


@dataclass(frozen=True)
class Location:
    x: int
    y: int


class MoveDirection(Enum):
    """A move on the grid, valued by its (dx, dy) offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    STILL = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Block:
    """A physical block on the map; registers itself with its concept."""

    def __init__(self, name: str, concept: BlockConcept, location: Location | None = None) -> None:
        self.name = name
        self.concept = concept
        self.location = location if location is not None else Location(0, 0)
        concept.add_representation(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.location.x}, {self.location.y})"

    def move(self, direction: MoveDirection) -> Location:
        """Step one cell in ``direction`` and return the new location."""
        self.location = Location(self.location.x + direction.dx, self.location.y + direction.dy)
        return self.location

    def move_to(self, location: Location) -> Location:
        """Jump to ``location`` and return it."""
        self.location = location
        return self.location

    def remove(self) -> None:
        """Take this block out of the game."""
        self.concept.remove_representation(self)


class TextBlock(Block):
    """A block of text, which can take part in rules."""


class NounBlock(TextBlock):
    """Text naming a concept, e.g. TEXT_BABA refers to BABA."""

    def __init__(
        self,
        name: str,
        concept: BlockConcept,
        referenced_concept: BlockConcept,
        location: Location | None = None,
    ) -> None:
        super().__init__(name, concept, location)
        self.referenced_concept = referenced_concept
        referenced_concept.add_reference(self)

    def remove(self) -> None:
        super().remove()
        self.referenced_concept.remove_reference(self)


class VerbBlock(TextBlock):
    """Text for a verb such as IS."""


class PropertyBlock(TextBlock):
    """Text naming a property such as YOU or WIN."""

    def __init__(
        self,
        name: str,
        concept: BlockConcept,
        prop: Property,
        location: Location | None = None,
    ) -> None:
        super().__init__(name, concept, location)
        self.property = prop


class BlockConcept:
    """A kind of block: tracks its blocks, the nouns naming it, and its properties."""

    def __init__(self, name: str) -> None:
        self.name = name
        # dicts used as insertion-ordered sets
        self._representations: dict[Block, None] = {}
        self._references: dict[NounBlock, None] = {}
        self._properties: dict[Property, None] = {}

    def __repr__(self) -> str:
        return f"BlockConcept({self.name!r})"

    @property
    def representations(self) -> tuple[Block, ...]:
        return tuple(self._representations)

    @property
    def references(self) -> tuple[NounBlock, ...]:
        return tuple(self._references)

    @property
    def properties(self) -> frozenset[Property]:
        return frozenset(self._properties)

    def add_property(self, prop: Property) -> None:
        self._properties[prop] = None

    def clear_properties(self) -> None:
        self._properties.clear()

    def has_property(self, name: str) -> bool:
        return any(p.name == name for p in self._properties)

    def is_pushed_by(self, block: Block) -> bool:
        return any(p.is_pushed_by(block) for p in self._properties)

    def stops(self, block: Block) -> bool:
        if self.is_pushed_by(block):
            return False
        return any(p.stops(block) for p in self._properties)

    def is_moveable(self) -> bool:
        return any(p.is_moveable() for p in self._properties)

    def is_win(self, blocks_in_cell: Iterable[Block]) -> bool:
        cell = list(blocks_in_cell)
        return any(p.is_win(cell) for p in self._properties)

    def blocks_to_delete(self, called_by: Block, blocks_in_cell: Iterable[Block]) -> set[Block]:
        cell = list(blocks_in_cell)
        result: set[Block] = set()
        for p in self._properties:
            result |= p.blocks_to_delete(called_by, cell)
        return result

    def add_representation(self, block: Block) -> None:
        self._representations[block] = None

    def remove_representation(self, block: Block) -> None:
        self._representations.pop(block, None)

    def add_reference(self, noun: NounBlock) -> None:
        self._references[noun] = None

    def remove_reference(self, noun: NounBlock) -> None:
        self._references.pop(noun, None)


class ConceptRegistry:
    """The set of concepts in play, created on first use by name."""

    def __init__(self) -> None:
        self._concepts: dict[str, BlockConcept] = {}

    def get(self, name: str) -> BlockConcept:
        """Return the concept called ``name``, creating it if needed."""
        concept = self._concepts.get(name)
        if concept is None:
            concept = self._concepts[name] = BlockConcept(name)
        return concept

    def concepts(self) -> tuple[BlockConcept, ...]:
        return tuple(self._concepts.values())

    def clear(self) -> None:
        """Remove every block and noun reference, then forget all concepts."""
        for concept in self._concepts.values():
            for block in concept.representations:
                block.remove()
            for noun in concept.references:
                noun.remove()
        self._concepts.clear()