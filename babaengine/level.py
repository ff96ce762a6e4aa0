"""The grid of a level and the movement, win and destruction checks on it."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from itertools import product

from .blocks import Block, ConceptRegistry, Location, MoveDirection, TextBlock
from .factory import produce_block

Cell = list[Block]
BlockMap = dict[str, list[tuple[int, int]]]


def _has_text(cell: Sequence[Block]) -> bool:
    return any(isinstance(b, TextBlock) for b in cell)


def _can_move(block: Block, cells_ahead: Sequence[Cell]) -> bool:
    for cell in cells_ahead:
        pushable = False
        for other in cell:
            if other.concept.stops(block):
                return False
            if other.concept.is_pushed_by(block):
                pushable = True
        if not pushable:
            return True
    return False


def _move_with_collaterals(block: Block, direction: MoveDirection, cells_ahead: Sequence[Cell]) -> None:
    block.move(direction)
    for cell in cells_ahead:
        moved = False
        for other in cell:
            if other.concept.is_pushed_by(block):
                other.move(direction)
                moved = True
        if not moved:
            break


class Level:
    """A ``size_x`` by ``size_y`` grid of cells, each holding any number of blocks.

    The grid is a snapshot: after blocks move or are removed, ``refresh``
    rebuilds it from the blocks the registry knows about.
    """

    def __init__(
        self,
        size_x: int,
        size_y: int,
        block_map: Mapping[str, Sequence[Sequence[int]]],
        registry: ConceptRegistry | None = None,
    ) -> None:
        self.size_x = size_x
        self.size_y = size_y
        self.registry = registry if registry is not None else ConceptRegistry()
        self._grid = self._empty_grid()
        for name, positions in sorted(block_map.items()):
            for x, y in positions:
                if not self._in_bounds(x, y):
                    raise ValueError(
                        f"block {name} at ({x}, {y}) lies outside a {size_x}x{size_y} level"
                    )
                self._grid[x][y].append(produce_block(name, self.registry, Location(x, y)))

    def _empty_grid(self) -> list[list[Cell]]:
        return [[[] for _ in range(self.size_y)] for _ in range(self.size_x)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size_x and 0 <= y < self.size_y

    def _locations(self) -> Iterator[Location]:
        for x, y in product(range(self.size_x), range(self.size_y)):
            yield Location(x, y)

    def _cell(self, pos: Location) -> Cell:
        return self._grid[pos.x][pos.y]

    def _cells_in_direction(self, direction: MoveDirection, start: Location) -> list[Cell]:
        if direction is MoveDirection.STILL:
            return []
        cells = []
        x, y = start.x + direction.dx, start.y + direction.dy
        while self._in_bounds(x, y):
            cells.append(self._grid[x][y])
            x, y = x + direction.dx, y + direction.dy
        return cells

    def refresh(self) -> None:
        """Rebuild the grid from the current blocks and their locations."""
        grid = self._empty_grid()
        for concept in self.registry.concepts():
            for block in concept.representations:
                grid[block.location.x][block.location.y].append(block)
        self._grid = grid

    def try_move_all(self, direction: MoveDirection) -> None:
        """Move every moveable block that can go in ``direction``."""
        for pos in self._locations():
            self.try_move(direction, pos)

    def try_move(self, direction: MoveDirection, pos: Location) -> None:
        """Move the moveable blocks of one cell, pushing what lies ahead."""
        moved = False
        for block in self._cell(pos):
            ahead = self._cells_in_direction(direction, pos)
            if block.concept.is_moveable() and _can_move(block, ahead):
                if not moved:
                    _move_with_collaterals(block, direction, ahead)
                    moved = True
                else:
                    block.move(direction)

    def try_win_all(self) -> bool:
        """Whether any cell meets a win condition."""
        return any(self.try_win(pos) for pos in self._locations())

    def try_win(self, pos: Location) -> bool:
        cell = self._cell(pos)
        return any(block.concept.is_win(cell) for block in cell)

    def try_execute_all(self) -> None:
        """Apply the destructive properties in every cell."""
        for pos in self._locations():
            self.try_execute(pos)

    def try_execute(self, pos: Location) -> None:
        cell = list(self._cell(pos))
        doomed: set[Block] = set()
        for block in cell:
            doomed |= block.concept.blocks_to_delete(block, cell)
        for block in doomed:
            block.remove()

    def text_sequences(self) -> list[list[TextBlock]]:
        """Every run of text read downwards or rightwards from where it starts."""
        sequences: list[list[TextBlock]] = []
        for pos in self._locations():
            x, y = pos.x, pos.y
            cell = self._grid[x][y]
            if not _has_text(cell):
                continue
            text_up = y != 0 and _has_text(self._grid[x][y - 1])
            text_left = x != 0 and _has_text(self._grid[x - 1][y])
            if not text_up:
                sequences.extend(
                    self._sequences_from(cell, self._cells_in_direction(MoveDirection.DOWN, pos))
                )
            if not text_left:
                sequences.extend(
                    self._sequences_from(cell, self._cells_in_direction(MoveDirection.RIGHT, pos))
                )
        return sequences

    def _sequences_from(self, current: Cell, remaining: Sequence[Cell]) -> list[list[TextBlock]]:
        if not remaining or not _has_text(current):
            return [[]]
        following = self._sequences_from(remaining[0], remaining[1:])
        return [
            [block, *sub]
            for block in current
            if isinstance(block, TextBlock)
            for sub in following
        ]

    def to_block_map(self) -> BlockMap:
        """Block names, sorted, mapped to the positions of their blocks."""
        result: BlockMap = {}
        for column in self._grid:
            for cell in column:
                for block in cell:
                    result.setdefault(block.name, []).append((block.location.x, block.location.y))
        return dict(sorted(result.items()))