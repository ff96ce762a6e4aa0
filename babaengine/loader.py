"""Reading level descriptions from JSON and grid text files."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

MAP_PATH = "resources/maps/"
MAP_FILENAMES = (
    "baba_is_you.txt",
    "off_limits.txt",
    "off_limits_bug.txt",
    "out_of_reach.txt",
    "volcano.txt",
)


@dataclass
class LevelInfo:
    level_id: int
    level_name: str
    size_x: int
    size_y: int
    blocks: dict[str, list[tuple[int, int]]] = field(default_factory=dict)


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _field(obj: Mapping[str, Any], key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"level is missing {key!r}") from None


def parse_level(obj: Mapping[str, Any]) -> LevelInfo:
    """Build a LevelInfo from a decoded JSON level object."""
    name = _field(obj, "level name")
    if not isinstance(name, str):
        raise ValueError(f"'level name' must be a string, got {name!r}")
    blocks_obj = _field(obj, "blocks")
    if not isinstance(blocks_obj, Mapping):
        raise ValueError("'blocks' must be an object")

    blocks: dict[str, list[tuple[int, int]]] = {}
    for block_name, positions in blocks_obj.items():
        if not isinstance(positions, list):
            raise ValueError(f"positions of {block_name} must be an array")
        coords = []
        for pos in positions:
            if not isinstance(pos, list) or len(pos) < 2:
                raise ValueError(f"bad position for {block_name}: {pos!r}")
            coords.append((_as_int(pos[0], "x"), _as_int(pos[1], "y")))
        blocks[block_name] = coords

    return LevelInfo(
        level_id=_as_int(_field(obj, "level id"), "'level id'"),
        level_name=name,
        size_x=_as_int(_field(obj, "sizeX"), "'sizeX'"),
        size_y=_as_int(_field(obj, "sizeY"), "'sizeY'"),
        blocks=blocks,
    )


def load_from_string(text: str) -> LevelInfo:
    """Parse a JSON level document."""
    value = json.loads(text)
    if not isinstance(value, dict):
        raise ValueError("level document must be a JSON object")
    return parse_level(value)


def load_from_txt_file(
    path: str | Path, block_type_names: Sequence[str], level_id: int
) -> LevelInfo:
    """Read a grid file: width, height, then one block-type index per cell.

    Cells are listed row by row; indices name entries of ``block_type_names``,
    and cells whose type is EMPTY are left out.
    """
    path = Path(path)
    tokens = path.read_text().split()

    try:
        width, height = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        raise ValueError(f"Failed to read width and height from file: {path}") from None

    level = LevelInfo(level_id=level_id, level_name=path.stem, size_x=width, size_y=height)
    total = width * height
    cells = tokens[2:2 + max(total, 0)]

    for index, token in enumerate(cells):
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"Failed to read block value from file: {path}") from None
        if not 0 <= value < len(block_type_names):
            raise ValueError(f"Invalid block type value ({value}) in file: {path}")
        name = block_type_names[value]
        if name == "EMPTY":
            continue
        level.blocks.setdefault(name, []).append((index % width, index // width))

    if len(cells) < total:
        raise ValueError(f"Failed to read block value from file: {path}")
    return level


def load_from_file(
    path: str | Path, block_type_names: Sequence[str], level_id: int
) -> LevelInfo:
    """Load a level from a ``.json`` or ``.txt`` file."""
    path = Path(path)
    if path.name.endswith(".json"):
        text = path.read_text()
        log.debug("loaded level %s: %s", path, text)
        return load_from_string(text)
    if path.name.endswith(".txt"):
        return load_from_txt_file(path, block_type_names, level_id)
    raise ValueError(f"Unsupported file extension in file: {path}")


class LevelLoader:
    """Walks a fixed list of level files, wrapping round after the last."""

    def __init__(
        self,
        map_dir: str | Path = MAP_PATH,
        filenames: Sequence[str] = MAP_FILENAMES,
        block_type_names: Sequence[str] = (),
        map_index: int = 0,
    ) -> None:
        if not filenames:
            raise ValueError("at least one level file is required")
        self.map_dir = Path(map_dir)
        self.filenames = tuple(filenames)
        self.block_type_names = tuple(block_type_names)
        self.map_index = map_index

    def current_level(self) -> LevelInfo:
        return load_from_file(
            self.map_dir / self.filenames[self.map_index],
            self.block_type_names,
            self.map_index,
        )

    def next_level(self) -> LevelInfo:
        """Advance to the next file (wrapping to the first) and load it."""
        if self.map_index < len(self.filenames) - 1:
            self.map_index += 1
        else:
            self.map_index = 0
        return self.current_level()