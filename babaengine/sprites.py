"""Where each block's picture lies on the sprite sheets."""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)

SPRITE_SHEETS = (
    "./resources/sprites/characters.png",
    "./resources/sprites/statics.png",
    "./resources/sprites/texts.png",
    "./resources/sprites/tiles.png",
    "./resources/sprites/animated.png",
)

SPRITE_SIZE = 24
FALLBACK_SPRITE = "me"


@dataclass(frozen=True)
class SpriteRect:
    """A rectangle of pixels on one of the sprite sheets."""

    sheet: int
    left: int
    top: int
    width: int = SPRITE_SIZE
    height: int = SPRITE_SIZE

    @property
    def sheet_path(self) -> str:
        return SPRITE_SHEETS[self.sheet]


_SPRITES: dict[str, SpriteRect] = {
    "baba": SpriteRect(0, 25 * 23 + 1, 25 * 0 + 1),
    "text_baba": SpriteRect(0, 25 * 22 + 1, 25 * 0 + 1),
    "keke": SpriteRect(0, 25 * 23 + 1, 25 * 30 + 1),
    "text_keke": SpriteRect(0, 25 * 22 + 1, 25 * 30 + 1),
    "me": SpriteRect(0, 25 * 23 + 1, 25 * 36 + 1),
    "text_me": SpriteRect(0, 24 * 23 + 1, 25 * 36 + 1),
    "rock": SpriteRect(1, 25 * 9 + 1, 25 * 24 + 1),
    "text_rock": SpriteRect(1, 25 * 8 + 1, 25 * 24 + 1),
    "flag": SpriteRect(1, 25 * 4 + 1, 25 * 9 + 1),
    "text_flag": SpriteRect(1, 25 * 3 + 1, 25 * 9 + 1),
    "door": SpriteRect(1, 25 * 9 + 1, 25 * 6 + 1),
    "text_door": SpriteRect(1, 25 * 8 + 1, 25 * 6 + 1),
    "key": SpriteRect(1, 25 * 4 + 1, 25 * 15 + 1),
    "text_key": SpriteRect(1, 25 * 3 + 1, 25 * 15 + 1),
    "is": SpriteRect(2, 25 * 11 + 1, 25 * 3 + 1),
    "you": SpriteRect(2, 25 * 11 + 1, 25 * 9 + 1),
    "push": SpriteRect(2, 25 * 2 + 1, 25 * 12 + 1),
    "stop": SpriteRect(2, 25 * 8 + 1, 25 * 12 + 1),
    "win": SpriteRect(2, 25 * 11 + 1, 25 * 44 + 22 + 1),
    "defeat": SpriteRect(2, 25 * 2 + 1, 25 * 29 + 5),
    "sink": SpriteRect(2, 25 * 2 + 1, 25 * 32 + 5),
    "hot": SpriteRect(2, 25 * 5 + 1, 25 * 29 + 5),
    "melt": SpriteRect(2, 25 * 8 + 1, 25 * 29 + 5),
    "wall": SpriteRect(3, 25 * 19 + 1, 25 * 60 + 1),
    "text_wall": SpriteRect(3, 25 * 18 + 1, 25 * 60 + 1),
    "water": SpriteRect(3, 25 * 19 + 1, 25 * 63 + 1),
    "text_water": SpriteRect(3, 25 * 18 + 1, 25 * 63 + 1),
    "lava": SpriteRect(3, 25 * 19 + 1, 25 * 36 + 1),
    "text_lava": SpriteRect(3, 25 * 18 + 1, 25 * 36 + 1),
    "skull": SpriteRect(4, 25 * 7 + 1, 25 * 36 + 21 + 1),
    "text_skull": SpriteRect(4, 25 * 6 + 1, 25 * 36 + 21 + 1),
}

SPRITE_NAMES = tuple(_SPRITES)


def sprite_rect(name: str) -> SpriteRect:
    """The sprite for block ``name`` (case-insensitive).

    An unknown name is logged and answered with the fallback sprite.
    """
    rect = _SPRITES.get(name.lower())
    if rect is None:
        log.warning("Sprite with name '%s' not found.", name)
        return _SPRITES[FALLBACK_SPRITE]
    return rect


def sprite_sheet_paths() -> tuple[str, ...]:
    """Paths of the sprite sheet images, in sheet-index order."""
    return SPRITE_SHEETS