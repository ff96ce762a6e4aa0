"""Creation of blocks from their names as they appear in level maps."""

from __future__ import annotations

from .blocks import Block, ConceptRegistry, Location, NounBlock, PropertyBlock, VerbBlock
from .properties import get_property, property_names

# Object kinds, grouped by initial letter.
_OBJECT_KINDS = """
    algae all anni
    baba bat belt bird bog bolt box brick bubble bug
    cake cliff cloud cog crab cursor
    door dust
    empty
    fence fire flag flower foliage fruit fungus
    ghost grass group
    hand hedge
    ice image
    jelly
    keke key
    lava leaf level line love
    me moon
    orb
    pillar pipe
    robot rock rocket rose rubble
    skull star statue sun
    text tile tree
    ufo
    violet
    wall water
"""

_VERBS = "is has make and not on near facing lonely"

_NOUN_PREFIX = "TEXT_"

BLOCK_NAMES = frozenset(_OBJECT_KINDS.upper().split())

NOUN_BLOCK_NAMES = frozenset(_NOUN_PREFIX + name for name in BLOCK_NAMES)

VERB_BLOCK_NAMES = frozenset(_VERBS.upper().split())


def produce_block(name: str, registry: ConceptRegistry, location: Location | None = None) -> Block:
    """Create the block called ``name`` (case-insensitive) at ``location``.

    Object names give plain blocks of their own concept; ``TEXT_<object>``,
    verbs and property names give text blocks of the TEXT concept.
    Raises ValueError for a name that is none of these.
    """
    upper = name.upper()
    if location is None:
        location = Location(0, 0)

    if upper in BLOCK_NAMES:
        return Block(upper, registry.get(upper), location)

    text_concept = registry.get("TEXT")
    if upper in NOUN_BLOCK_NAMES:
        referenced = registry.get(upper[len(_NOUN_PREFIX):])
        return NounBlock(upper, text_concept, referenced, location)
    if upper in VERB_BLOCK_NAMES:
        return VerbBlock(upper, text_concept, location)
    if upper in property_names():
        return PropertyBlock(upper, text_concept, get_property(upper), location)

    raise ValueError(f"Not supported block name: {name}")