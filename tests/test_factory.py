import pytest

from babaengine.blocks import (
    Block,
    ConceptRegistry,
    Location,
    NounBlock,
    PropertyBlock,
    VerbBlock,
)
from babaengine.factory import NOUN_BLOCK_NAMES, produce_block
from babaengine.properties import get_property


@pytest.fixture
def registry():
    return ConceptRegistry()


def test_object_block_uses_its_own_concept(registry):
    block = produce_block("baba", registry, Location(2, 3))
    assert type(block) is Block
    assert block.name == "BABA"
    assert block.concept is registry.get("BABA")
    assert block.location == Location(2, 3)
    assert block in registry.get("BABA").representations


def test_default_location_is_origin(registry):
    block = produce_block("ROCK", registry)
    assert block.location == Location(0, 0)


def test_noun_block_refers_to_named_concept(registry):
    block = produce_block("text_baba", registry, Location(1, 1))
    assert isinstance(block, NounBlock)
    assert block.name == "TEXT_BABA"
    assert block.concept is registry.get("TEXT")
    assert block.referenced_concept is registry.get("BABA")
    assert block in registry.get("BABA").references
    assert block in registry.get("TEXT").representations


def test_verb_block(registry):
    block = produce_block("is", registry)
    assert isinstance(block, VerbBlock)
    assert block.name == "IS"
    assert block.concept is registry.get("TEXT")


def test_property_block_carries_shared_property(registry):
    block = produce_block("you", registry)
    assert isinstance(block, PropertyBlock)
    assert block.property is get_property("YOU")
    assert block.concept is registry.get("TEXT")


def test_text_object_is_plain_block(registry):
    block = produce_block("text", registry)
    assert type(block) is Block
    assert block.concept is registry.get("TEXT")


def test_text_text_is_noun_for_text(registry):
    block = produce_block("text_text", registry)
    assert isinstance(block, NounBlock)
    assert block.referenced_concept is registry.get("TEXT")


def test_every_noun_name_refers_to_its_suffix(registry):
    assert "TEXT_BABA" in NOUN_BLOCK_NAMES
    for name in NOUN_BLOCK_NAMES:
        block = produce_block(name, registry)
        assert isinstance(block, NounBlock)
        assert block.referenced_concept is registry.get(name[len("TEXT_"):])


def test_unknown_name_raises(registry):
    with pytest.raises(ValueError, match="Not supported block name: blorp"):
        produce_block("blorp", registry)