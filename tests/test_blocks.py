import pytest

from babaengine.blocks import (
    Block,
    BlockConcept,
    ConceptRegistry,
    Location,
    MoveDirection,
    NounBlock,
    PropertyBlock,
    TextBlock,
    VerbBlock,
)
from babaengine.properties import get_property


@pytest.fixture
def registry():
    return ConceptRegistry()


def test_block_registers_and_removes(registry):
    concept = registry.get("BABA")
    block = Block("BABA", concept, Location(1, 2))
    assert concept.representations == (block,)
    block.remove()
    assert concept.representations == ()
    block.remove()
    assert concept.representations == ()


def test_default_location(registry):
    block = Block("ROCK", registry.get("ROCK"))
    assert block.location == Location(0, 0)


@pytest.mark.parametrize(
    "direction, dx, dy",
    [
        (MoveDirection.UP, 0, -1),
        (MoveDirection.DOWN, 0, 1),
        (MoveDirection.LEFT, -1, 0),
        (MoveDirection.RIGHT, 1, 0),
        (MoveDirection.STILL, 0, 0),
    ],
)
def test_move_steps(registry, direction, dx, dy):
    block = Block("BABA", registry.get("BABA"), Location(3, 3))
    new = block.move(direction)
    assert new == block.location
    assert (new.x - 3, new.y - 3) == (dx, dy)


def test_moves_round_trip(registry):
    block = Block("BABA", registry.get("BABA"), Location(4, 5))
    block.move(MoveDirection.UP)
    block.move(MoveDirection.LEFT)
    block.move(MoveDirection.DOWN)
    block.move(MoveDirection.RIGHT)
    assert block.location == Location(4, 5)


def test_move_to(registry):
    block = Block("BABA", registry.get("BABA"))
    assert block.move_to(Location(7, 1)) == Location(7, 1)
    assert block.location == Location(7, 1)


def test_noun_block_references(registry):
    text = registry.get("TEXT")
    baba = registry.get("BABA")
    noun = NounBlock("TEXT_BABA", text, baba, Location(0, 1))
    assert isinstance(noun, TextBlock)
    assert noun.referenced_concept is baba
    assert baba.references == (noun,)
    assert text.representations == (noun,)
    noun.remove()
    assert baba.references == ()
    assert text.representations == ()


def test_property_and_verb_blocks(registry):
    text = registry.get("TEXT")
    you = PropertyBlock("YOU", text, get_property("YOU"))
    verb = VerbBlock("IS", text)
    assert you.property is get_property("YOU")
    assert set(text.representations) == {you, verb}


def test_concept_properties(registry):
    concept = registry.get("WALL")
    assert concept.has_property("STOP") is False
    concept.add_property(get_property("STOP"))
    concept.add_property(get_property("STOP"))
    assert concept.properties == frozenset({get_property("STOP")})
    assert concept.has_property("STOP") is True
    concept.clear_properties()
    assert concept.properties == frozenset()


def test_push_overrides_stop(registry):
    mover = Block("BABA", registry.get("BABA"))
    concept = BlockConcept("ROCK")
    concept.add_property(get_property("STOP"))
    assert concept.stops(mover) is True
    concept.add_property(get_property("PUSH"))
    assert concept.is_pushed_by(mover) is True
    assert concept.stops(mover) is False


def test_moveable_and_win(registry):
    baba_concept = registry.get("BABA")
    flag_concept = registry.get("FLAG")
    baba = Block("BABA", baba_concept)
    flag = Block("FLAG", flag_concept)
    assert baba_concept.is_moveable() is False
    baba_concept.add_property(get_property("YOU"))
    flag_concept.add_property(get_property("WIN"))
    assert baba_concept.is_moveable() is True
    assert flag_concept.is_win([flag, baba]) is True
    assert flag_concept.is_win([flag]) is False


def test_blocks_to_delete_unions_properties(registry):
    water_concept = registry.get("WATER")
    water_concept.add_property(get_property("SINK"))
    water_concept.add_property(get_property("DEFEAT"))
    water = Block("WATER", water_concept)
    rock = Block("ROCK", registry.get("ROCK"))
    assert water_concept.blocks_to_delete(water, [water, rock]) == {water, rock}


def test_registry_get_is_stable(registry):
    first = registry.get("BABA")
    assert registry.get("BABA") is first
    registry.get("ROCK")
    assert [c.name for c in registry.concepts()] == ["BABA", "ROCK"]


def test_registry_clear_removes_blocks(registry):
    baba = registry.get("BABA")
    text = registry.get("TEXT")
    Block("BABA", baba)
    noun = NounBlock("TEXT_BABA", text, baba)
    registry.clear()
    assert registry.concepts() == ()
    assert baba.representations == ()
    assert baba.references == ()
    assert text.representations == ()
    assert noun.referenced_concept is baba