"""Rules read from text sequences, and their effect on concepts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .blocks import BlockConcept, ConceptRegistry, NounBlock, PropertyBlock, TextBlock, VerbBlock
from .factory import produce_block
from .properties import get_property


@dataclass(frozen=True)
class Rule:
    """A ``SUBJECT VERB OBJECT`` statement found on the map."""

    subject: NounBlock
    object: TextBlock

    @property
    def object_name(self) -> str:
        return self.object.name


@dataclass(frozen=True)
class PropertyRule(Rule):
    """``NOUN IS PROPERTY``: the subject's concept gains the property."""

    object: PropertyBlock


@dataclass(frozen=True)
class NounRule(Rule):
    """``NOUN IS NOUN``: every subject block turns into the object."""

    object: NounBlock


def parse_text(text_sequences: Iterable[Iterable[TextBlock]]) -> list[Rule]:
    """Find every noun-verb-property and noun-verb-noun triple in the sequences."""
    rules: list[Rule] = []
    for sequence in text_sequences:
        words = list(sequence)
        for subject, verb, obj in zip(words, words[1:], words[2:]):
            if not isinstance(subject, NounBlock) or not isinstance(verb, VerbBlock):
                continue
            if isinstance(obj, PropertyBlock):
                rules.append(PropertyRule(subject, obj))
            elif isinstance(obj, NounBlock):
                rules.append(NounRule(subject, obj))
    return rules


def clear_rules(concepts: Iterable[BlockConcept]) -> None:
    """Strip every property from the given concepts."""
    for concept in concepts:
        concept.clear_properties()


def add_default_property_rules(registry: ConceptRegistry) -> None:
    """Apply the rules that always hold: text is pushable."""
    registry.get("TEXT").add_property(get_property("PUSH"))


def add_property_rules(rules: Iterable[PropertyRule]) -> None:
    """Give each rule's subject concept the rule's property."""
    for rule in rules:
        rule.subject.referenced_concept.add_property(rule.object.property)


def execute_noun_rules(rules: Iterable[NounRule], registry: ConceptRegistry) -> None:
    """Replace every block of each rule's subject with a block of its object."""
    for rule in rules:
        subjects = rule.subject.referenced_concept.representations
        object_name = rule.object.referenced_concept.name
        for subject in subjects:
            produce_block(object_name, registry, subject.location)
            subject.remove()