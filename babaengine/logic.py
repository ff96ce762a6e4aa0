"""The rules-move-act cycle that drives a level from one turn to the next."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .blocks import ConceptRegistry, MoveDirection
from .level import BlockMap, Level
from .rules import (
    NounRule,
    PropertyRule,
    Rule,
    add_default_property_rules,
    add_property_rules,
    clear_rules,
    execute_noun_rules,
    parse_text,
)

RulesSummary = dict[str, list[dict[str, str]]]


class GameLogic:
    """Holds one level and applies a turn to it for each move."""

    def __init__(
        self,
        size_x: int,
        size_y: int,
        block_map: Mapping[str, Sequence[Sequence[int]]],
    ) -> None:
        self._level: Level | None = None
        self._rules: list[Rule] = []
        self._won = False
        self.load_level(size_x, size_y, block_map)

    @property
    def level(self) -> Level:
        assert self._level is not None
        return self._level

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def level_map(self) -> BlockMap:
        """Block names mapped to the positions of their blocks."""
        return self.level.to_block_map()

    def rules_summary(self) -> RulesSummary:
        """Active rules grouped by subject name, subjects in sorted order."""
        summary: RulesSummary = {}
        for rule in self._rules:
            subject = rule.subject.referenced_concept.name
            summary.setdefault(subject, []).append(
                {"subject": subject, "verb": "IS", "object": rule.object_name}
            )
        return dict(sorted(summary.items()))

    def load_level(
        self,
        size_x: int,
        size_y: int,
        block_map: Mapping[str, Sequence[Sequence[int]]],
    ) -> None:
        """Replace the current level with a fresh one built from ``block_map``."""
        if self._level is not None:
            self._level.registry.clear()
        self._level = Level(size_x, size_y, block_map, ConceptRegistry())
        self._rule_phase()
        self._action_phase()

    def move(self, direction: MoveDirection) -> None:
        """Play one turn in ``direction``."""
        self.level.try_move_all(direction)
        self.level.refresh()
        self._rule_phase()
        self._action_phase()

    def level_completed(self) -> bool:
        return self._won

    def _rule_phase(self) -> None:
        registry = self.level.registry
        clear_rules(registry.concepts())
        add_default_property_rules(registry)
        self._rules = parse_text(self.level.text_sequences())
        add_property_rules(r for r in self._rules if isinstance(r, PropertyRule))

    def _action_phase(self) -> None:
        level = self.level
        execute_noun_rules(
            [r for r in self._rules if isinstance(r, NounRule)], level.registry
        )
        level.refresh()
        level.try_execute_all()
        level.refresh()
        self._won = level.try_win_all()
        level.refresh()