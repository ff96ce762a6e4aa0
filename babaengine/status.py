"""Snapshot of a level's state as reported to API clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class StatusReport:
    level_id: int = 0
    level_name: str = ""
    level_size: tuple[int, int] = (0, 0)
    level_completed: bool = False
    blocks: dict[str, list[tuple[int, int]]] = field(default_factory=dict)
    rules: dict[str, list[dict[str, str]]] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """A JSON-ready dict in the wire layout clients expect."""
        return {
            "levelId": self.level_id,
            "levelName": self.level_name,
            "levelSize": [self.level_size[0], self.level_size[1]],
            "levelCompleted": self.level_completed,
            "blocks": {
                name: [{"x": x, "y": y} for x, y in positions]
                for name, positions in self.blocks.items()
            },
            "rules": {
                subject: [dict(rule) for rule in rule_list]
                for subject, rule_list in self.rules.items()
            },
        }