"""Rule-rewriting grid puzzle engine with a terminal front end and an HTTP control API."""

__version__ = "0.1.0"

__all__ = [
    "blocks",
    "cli",
    "commands",
    "events",
    "factory",
    "game",
    "layout",
    "level",
    "loader",
    "logic",
    "manager",
    "properties",
    "rules",
    "server",
    "sprites",
    "status",
]