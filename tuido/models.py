"""In-memory data model for todo lists."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Item:
    """A single todo entry."""

    text: str
    completed: bool = False

    def toggle(self) -> None:
        self.completed = not self.completed


@dataclass
class Snapshot:
    """Everything that gets persisted: the ordered list names plus their items.

    ``keys`` carries the display order; ``lists`` maps each name to its items.
    """

    keys: list[str] = field(default_factory=list)
    lists: dict[str, list[Item]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.keys
