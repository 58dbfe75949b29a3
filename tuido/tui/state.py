"""Screen state: the lists, the cursor, and the two input fields."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from ..models import Item, Snapshot
from .rows import Row, RowKind, project_rows, row_count
from .text_field import TextField

logger = logging.getLogger(__name__)

MOVE_PREVIOUS_KEYS = {"up", "shift+tab"}
MOVE_NEXT_KEYS = {"down", "tab"}
FORCE_QUIT_KEYS = {"ctrl+c"}
QUIT_KEYS = {"q"}
TOGGLE_KEYS = {"space"}
DELETE_KEYS = {"d", "delete"}


class Focus(Enum):
    NONE = auto()
    ADD_ITEM = auto()
    ADD_LIST = auto()


class KeyResult(Enum):
    CONTINUE = auto()
    QUIT = auto()


def _item_field() -> TextField:
    return TextField(prompt="> ", placeholder="add an item…")


def _list_field() -> TextField:
    return TextField(prompt="+ ", placeholder="add a list…")


@dataclass
class TodoState:
    """All mutable state of the list screen.

    The screen is one column of rows: list names, the items of the selected
    list, the add-item field (only while a list exists) and the add-list field.
    ``cursor`` indexes that column, and which field has focus follows from
    where the cursor sits.
    """

    lists: dict[str, list[Item]] = field(default_factory=dict)
    selected_list: int = 0
    cursor: int = 0
    add_item_field: TextField = field(default_factory=_item_field)
    add_list_field: TextField = field(default_factory=_list_field)
    status: str | None = None

    def __post_init__(self) -> None:
        self._sync_focus()

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> TodoState:
        """Start on the first list's add-item row, or on add-list when empty."""
        lists = {key: list(snapshot.lists.get(key, [])) for key in snapshot.keys}
        state = cls(lists=lists)
        if state.keys:
            state.cursor = state.add_item_row
        state._sync_focus()
        return state

    def snapshot(self) -> Snapshot:
        return Snapshot(keys=self.keys, lists={k: list(v) for k, v in self.lists.items()})

    # ── Derived layout ──────────────────────────────────────────────

    @property
    def keys(self) -> list[str]:
        return list(self.lists)

    @property
    def selected_key(self) -> str | None:
        if not self.lists:
            return None
        return self.keys[self.selected_list]

    @property
    def items(self) -> list[Item]:
        key = self.selected_key
        if key is None:
            return []
        return self.lists[key]

    @property
    def row_count(self) -> int:
        return row_count(len(self.lists), len(self.items))

    @property
    def add_item_row(self) -> int | None:
        if not self.lists:
            return None
        return len(self.lists) + len(self.items)

    @property
    def add_list_row(self) -> int:
        return self.row_count - 1

    def rows(self) -> list[Row]:
        return project_rows(len(self.lists), len(self.items))

    def current_row(self) -> Row:
        return self.rows()[self.cursor]

    @property
    def focus(self) -> Focus:
        if self.cursor == self.add_item_row:
            return Focus.ADD_ITEM
        if self.cursor == self.add_list_row:
            return Focus.ADD_LIST
        return Focus.NONE

    @property
    def focused_field(self) -> TextField | None:
        focus = self.focus
        if focus is Focus.ADD_ITEM:
            return self.add_item_field
        if focus is Focus.ADD_LIST:
            return self.add_list_field
        return None

    def _sync_focus(self) -> None:
        focus = self.focus
        if focus is Focus.ADD_ITEM:
            self.add_item_field.focus()
        else:
            self.add_item_field.blur()
        if focus is Focus.ADD_LIST:
            self.add_list_field.focus()
        else:
            self.add_list_field.blur()

    # ── Cursor movement ─────────────────────────────────────────────

    def move(self, step: int) -> None:
        """Move the cursor by ``step`` rows, wrapping at both ends."""
        self.cursor = (self.cursor + step) % self.row_count
        self._sync_focus()

    def move_next(self) -> None:
        self.move(1)

    def move_previous(self) -> None:
        self.move(-1)

    # ── Mutations ───────────────────────────────────────────────────

    def select_list(self, index: int) -> None:
        if not 0 <= index < len(self.lists):
            return
        self.selected_list = index

    def toggle_item(self, index: int) -> None:
        items = self.items
        if not 0 <= index < len(items):
            return
        items[index].toggle()

    def delete_item(self, index: int) -> None:
        """Remove an item and park the cursor on the new last item.

        With the list emptied, the cursor lands on the row just above where
        items start, which is the last list name.
        """
        items = self.items
        if not 0 <= index < len(items):
            return
        removed = items.pop(index)
        logger.info("Deleted item %r from %r", removed.text, self.selected_key)
        self.status = f"Deleted {removed.text!r}"
        self.cursor = (len(items) - 1) + len(self.lists)
        self._sync_focus()

    def delete_list(self, index: int) -> None:
        """Remove a list with all of its items.

        The selection shifts so it keeps pointing at the same list when an
        earlier one goes, and falls back to the previous list when the
        selected one goes. The cursor then sits on the selected list name.
        """
        keys = self.keys
        if not 0 <= index < len(keys):
            return
        key = keys[index]
        del self.lists[key]
        logger.info("Deleted list %r", key)
        self.status = f"Deleted list {key!r}"

        if not self.lists:
            self.selected_list = 0
            self.cursor = 0
        else:
            if index == self.selected_list:
                self.selected_list = max(index - 1, 0)
            elif index < self.selected_list:
                self.selected_list -= 1
            self.cursor = self.selected_list
        self._sync_focus()

    def add_item(self) -> bool:
        """Append the add-item field's text to the selected list.

        The cursor follows the add-item row down so items can be entered
        one after another. Returns False when nothing was added.
        """
        key = self.selected_key
        text = self.add_item_field.value.strip()
        if key is None or not text:
            return False
        self.lists[key].append(Item(text=text))
        logger.info("Added item %r to %r", text, key)
        self.cursor += 1
        self.add_item_field.clear()
        self._sync_focus()
        return True

    def add_list(self) -> bool:
        """Create a list from the add-list field and jump to its add-item row.

        Names that already exist are refused and the typed text is kept.
        """
        name = self.add_list_field.value.strip()
        if not name:
            return False
        if name in self.lists:
            self.status = f"List {name!r} already exists"
            return False
        self.lists[name] = []
        logger.info("Added list %r", name)
        self.status = f"Added list {name!r}"
        self.selected_list = len(self.lists) - 1
        self.cursor = self.add_item_row
        self.add_list_field.clear()
        self._sync_focus()
        return True

    def confirm(self) -> None:
        """Act on the row under the cursor (the enter key)."""
        row = self.current_row()
        if row.kind is RowKind.KEY:
            self.select_list(row.index)
        elif row.kind is RowKind.ITEM:
            self.toggle_item(row.index)
        elif row.kind is RowKind.ADD_ITEM:
            self.add_item()
        else:
            self.add_list()

    def delete(self) -> None:
        row = self.current_row()
        if row.kind is RowKind.KEY:
            self.delete_list(row.index)
        elif row.kind is RowKind.ITEM:
            self.delete_item(row.index)

    # ── Key dispatch ────────────────────────────────────────────────

    def handle_key(self, key: str) -> KeyResult:
        """Apply one key press.

        Navigation, enter and ctrl+c work everywhere. Other keys edit the
        focused field; with no field focused they are commands, so the bare
        "q" shortcut never fires while text is being typed.
        """
        if key == " ":
            key = "space"
        self.status = None

        if key in FORCE_QUIT_KEYS:
            return KeyResult.QUIT
        if key in MOVE_PREVIOUS_KEYS:
            self.move_previous()
            return KeyResult.CONTINUE
        if key in MOVE_NEXT_KEYS:
            self.move_next()
            return KeyResult.CONTINUE
        if key == "enter":
            self.confirm()
            return KeyResult.CONTINUE

        text_field = self.focused_field
        if text_field is not None:
            text_field.handle_key(key)
            return KeyResult.CONTINUE

        if key in QUIT_KEYS:
            return KeyResult.QUIT
        if key in TOGGLE_KEYS:
            row = self.current_row()
            if row.kind is RowKind.ITEM:
                self.toggle_item(row.index)
        elif key in DELETE_KEYS:
            self.delete()
        elif key == "k":
            self.move_previous()
        elif key == "j":
            self.move_next()
        return KeyResult.CONTINUE
