"""Flattened row layout shared by cursor movement and rendering."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class RowKind(Enum):
    KEY = auto()
    ITEM = auto()
    ADD_ITEM = auto()
    ADD_LIST = auto()


@dataclass(frozen=True)
class Row:
    """One addressable screen row.

    ``index`` is the key index for KEY rows and the item index for ITEM rows;
    input rows carry no payload.
    """

    kind: RowKind
    index: int | None = None


def row_count(key_count: int, item_count: int) -> int:
    if key_count == 0:
        return 1
    return key_count + item_count + 2


def project_rows(key_count: int, item_count: int) -> list[Row]:
    """Lay out keys, items of the selected list, then the input rows.

    Items and the add-item row only exist while at least one list exists.
    """
    rows = [Row(RowKind.KEY, i) for i in range(key_count)]
    if key_count > 0:
        rows.extend(Row(RowKind.ITEM, i) for i in range(item_count))
        rows.append(Row(RowKind.ADD_ITEM))
    rows.append(Row(RowKind.ADD_LIST))
    return rows
