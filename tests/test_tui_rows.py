"""Unit tests for the flattened row layout."""
from __future__ import annotations

from tuido.tui.rows import Row, RowKind, project_rows, row_count


def test_rows_without_lists_only_offer_add_list():
    assert project_rows(0, 0) == [Row(RowKind.ADD_LIST)]
    assert row_count(0, 0) == 1


def test_rows_ignore_items_when_no_list_exists():
    assert project_rows(0, 5) == [Row(RowKind.ADD_LIST)]
    assert row_count(0, 5) == 1


def test_rows_order_keys_items_then_inputs():
    rows = project_rows(2, 3)
    assert rows == [
        Row(RowKind.KEY, 0),
        Row(RowKind.KEY, 1),
        Row(RowKind.ITEM, 0),
        Row(RowKind.ITEM, 1),
        Row(RowKind.ITEM, 2),
        Row(RowKind.ADD_ITEM),
        Row(RowKind.ADD_LIST),
    ]
    assert row_count(2, 3) == len(rows)


def test_rows_for_empty_selected_list():
    rows = project_rows(1, 0)
    assert rows == [Row(RowKind.KEY, 0), Row(RowKind.ADD_ITEM), Row(RowKind.ADD_LIST)]
    assert row_count(1, 0) == 3
