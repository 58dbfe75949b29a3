"""Unit tests for screen rendering."""
from __future__ import annotations

import io

from rich.console import Console

from tuido.models import Item, Snapshot
from tuido.tui.components import (
    CURRENT_LIST_STYLE,
    CURSOR_STYLE,
    FOCUSED_STYLE,
    NO_STYLE,
    field_style,
    key_style,
    render_error,
    render_field,
    render_lists_table,
    render_screen,
)
from tuido.tui.state import TodoState
from tuido.tui.text_field import TextField


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=100, force_terminal=False, color_system=None), buf


def test_empty_screen():
    state = TodoState.from_snapshot(Snapshot())
    plain = render_screen(state).plain

    assert plain.startswith("Your Tui-Dos\n\n+ add a list…\n")
    assert "> add an item" not in plain
    assert "Press ctrl+c to quit." in plain
    assert "Press q or ctrl+c" not in plain


def test_screen_with_items():
    state = TodoState(
        lists={
            "Groceries": [Item("milk"), Item("eggs", completed=True)],
            "Work": [],
        },
        cursor=2,
    )
    plain = render_screen(state).plain

    assert "Groceries  Work\n\n" in plain
    assert "> [ ] milk\n  [x] eggs\n\n> add an item…\n+ add a list…\n" in plain
    assert "Press q or ctrl+c to quit." in plain


def test_focused_field_shows_caret_cell():
    state = TodoState(lists={"A": []}, cursor=1)
    state.handle_key("m")
    state.handle_key("i")
    plain = render_screen(state).plain
    assert "> mi \n" in plain


def test_status_line_is_rendered():
    state = TodoState(lists={"A": [Item("x")]}, cursor=1)
    state.handle_key("d")
    assert "Deleted 'x'" in render_screen(state).plain


def test_field_style_depends_only_on_focus():
    assert field_style(True) == FOCUSED_STYLE
    assert field_style(False) == NO_STYLE


def test_key_style_precedence():
    assert key_style(on_cursor=True, selected=True) == CURSOR_STYLE
    assert key_style(on_cursor=False, selected=True) == CURRENT_LIST_STYLE
    assert key_style(on_cursor=False, selected=False) == NO_STYLE


def test_render_field_variants():
    field = TextField(prompt="> ", placeholder="add an item…")
    assert render_field(field, focused=False).plain == "> add an item…"
    assert render_field(field, focused=True).plain == "> add an item…"

    field.set_value("milk")
    assert render_field(field, focused=False).plain == "> milk"
    assert render_field(field, focused=True).plain == "> milk "
    field.home()
    assert render_field(field, focused=True).plain == "> milk"


def test_list_names_are_not_markup():
    state = TodoState(lists={"[bold]x[/bold]": []}, cursor=0)
    assert "[bold]x[/bold]" in render_screen(state).plain


def test_render_lists_table():
    console, buf = _console()
    snap = Snapshot(
        keys=["Groceries", "Work"],
        lists={"Groceries": [Item("milk"), Item("eggs", completed=True)], "Work": []},
    )
    render_lists_table(console, snap)
    out = buf.getvalue()
    assert "Groceries" in out
    assert "milk" in out
    assert "eggs" in out
    assert "(empty)" in out


def test_render_lists_table_empty():
    console, buf = _console()
    render_lists_table(console, Snapshot())
    assert "No lists yet." in buf.getvalue()


def test_render_error():
    console, buf = _console()
    render_error(console, "Could not load your lists", "Invalid JSON", action="Fix it")
    out = buf.getvalue()
    assert "Could not load your lists" in out
    assert "Invalid JSON" in out
    assert "Fix it" in out
