"""Rendering helpers for the list screen."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .state import Focus
from .text_field import TextField

if TYPE_CHECKING:
    from rich.console import Console

    from ..models import Snapshot
    from .state import TodoState


# ═══════════════════════════════════════════════════════════════════════════════
# STYLES
# ═══════════════════════════════════════════════════════════════════════════════

TITLE = "Your Tui-Dos"

TITLE_STYLE = Style(bold=True)
FOCUSED_STYLE = Style(color="color(205)")
NO_STYLE = Style()
CURSOR_STYLE = Style(color="color(202)")
CURRENT_LIST_STYLE = Style(bgcolor="color(202)")
COMPLETED_STYLE = Style(dim=True)
PLACEHOLDER_STYLE = Style(dim=True)
CARET_STYLE = Style(reverse=True)
HINT_STYLE = Style(dim=True)

KEY_SEPARATOR = "  "
HINTS = "↑/↓ tab move · enter select/toggle/add · space toggle · d delete"


def field_style(focused: bool) -> Style:
    """Style of an input row's prompt and text."""
    return FOCUSED_STYLE if focused else NO_STYLE


def key_style(on_cursor: bool, selected: bool) -> Style:
    if on_cursor:
        return CURSOR_STYLE
    if selected:
        return CURRENT_LIST_STYLE
    return NO_STYLE


# ═══════════════════════════════════════════════════════════════════════════════
# SCREEN
# ═══════════════════════════════════════════════════════════════════════════════

def render_field(text_field: TextField, focused: bool) -> Text:
    """Render an input row, drawing the caret only while focused."""
    style = field_style(focused)
    line = Text(text_field.prompt, style=style)
    value = text_field.value

    if not value:
        placeholder = text_field.placeholder
        if focused and placeholder:
            line.append(placeholder[:1], style=CARET_STYLE)
            line.append(placeholder[1:], style=PLACEHOLDER_STYLE)
        elif focused:
            line.append(" ", style=CARET_STYLE)
        else:
            line.append(placeholder, style=PLACEHOLDER_STYLE)
        return line

    if not focused:
        line.append(value, style=style)
        return line

    caret = text_field.caret
    line.append(value[:caret], style=style)
    line.append(value[caret : caret + 1] or " ", style=CARET_STYLE)
    line.append(value[caret + 1 :], style=style)
    return line


def render_screen(state: TodoState) -> Text:
    """Render the whole list screen from the current state."""
    focus = state.focus
    out = Text()
    out.append(TITLE, style=TITLE_STYLE)
    out.append("\n\n")

    keys = state.keys
    for i, key in enumerate(keys):
        if i:
            out.append(KEY_SEPARATOR)
        out.append(key, style=key_style(state.cursor == i, state.selected_list == i))
    if keys:
        out.append("\n\n")

    offset = len(keys)
    for i, item in enumerate(state.items):
        on_cursor = state.cursor == offset + i
        marker = ">" if on_cursor else " "
        check = "x" if item.completed else " "
        if on_cursor:
            style = CURSOR_STYLE
        elif item.completed:
            style = COMPLETED_STYLE
        else:
            style = NO_STYLE
        out.append(f"{marker} [{check}] {item.text}", style=style)
        out.append("\n")

    if state.add_item_row is not None:
        out.append("\n")
        out.append_text(render_field(state.add_item_field, focus is Focus.ADD_ITEM))
        out.append("\n")
    out.append_text(render_field(state.add_list_field, focus is Focus.ADD_LIST))
    out.append("\n")

    if state.status:
        out.append("\n")
        out.append(state.status, style=HINT_STYLE)
        out.append("\n")

    out.append("\n")
    out.append(HINTS, style=HINT_STYLE)
    out.append("\n")
    if focus is Focus.NONE:
        out.append("Press q or ctrl+c to quit.")
    else:
        out.append("Press ctrl+c to quit.")
    out.append("\n")
    return out


# ═══════════════════════════════════════════════════════════════════════════════
# NON-INTERACTIVE OUTPUT
# ═══════════════════════════════════════════════════════════════════════════════

def render_lists_table(console: Console, snapshot: Snapshot) -> None:
    """Print every list and its items as a table."""
    if snapshot.is_empty():
        console.print("[dim]No lists yet.[/dim]")
        return

    table = Table(title=f"[bold]{TITLE}[/bold]", show_header=True, header_style="bold cyan")
    table.add_column("List", style="bold")
    table.add_column("Done", justify="center", width=4)
    table.add_column("Item")

    for key in snapshot.keys:
        items = snapshot.lists.get(key, [])
        if not items:
            table.add_row(Text(key), "", "[dim](empty)[/dim]")
            continue
        for i, item in enumerate(items):
            table.add_row(
                Text(key) if i == 0 else "",
                "[green]✓[/]" if item.completed else "",
                Text(item.text),
            )
        table.add_section()

    console.print(table)


def render_error(
    console: Console,
    title: str,
    cause: str,
    action: str | None = None,
) -> None:
    """Render a friendly error panel with 3-part structure.

    Args:
        console: Rich Console for output
        title: Error title
        cause: What caused the error
        action: Suggested action to resolve
    """
    content = Text()
    content.append(f"✗ {title}", style="bold red")
    content.append("\n\n")
    content.append("Cause: ", style="yellow")
    content.append(cause)
    content.append("\n")

    if action:
        content.append(f"\n→ {action}", style="dim")

    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()
