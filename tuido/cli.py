from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from .logging import setup_logging
from .models import Snapshot
from .settings import Settings, load_settings
from .storage import StorageError, load_snapshot, save_snapshot
from .tui.app import TodoApp
from .tui.components import render_error, render_lists_table
from .tui.state import TodoState

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="tuido: named todo lists in your terminal",
    rich_markup_mode="rich",
)
console = Console()


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _settings_or_exit() -> Settings:
    try:
        return load_settings()
    except StorageError as e:
        render_error(
            console,
            "Could not locate your data directory",
            str(e),
            action="Set TUIDO_DATA_DIR to a writable directory",
        )
        raise typer.Exit(code=1)
    except ValidationError as e:
        render_error(
            console,
            "Invalid configuration",
            str(e),
            action="Check the TUIDO_* environment variables and .env",
        )
        raise typer.Exit(code=1)


def _load_or_exit(settings: Settings) -> Snapshot:
    path = settings.data_file
    try:
        return load_snapshot(path)
    except StorageError as e:
        logger.error("Load failed: %s", e)
        render_error(
            console,
            "Could not load your lists",
            str(e),
            action=f"Fix or move {path} and try again",
        )
        raise typer.Exit(code=1)


def _run_interactive() -> None:
    """Load, run the list screen, then save once on the way out."""
    s = _settings_or_exit()
    # A log directory that cannot be created only silences logging; a data
    # directory problem surfaces when saving.
    setup_logging(s)

    state = TodoState.from_snapshot(_load_or_exit(s))
    TodoApp(console, state).run()

    path = s.data_file
    try:
        save_snapshot(path, state.snapshot())
    except StorageError as e:
        logger.error("Save failed: %s", e)
        render_error(
            console,
            "Could not save your lists",
            str(e),
            action=f"Check that {path.parent} is writable",
        )
        raise typer.Exit(code=1)


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context):
    """
    [bold]tuido[/bold]: keep named todo lists in your terminal.

    [dim]Run without arguments to open your lists.[/dim]

    [bold]Keys:[/bold]
      ↑/↓, tab/shift+tab   Move between lists, items and input rows
      enter                Select a list, toggle an item, or add what you typed
      space                Toggle the item under the cursor
      d                    Delete the item or list under the cursor
      q, ctrl+c            Quit and save (only ctrl+c while typing)
    """
    if ctx.invoked_subcommand is None:
        _run_interactive()
        raise typer.Exit(code=0)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("show", help="Print all lists without opening the interactive screen")
@app.command("ls", hidden=True)  # Alias
def show():
    """Print all lists and their items."""
    s = _settings_or_exit()
    render_lists_table(console, _load_or_exit(s))


@app.command("path", help="Print the location of the data file")
def show_path():
    s = _settings_or_exit()
    console.print(str(s.data_file), soft_wrap=True, highlight=False, markup=False)


def main() -> None:
    app()

