"""Interactive event loop for the list screen."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import readchar
from rich.live import Live

from .components import render_screen
from .keys import normalize_key
from .state import KeyResult

if TYPE_CHECKING:
    from rich.console import Console

    from .state import TodoState

logger = logging.getLogger(__name__)


class TodoApp:
    """Read one key at a time, apply it to the state, and redraw.

    Each key is fully applied before the next one is read. The loop ends
    when the state asks to quit; saving is left to the caller.
    """

    def __init__(
        self,
        console: Console,
        state: TodoState,
        read_key: Callable[[], str] = readchar.readkey,
    ):
        """Initialize the app with its dependencies.

        Args:
            console: Rich Console for output
            state: Screen state to drive
            read_key: Blocking reader returning one raw key press
        """
        self.console = console
        self.state = state
        self.read_key = read_key

    def _next_key(self) -> str:
        try:
            raw = self.read_key()
        except KeyboardInterrupt:
            return "ctrl+c"
        return normalize_key(raw)

    def run(self) -> TodoState:
        """Run until a quit key arrives and return the final state."""
        logger.info("Session started with %d list(s)", len(self.state.lists))
        with Live(
            render_screen(self.state),
            console=self.console,
            auto_refresh=False,
            transient=False,
        ) as live:
            while True:
                key = self._next_key()
                if not key:
                    continue
                if self.state.handle_key(key) is KeyResult.QUIT:
                    break
                live.update(render_screen(self.state), refresh=True)
        logger.info("Session ended with %d list(s)", len(self.state.lists))
        return self.state
