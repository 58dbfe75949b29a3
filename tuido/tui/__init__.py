"""TUI (Terminal User Interface) module for tuido.

Provides the list screen state machine and its interactive loop.
"""
from .app import TodoApp
from .rows import Row, RowKind
from .state import Focus, KeyResult, TodoState

__all__ = ["Focus", "KeyResult", "Row", "RowKind", "TodoApp", "TodoState"]
