"""Translate raw key presses into key names."""
from __future__ import annotations

import readchar

KEY_NAMES: dict[str, str] = {
    readchar.key.UP: "up",
    readchar.key.DOWN: "down",
    readchar.key.LEFT: "left",
    readchar.key.RIGHT: "right",
    readchar.key.TAB: "tab",
    readchar.key.SHIFT_TAB: "shift+tab",
    readchar.key.ENTER: "enter",
    readchar.key.CR: "enter",
    readchar.key.LF: "enter",
    readchar.key.SPACE: "space",
    readchar.key.BACKSPACE: "backspace",
    readchar.key.CTRL_H: "backspace",
    readchar.key.DELETE: "delete",
    readchar.key.HOME: "home",
    readchar.key.END: "end",
    readchar.key.ESC: "esc",
    readchar.key.CTRL_C: "ctrl+c",
}


def normalize_key(raw: str) -> str:
    """Return the key name for ``raw``.

    Printable single characters map to themselves (space becomes "space");
    unknown escape sequences map to an empty string so they are ignored.
    """
    name = KEY_NAMES.get(raw)
    if name is not None:
        return name
    if len(raw) == 1 and raw.isprintable():
        return raw
    return ""
