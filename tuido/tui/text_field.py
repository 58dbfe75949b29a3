"""Single-line editable text input."""
from __future__ import annotations

from dataclasses import dataclass, field

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

DEFAULT_CHAR_LIMIT = 156


def _line_buffer() -> Buffer:
    return Buffer(multiline=False)


@dataclass
class TextField:
    """Editable line of text with a caret, kept in a prompt_toolkit Buffer.

    The field only accepts edits while focused; the owning screen decides
    when that is.
    """

    prompt: str = "> "
    placeholder: str = ""
    char_limit: int = DEFAULT_CHAR_LIMIT
    focused: bool = False
    buffer: Buffer = field(default_factory=_line_buffer, repr=False, compare=False)

    @property
    def value(self) -> str:
        return self.buffer.text

    @property
    def caret(self) -> int:
        return self.buffer.cursor_position

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def set_value(self, value: str) -> None:
        text = value[: self.char_limit]
        self.buffer.set_document(Document(text, cursor_position=len(text)), bypass_readonly=True)

    def clear(self) -> None:
        self.buffer.reset()

    def insert(self, text: str) -> None:
        text = "".join(c for c in text if c.isprintable())
        room = self.char_limit - len(self.value)
        if room <= 0 or not text:
            return
        self.buffer.insert_text(text[:room])

    def backspace(self) -> None:
        self.buffer.delete_before_cursor(1)

    def delete_forward(self) -> None:
        self.buffer.delete(1)

    def move_left(self) -> None:
        self.buffer.cursor_left()

    def move_right(self) -> None:
        self.buffer.cursor_right()

    def home(self) -> None:
        self.buffer.cursor_position = 0

    def end(self) -> None:
        self.buffer.cursor_position = len(self.value)

    def handle_key(self, key: str) -> bool:
        """Apply an editing key. Returns True if the key was consumed."""
        if not self.focused:
            return False
        if key == "backspace":
            self.backspace()
        elif key == "delete":
            self.delete_forward()
        elif key == "left":
            self.move_left()
        elif key == "right":
            self.move_right()
        elif key == "home":
            self.home()
        elif key == "end":
            self.end()
        elif key == "space":
            self.insert(" ")
        elif len(key) == 1 and key.isprintable():
            self.insert(key)
        else:
            return False
        return True
