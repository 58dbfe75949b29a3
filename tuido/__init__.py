"""tuido: a terminal todo list manager with multiple named lists."""

__version__ = "0.1.0"
