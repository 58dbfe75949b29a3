"""Entrypoint for `python -m tuido`."""

from .cli import main


if __name__ == "__main__":
    main()
