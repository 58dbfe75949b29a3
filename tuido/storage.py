"""Load and save the todo lists as a single JSON file.

File layout::

    {
      "keys": ["Groceries", "Work"],
      "lists": {"Groceries": [{"item": "milk", "completed": false}], "Work": []}
    }

Notes:
- A missing or empty file is a fresh start, not an error.
- The bare-array format of the old single-list mode is rejected rather than
  guessed at; it belongs to a different program mode.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from .models import Item, Snapshot

logger = logging.getLogger(__name__)

DIR_NAME = ".tui-do"
FILE_NAME = ".tui-do.json"


class StorageError(Exception):
    """Base class for persistence failures."""


class SnapshotLoadError(StorageError):
    """The data file exists but could not be read."""


class SnapshotFormatError(StorageError):
    """The data file content is not a valid snapshot."""


class SnapshotSaveError(StorageError):
    """The data directory or file could not be written."""


class ItemRecord(BaseModel):
    model_config = ConfigDict(strict=True)

    item: str
    completed: bool = False


class SnapshotRecord(BaseModel):
    keys: list[str] | None = None
    lists: dict[str, list[ItemRecord]] | None = None


def default_data_dir() -> Path:
    """Return ``~/.tui-do``.

    Raises:
        StorageError: If the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise StorageError(f"Could not resolve home directory: {e}") from e
    return home / DIR_NAME


def data_file(data_dir: Path) -> Path:
    return data_dir / FILE_NAME


def _to_snapshot(record: SnapshotRecord) -> Snapshot:
    """Build a consistent snapshot from a validated record.

    Duplicate keys keep their first position, keys without an entry in
    ``lists`` get an empty list, and entries missing from ``keys`` are
    appended in mapping order.
    """
    raw_keys = record.keys or []
    raw_lists = record.lists or {}

    snapshot = Snapshot()
    for key in raw_keys:
        if key in snapshot.lists:
            logger.warning("Dropping duplicate list name %r", key)
            continue
        entries = raw_lists.get(key)
        if entries is None:
            logger.warning("List %r has no items entry; starting it empty", key)
            entries = []
        snapshot.keys.append(key)
        snapshot.lists[key] = [Item(text=e.item, completed=e.completed) for e in entries]

    for key, entries in raw_lists.items():
        if key in snapshot.lists:
            continue
        logger.warning("List %r missing from key order; appending it", key)
        snapshot.keys.append(key)
        snapshot.lists[key] = [Item(text=e.item, completed=e.completed) for e in entries]

    return snapshot


def parse_snapshot(text: str) -> Snapshot:
    """Parse file content into a snapshot.

    Raises:
        SnapshotFormatError: On invalid JSON, a wrong shape, or the legacy
            single-list array format.
    """
    if not text.strip():
        return Snapshot()

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(f"Invalid JSON: {e}") from e

    if isinstance(raw, list):
        raise SnapshotFormatError(
            "File holds a bare item array (legacy single-list format), "
            "expected an object with 'keys' and 'lists'"
        )
    if not isinstance(raw, dict):
        raise SnapshotFormatError(f"Expected a JSON object, got {type(raw).__name__}")

    try:
        record = SnapshotRecord.model_validate(raw)
    except ValidationError as e:
        raise SnapshotFormatError(f"Unexpected data layout: {e}") from e

    return _to_snapshot(record)


def dump_snapshot(snapshot: Snapshot) -> str:
    data = {
        "keys": list(snapshot.keys),
        "lists": {
            key: [{"item": it.text, "completed": it.completed} for it in snapshot.lists.get(key, [])]
            for key in snapshot.keys
        },
    }
    return json.dumps(data, ensure_ascii=False)


def load_snapshot(path: Path) -> Snapshot:
    """Read the snapshot stored at ``path``.

    Raises:
        SnapshotLoadError: If the file exists but cannot be read.
        SnapshotFormatError: If the content is not a valid snapshot.
    """
    if not path.exists():
        logger.info("No data file at %s; starting empty", path)
        return Snapshot()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SnapshotLoadError(f"Could not read {path}: {e}") from e

    snapshot = parse_snapshot(text)
    logger.info("Loaded %d list(s) from %s", len(snapshot.keys), path)
    return snapshot


def save_snapshot(path: Path, snapshot: Snapshot) -> None:
    """Write ``snapshot`` to ``path``, creating the parent directory.

    Raises:
        SnapshotSaveError: If the directory or file cannot be written.
    """
    try:
        path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        path.write_text(dump_snapshot(snapshot), encoding="utf-8")
    except OSError as e:
        raise SnapshotSaveError(f"Could not write {path}: {e}") from e
    logger.info("Saved %d list(s) to %s", len(snapshot.keys), path)
