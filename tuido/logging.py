from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_log_dir(settings: Settings) -> Path:
    raw = settings.TUIDO_LOG_DIR or settings.TUIDO_DATA_DIR
    if raw is None:
        return settings.data_file.parent
    return Path(raw).expanduser()


def setup_logging(settings: Settings) -> Path | None:
    """Send tuido's log records to ``tuido.log`` in the log directory.

    The file rotates at midnight. Returns the log file path, or None when
    the directory cannot be created; logging is then silenced so the list
    screen still opens and the save step reports the directory problem.
    """

    level_name = str(settings.TUIDO_LOG_LEVEL or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    log_file = _resolve_log_dir(settings) / "tuido.log"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=max(0, settings.TUIDO_LOG_BACKUP_COUNT),
            encoding="utf-8",
        )
    except OSError:
        handler = logging.NullHandler()
        log_file = None
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Replace, don't append: a second call must not double every line.
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)
    root.addHandler(handler)

    if log_file is not None:
        logging.getLogger("tuido").info("Logging to %s at %s", os.fspath(log_file), level_name)
    return log_file
