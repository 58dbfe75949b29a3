from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tuido import storage
from tuido.logging import setup_logging
from tuido.settings import Settings, load_settings
from tuido.storage import StorageError


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch):
    # Keep a stray .env or exported TUIDO_* variable from leaking in.
    monkeypatch.chdir(tmp_path)
    for name in ("TUIDO_DATA_DIR", "TUIDO_LOG_DIR", "TUIDO_LOG_LEVEL", "TUIDO_LOG_BACKUP_COUNT"):
        monkeypatch.delenv(name, raising=False)


def test_data_dir_from_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("TUIDO_DATA_DIR", str(tmp_path / "data"))
    s = load_settings()
    assert s.TUIDO_DATA_DIR == tmp_path / "data"
    assert s.data_file == tmp_path / "data" / ".tui-do.json"
    assert s.TUIDO_LOG_DIR == tmp_path / "data"


def test_data_dir_defaults_to_home(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(storage.Path, "home", classmethod(lambda cls: tmp_path))
    s = load_settings()
    assert s.TUIDO_DATA_DIR == tmp_path / ".tui-do"
    assert s.data_file == tmp_path / ".tui-do" / ".tui-do.json"


def test_unresolvable_home_is_a_storage_error(monkeypatch):
    def _no_home(cls):
        raise RuntimeError("no home")

    monkeypatch.setattr(storage.Path, "home", classmethod(_no_home))
    with pytest.raises(StorageError):
        load_settings()


def test_env_file_is_read(tmp_path: Path):
    (tmp_path / ".env").write_text(
        f"TUIDO_DATA_DIR={tmp_path / 'from-env-file'}\nTUIDO_LOG_LEVEL=debug\n",
        encoding="utf-8",
    )
    s = load_settings()
    assert s.TUIDO_DATA_DIR == tmp_path / "from-env-file"
    assert s.TUIDO_LOG_LEVEL == "debug"


def test_defaults():
    s = Settings(TUIDO_DATA_DIR=Path("/tmp/x"))
    assert s.TUIDO_LOG_LEVEL == "INFO"
    assert s.TUIDO_LOG_BACKUP_COUNT == 7
    assert s.TUIDO_LOG_DIR is None


def test_setup_logging_writes_to_log_dir(tmp_path: Path, monkeypatch, restore_root_logging):
    monkeypatch.setenv("TUIDO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TUIDO_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TUIDO_LOG_LEVEL", "warning")
    s = load_settings()

    log_file = setup_logging(s)
    logging.getLogger("tuido.test").warning("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file == tmp_path / "logs" / "tuido.log"
    assert "hello from the test" in log_file.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_replaces_handlers(tmp_path: Path, monkeypatch, restore_root_logging):
    monkeypatch.setenv("TUIDO_DATA_DIR", str(tmp_path))
    s = load_settings()
    setup_logging(s)
    setup_logging(s)
    assert len(logging.getLogger().handlers) == 1


def test_setup_logging_survives_unusable_log_dir(tmp_path: Path, monkeypatch, restore_root_logging):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    monkeypatch.setenv("TUIDO_DATA_DIR", str(blocker / "data"))
    s = load_settings()

    assert setup_logging(s) is None
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    logging.getLogger("tuido.test").warning("goes nowhere")
