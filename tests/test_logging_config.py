"""Tests for setup_logging."""

import logging

import pytest

from league.logging_config import prune_session_logs, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_creates_log_file_under_data_dir(tmp_path):
    log_file = setup_logging(data_dir=str(tmp_path))
    assert log_file.parent == tmp_path / "logs"
    assert log_file.name.startswith("session-")

    logging.getLogger("league.test").debug("debug line")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "debug line" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging(data_dir=str(tmp_path))
    setup_logging(data_dir=str(tmp_path))
    assert len(logging.getLogger().handlers) == 2


def test_console_level(tmp_path):
    setup_logging(data_dir=str(tmp_path), console_level=logging.INFO)
    levels = sorted(h.level for h in logging.getLogger().handlers)
    assert levels == [logging.DEBUG, logging.INFO]



class TestPruneSessionLogs:

    def test_keeps_newest(self, tmp_path):
        for day in range(1, 6):
            (tmp_path / f"session-2024-01-0{day}-120000.log").write_text("x")
        deleted = prune_session_logs(tmp_path, keep=2)
        assert [p.name for p in deleted] == [
            "session-2024-01-01-120000.log",
            "session-2024-01-02-120000.log",
            "session-2024-01-03-120000.log",
        ]
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "session-2024-01-04-120000.log",
            "session-2024-01-05-120000.log",
        ]

    def test_ignores_other_files(self, tmp_path):
        (tmp_path / "notes.txt").write_text("x")
        assert prune_session_logs(tmp_path, keep=0) == []
        assert (tmp_path / "notes.txt").exists()

    def test_setup_prunes_before_opening(self, tmp_path):
        log_dir = tmp_path / "logs"
        log_dir.mkdir()
        (log_dir / "session-2000-01-01-000000.log").write_text("old")
        log_file = setup_logging(data_dir=str(tmp_path), keep_sessions=0)
        assert [p.name for p in log_dir.iterdir()] == [log_file.name]
