"""Tests for taskboard.py - the launcher CLI."""

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

import taskboard
from store import save_lists
from tasks import Task, TaskList


@pytest.fixture(autouse=True)
def restore_logger():
    """configure_logging mutates the shared 'taskboard' logger; undo it."""
    logger = logging.getLogger("taskboard")
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    path = tmp_path / "lists.json"
    save_lists([
        TaskList(id=1, title="Work", tasks=[Task(title="Report"), Task(title="Done", done=True)]),
        TaskList(id=2, title="Home"),
    ], path)
    return path


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "taskboard.log"

        logger = taskboard.configure_logging(log_file, "INFO")
        logging.getLogger("taskboard.store").info("hello from store")
        for handler in logger.handlers:
            handler.flush()

        assert "hello from store" in log_file.read_text()

    def test_level_filters(self, tmp_path: Path) -> None:
        log_file = tmp_path / "taskboard.log"

        logger = taskboard.configure_logging(log_file, "ERROR")
        logging.getLogger("taskboard.modes").warning("quiet")
        for handler in logger.handlers:
            handler.flush()

        assert "quiet" not in log_file.read_text()

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        taskboard.configure_logging(tmp_path / "a.log")
        logger = taskboard.configure_logging(tmp_path / "b.log")

        assert len(logger.handlers) == 1


class TestMain:
    """Tests for the command-line entry point."""

    def test_once_prints_board(
        self, db_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        code = taskboard.main([
            "--once", "--no-color", "--db", str(db_file),
            "--log-file", str(tmp_path / "t.log"),
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "List 1: Work" in out
        assert "List 2: Home" in out
        assert "1/2 done" in out

    def test_json_summary(
        self, db_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        code = taskboard.main([
            "--json", "--db", str(db_file), "--log-file", str(tmp_path / "t.log"),
        ])

        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["active_list"] == 1
        assert data["lists"][0] == {
            "id": 1, "title": "Work", "tasks": 2, "done": 1, "overdue": 0,
        }
        assert data["lists"][1]["tasks"] == 0

    def test_json_missing_store(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        code = taskboard.main([
            "--json", "--db", str(tmp_path / "none.json"),
            "--log-file", str(tmp_path / "t.log"),
        ])

        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["lists"] == []
        assert data["active_list"] is None

    def test_bad_log_level_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            taskboard.main(["--once", "--log-level", "LOUD"])
