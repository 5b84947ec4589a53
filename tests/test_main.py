import logging

import pytest
from rich.console import Console

from argstyle import __main__ as entry
from argstyle.parser import DEFAULT_KEY
from argstyle.store import get_argument_store, reset_argument_store
from argstyle.table import build_argument_table
from argstyle.utils import default_log_mode, setup_logging


@pytest.fixture(autouse=True)
def setup_teardown(monkeypatch):
    """Keep logging handlers and the shared store untouched between tests."""
    calls = []
    monkeypatch.setattr(entry, "setup_logging", lambda **kwargs: calls.append(kwargs))
    reset_argument_store()
    yield calls
    reset_argument_store()


def test_main_plain(capsys, setup_teardown):
    assert entry.main(["tool", "--name", "value", "target"]) == 0
    out = capsys.readouterr().out
    assert "name" in out
    assert "(positional)" in out
    assert "\033[" not in out.splitlines()[-1]
    assert "argstyle" in out.splitlines()[-1]
    assert setup_teardown == [
        {"mode": None, "log_filename": None, "console_log_level": logging.WARNING}
    ]


def test_main_color_and_verbose(capsys, setup_teardown):
    assert entry.main(["tool", "--color", "-v", "--fg=green"]) == 0
    last_line = capsys.readouterr().out.splitlines()[-1]
    assert last_line.startswith("\033[1;32m\033[40m")
    assert last_line.endswith("\033[0m")
    assert setup_teardown[0]["console_log_level"] == logging.DEBUG


def test_main_stores_shared_arguments():
    entry.main(["tool", "--color", "file.txt"])
    store = get_argument_store()
    assert store.has("color")
    assert store.get(DEFAULT_KEY) == "file.txt"


def test_argument_table():
    table = build_argument_table({DEFAULT_KEY: "target", "flag": True, "name": "x"})
    console = Console(record=True, width=80)
    console.print(table)
    rows = [line.strip() for line in console.export_text().splitlines() if line.strip()]
    assert rows[-1].startswith("(positional)")
    assert any(row.startswith("flag") and "✔" in row for row in rows)
    assert table.row_count == 3


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_setup_logging_invalid_mode(root_logger):
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_setup_logging_cli(root_logger):
    setup_logging(mode="cli")
    assert len(root_logger.handlers) == 1
    assert root_logger.handlers[0].level == logging.WARNING


def test_setup_logging_json_with_file(root_logger, tmp_path):
    log_file = tmp_path / "argstyle.log"
    setup_logging(mode="json", log_filename=str(log_file))
    assert len(root_logger.handlers) == 2
    logging.getLogger("argstyle").debug("written to file")
    for handler in root_logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text(encoding="UTF-8")


def test_setup_logging_unopenable_file(root_logger, tmp_path):
    log_file = tmp_path / "missing" / "dir" / "argstyle.log"
    setup_logging(mode="json", log_filename=str(log_file))
    assert len(root_logger.handlers) == 1
    assert not log_file.exists()


def test_main_starts_with_unopenable_log_file(
    root_logger, monkeypatch, tmp_path, capsys
):
    monkeypatch.setattr(entry, "setup_logging", setup_logging)
    log_file = tmp_path / "missing" / "dir" / "argstyle.log"
    assert entry.main(["tool", f"--log-file={log_file}", "--log-mode=json"]) == 0
    captured = capsys.readouterr()
    assert "argstyle" in captured.out.splitlines()[-1]
    assert "Cannot open log file" in captured.err


def test_main_color_switched_off(capsys):
    assert entry.main(["tool", "--color=no"]) == 0
    assert "\033[" not in capsys.readouterr().out.splitlines()[-1]


def test_default_log_mode(monkeypatch, tmp_path):
    monkeypatch.delenv("ARGSTYLE_LOG_MODE", raising=False)
    cgroup = tmp_path / "cgroup"
    assert default_log_mode(cgroup) == "cli"

    cgroup.write_text("0::/docker/abc\n", encoding="UTF-8")
    assert default_log_mode(cgroup) == "json"

    monkeypatch.setenv("ARGSTYLE_LOG_MODE", "cli")
    assert default_log_mode(cgroup) == "cli"
