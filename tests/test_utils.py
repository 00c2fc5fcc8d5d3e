import logging

import pytest
from rich.logging import RichHandler

from coreopts.utils import get_program_name, running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_get_program_name(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda _: None)
    monkeypatch.setattr("sys.argv", ["./scripts/tool.py"])
    assert get_program_name() == "tool.py"
    monkeypatch.setattr("sys.argv", [""])
    assert get_program_name() == "coreopts"


def test_get_program_name_on_path(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda _: "/usr/bin/tool")
    monkeypatch.setattr("sys.argv", ["tool"])
    assert get_program_name() == "tool"


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_mode_with_file(tmp_path):
    log_file = tmp_path / "coreopts.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert any(isinstance(h, logging.FileHandler) for h in handlers)
    logging.getLogger("coreopts").debug("hello file")
    for handler in handlers:
        handler.flush()
    assert "hello file" in log_file.read_text()
    for handler in handlers:
        handler.close()


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("COREOPTS_LOG_MODE", "json")
    setup_logging()
    handler = logging.getLogger().handlers[0]
    assert not isinstance(handler, RichHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
