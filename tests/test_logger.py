# tests/test_logger.py

import logging

import pytest

from gitcrypt_demo.utils.logger import LoggerManager


@pytest.fixture
def manager(tmp_path):
    """A manager writing to a temporary log file, removed again after the test."""
    manager = LoggerManager(log_file_path=tmp_path / "demo.log", verbose=True)
    yield manager
    manager.teardown()


def test_setup_installs_console_and_file_handlers(manager, tmp_path):
    assert manager.setup() is True
    handlers = manager.installed_handlers()
    assert len(handlers) == 2

    logging.getLogger("gitcrypt_demo.test").debug("written to the file")
    for handler in handlers:
        handler.flush()
    assert "written to the file" in (tmp_path / "demo.log").read_text(encoding="utf-8")


def test_setup_twice_does_not_duplicate_handlers(manager):
    manager.setup()
    assert manager.setup() is False
    assert len(manager.installed_handlers()) == 2


def test_teardown_removes_only_own_handlers(manager):
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        manager.setup()
        manager.teardown()
        assert manager.installed_handlers() == []
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)
