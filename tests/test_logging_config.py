import logging

import pytest

import logging_config
from logging_config import SUCCESS, get_logger, log_success, setup_logging


@pytest.fixture
def restore_root_logger():
    """Snapshot the root logger so setup_logging() calls don't leak into other tests."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    configured = list(logging_config._configured_handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    logging_config._configured_handlers[:] = configured


def test_success_level_is_registered():
    assert logging.getLevelName(SUCCESS) == "SUCCESS"
    assert logging.INFO < SUCCESS < logging.WARNING


def test_setup_logging_does_not_duplicate_handlers(restore_root_logger, tmp_path):
    root = restore_root_logger
    setup_logging("INFO")
    before = len(root.handlers) - 1
    setup_logging("DEBUG", str(tmp_path / "relay.log"))
    setup_logging("DEBUG", str(tmp_path / "relay.log"))
    assert len(root.handlers) == before + 2
    assert root.level == logging.DEBUG
    setup_logging("WARNING")
    assert len(root.handlers) == before + 1


def test_log_success_writes_success_record(caplog):
    caplog.set_level(SUCCESS)
    log_success(get_logger("relay"), "Emitted to room 'lobby'")
    assert caplog.records[-1].levelname == "SUCCESS"
    assert caplog.records[-1].getMessage() == "Emitted to room 'lobby'"
