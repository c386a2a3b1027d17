import logging

import pytest

from tracebuilder.logging import ContextFilter, CustomJsonFormatter, setup_logging
from tracebuilder.settings import DatasourceSettings
from tracebuilder.settings import main as settings_main


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _console_handler(root):
    return next(h for h in root.handlers if isinstance(h.formatter, CustomJsonFormatter))


def test_setup_logging_installs_json_console(restore_root_logger):
    setup_logging("debug")

    handler = _console_handler(restore_root_logger)
    assert restore_root_logger.level == logging.DEBUG
    assert any(isinstance(f, ContextFilter) for f in handler.filters)


def test_setup_logging_defaults_to_settings_level(restore_root_logger, monkeypatch):
    monkeypatch.setattr(settings_main, "_settings", DatasourceSettings(log_level="warning"))

    setup_logging()

    assert restore_root_logger.level == logging.WARNING
