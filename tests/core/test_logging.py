import logging

import pytest

from ripple.core.logging import configure_logging, resolve_log_level


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "name, level",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" warning ", logging.WARNING),
        (None, logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_log_level(name, level):
    assert resolve_log_level(name) == level


def test_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_log_level("chatty")


def test_configure_logging_installs_one_handler(root_logger):
    configure_logging("debug")
    configure_logging("warning")

    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.WARNING
