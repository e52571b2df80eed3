"""Tests for logging utilities."""

import logging
from io import StringIO

from qubitkit import QuantumRegister
from qubitkit.logging import configure_logging, get_logger


def test_get_logger_returns_namespaced_logger():
    """Module names are placed under the qubitkit namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "qubitkit.test_module"


def test_get_logger_keeps_package_names():
    assert get_logger("qubitkit.register").name == "qubitkit.register"
    assert get_logger().name == "qubitkit"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_configure_logging_accepts_level_names():
    """Level names are resolved, and loggers created later inherit the level."""
    logger = get_logger("test_module")
    try:
        configure_logging("debug")
        assert logger.level == logging.DEBUG
        assert get_logger("created_after_configure").level == logging.DEBUG
        configure_logging("ERROR")
        assert logger.level == logging.ERROR
    finally:
        configure_logging(logging.WARNING)


def test_configure_logging_format_string():
    stream = StringIO()
    try:
        configure_logging(logging.WARNING, "%(levelname)s|%(message)s", stream)
        get_logger("test_module").warning("hello")
        assert stream.getvalue() == "WARNING|hello\n"
    finally:
        configure_logging(logging.WARNING)


def test_collapse_logs_selected_index(fixed_random):
    """Collapse reports the selected basis state at DEBUG level."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        QuantumRegister.w_state().collapse(fixed_random(0.2))
        output = stream.getvalue()
        assert "[DEBUG] qubitkit.register" in output
        assert "selected index 1" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_collapse_fallback_logs_warning(fixed_random):
    """A threshold the cumulative mass never exceeds is reported."""
    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        QuantumRegister.from_integer(0, 1).collapse(fixed_random(1.0))
        assert "[WARNING]" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
