"""Tests for logging utilities."""

import json
import logging
import sys

import pytest

from stringify_interval.utils.logging import (
    TRACE_LEVEL,
    ContextFilter,
    JSONFormatter,
    clear_context,
    get_correlation_id,
    get_logger,
    operation_context,
    set_correlation_id,
    setup_logging,
)


def make_record(msg="Test message", level=logging.INFO, exc_info=None):
    """Create a bare log record."""
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


@pytest.fixture(autouse=True)
def clean_context():
    """Start and end every test without thread-local context."""
    clear_context()
    yield
    clear_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestTraceLevel:
    """Test TRACE level functionality."""

    def test_trace_level_constant(self):
        """Test TRACE level constant value."""
        assert TRACE_LEVEL == 5

    def test_trace_level_name(self):
        """Test TRACE level name is registered."""
        assert logging.getLevelName(TRACE_LEVEL) == "TRACE"

    def test_trace_method_logging(self, caplog):
        """Test trace method logs correctly."""
        logger = get_logger("test.trace")

        with caplog.at_level(TRACE_LEVEL, logger="test.trace"):
            logger.trace("Test trace message")

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == TRACE_LEVEL

    def test_trace_method_disabled_by_level(self, caplog):
        """Test trace method respects log level."""
        logger = get_logger("test.trace")

        with caplog.at_level(logging.DEBUG, logger="test.trace"):
            logger.trace("Test trace message")

        assert len(caplog.records) == 0


class TestContextFilter:
    """Test ContextFilter class."""

    def test_filter_without_context(self):
        """Test filter with no context set."""
        record = make_record()

        assert ContextFilter().filter(record) is True
        assert record.correlation_id is None
        assert record.operation is None

    def test_filter_with_correlation_id(self):
        """Test filter with correlation ID set."""
        record = make_record()
        set_correlation_id("test-correlation-id")

        ContextFilter().filter(record)

        assert record.correlation_id == "test-correlation-id"

    def test_filter_with_operation_context(self):
        """Test filter inside an operation context."""
        record = make_record()

        with operation_context("stringify", interval=500):
            ContextFilter().filter(record)

        assert record.operation == "stringify"
        assert record.interval == 500


class TestJSONFormatter:
    """Test JSONFormatter class."""

    def test_json_formatter_basic(self):
        """Test basic JSON formatting."""
        record = logging.LogRecord(
            name="test.module",
            level=logging.INFO,
            pathname="/test/path.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        record.funcName = "test_function"

        log_data = json.loads(JSONFormatter().format(record))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "test.module"
        assert log_data["message"] == "Test message"
        assert log_data["function"] == "test_function"
        assert log_data["line"] == 42
        assert "timestamp" in log_data
        assert "context" not in log_data

    def test_json_formatter_with_correlation_id(self):
        """Test JSON formatting with correlation ID and operation."""
        record = make_record()
        record.correlation_id = "test-correlation-id"
        record.operation = "stringify"

        log_data = json.loads(JSONFormatter().format(record))

        assert log_data["correlation_id"] == "test-correlation-id"
        assert log_data["operation"] == "stringify"

    def test_json_formatter_with_custom_context(self):
        """Test JSON formatting with custom context."""
        record = make_record()
        record.interval = -5000

        log_data = json.loads(JSONFormatter().format(record))

        assert log_data["context"] == {"interval": -5000}

    def test_json_formatter_with_exception(self):
        """Test JSON formatting with exception information."""
        try:
            raise ValueError("Test exception")
        except ValueError:
            exc_info = sys.exc_info()

        record = make_record("Test error", logging.ERROR, exc_info)
        log_data = json.loads(JSONFormatter(include_traceback=True).format(record))

        assert log_data["exception"]["type"] == "ValueError"
        assert log_data["exception"]["message"] == "Test exception"
        assert "traceback" in log_data["exception"]

    def test_json_formatter_without_traceback(self):
        """Test JSON formatting without traceback."""
        try:
            raise ValueError("Test exception")
        except ValueError:
            exc_info = sys.exc_info()

        record = make_record("Test error", logging.ERROR, exc_info)
        log_data = json.loads(JSONFormatter(include_traceback=False).format(record))

        assert "exception" not in log_data


class TestOperationContext:
    """Test operation_context and correlation IDs."""

    def test_generates_correlation_id(self):
        """Test a correlation ID is generated when none is given."""
        with operation_context("stringify") as correlation_id:
            assert correlation_id
            assert get_correlation_id() == correlation_id

        assert get_correlation_id() is None

    def test_uses_given_correlation_id(self):
        """Test an explicit correlation ID is used."""
        with operation_context("stringify", correlation_id="abc") as correlation_id:
            assert correlation_id == "abc"

    def test_nested_context_restores_outer(self):
        """Test leaving a nested context restores the outer one."""
        with operation_context("outer", correlation_id="outer-id"):
            with operation_context("inner", correlation_id="inner-id"):
                assert get_correlation_id() == "inner-id"
            assert get_correlation_id() == "outer-id"

    def test_context_restored_after_exception(self):
        """Test context is cleared even if the block raises."""
        with pytest.raises(RuntimeError):
            with operation_context("stringify", correlation_id="abc"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


class TestSetupLogging:
    """Test setup_logging function."""

    def test_console_handler(self, restore_root_logger):
        """Test console logging goes to stderr."""
        setup_logging("DEBUG")

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert restore_root_logger.level == logging.DEBUG

    def test_trace_level(self, restore_root_logger):
        """Test the TRACE level name is understood."""
        setup_logging("trace")
        assert restore_root_logger.level == TRACE_LEVEL

    def test_log_file(self, tmp_path, restore_root_logger):
        """Test logging to a file creates missing directories."""
        log_file = tmp_path / "logs" / "stringify.log"

        setup_logging("INFO", log_file=log_file, console_output=False)
        get_logger("test.file").info("Written to file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "Written to file" in log_file.read_text(encoding="utf-8")

    def test_json_format(self, tmp_path, restore_root_logger):
        """Test JSON formatting is applied to handlers."""
        setup_logging("INFO", log_file=tmp_path / "log.json", json_format=True)

        for handler in restore_root_logger.handlers:
            assert isinstance(handler.formatter, JSONFormatter)
