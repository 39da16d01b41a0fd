"""Tests for utility modules."""

import logging
import os
from unittest.mock import patch

import pytest

from src.utils.exceptions import (
    DeserializationError,
    FileOpenError,
    FileWriteError,
    ProcessLaunchError,
    StatementError,
    UnsupportedPlatformError,
)
from src.utils.logger import get_logger, setup_logger
from src.utils.validators import validate_file_path, validate_output_path


class TestLogger:
    """Test cases for logging functionality."""

    def test_setup_logger(self):
        """Test console-only logger setup."""
        logger = setup_logger("test_console_logger", level="INFO")

        assert isinstance(logger, logging.Logger)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_logger_with_file(self, temp_dir):
        """Test logger setup with file output."""
        log_file = temp_dir / "logs" / "test.log"

        logger = setup_logger("test_file_logger", log_file=str(log_file), level="DEBUG")
        logger.info("Test log message")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "Test log message" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()

    def test_setup_logger_no_duplicate_handlers(self):
        """Test that repeated setup replaces handlers."""
        setup_logger("test_repeat_logger")
        logger = setup_logger("test_repeat_logger")

        assert len(logger.handlers) == 1

    def test_log_levels(self, temp_dir):
        """Test that messages below the level are dropped."""
        log_file = temp_dir / "levels.log"

        logger = setup_logger("test_level_logger", log_file=str(log_file), level="WARNING")
        logger.info("Info message")
        logger.warning("Warning message")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "Warning message" in content
        assert "Info message" not in content
        for handler in logger.handlers:
            handler.close()

    def test_log_formatting(self, temp_dir):
        """Test log message formatting."""
        log_file = temp_dir / "format.log"

        logger = setup_logger(
            "test_format_logger",
            log_file=str(log_file),
            log_format="%(levelname)s - %(message)s"
        )
        logger.info("Formatted message")
        for handler in logger.handlers:
            handler.flush()

        assert "INFO - Formatted message" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()

    def test_get_logger(self):
        """Test logger retrieval."""
        logger = get_logger("test_logger")

        assert logger.name == "test_logger"
        assert get_logger("test_logger") is logger


class TestValidators:
    """Test cases for path validation."""

    def test_validate_file_path(self, statement_file):
        validate_file_path(statement_file)

    def test_validate_file_path_empty(self):
        with pytest.raises(FileOpenError):
            validate_file_path("")

    def test_validate_file_path_missing(self, temp_dir):
        with pytest.raises(FileOpenError, match="does not exist"):
            validate_file_path(str(temp_dir / "missing.json"))

    def test_validate_file_path_directory(self, temp_dir):
        with pytest.raises(FileOpenError, match="not a file"):
            validate_file_path(str(temp_dir))

    def test_validate_file_path_unreadable(self, statement_file):
        with patch("src.utils.validators.os.access", return_value=False):
            with pytest.raises(FileOpenError, match="not readable"):
                validate_file_path(statement_file)

    def test_validate_output_path(self, temp_dir):
        validate_output_path(str(temp_dir / "out.pdf"))

    def test_validate_output_path_relative(self, temp_dir):
        cwd = os.getcwd()
        os.chdir(temp_dir)
        try:
            validate_output_path("out.pdf")
        finally:
            os.chdir(cwd)

    def test_validate_output_path_missing_directory(self, temp_dir):
        with pytest.raises(FileWriteError, match="does not exist"):
            validate_output_path(str(temp_dir / "missing" / "out.pdf"))

    def test_validate_output_path_not_writable(self, temp_dir):
        with patch("src.utils.validators.os.access", return_value=False):
            with pytest.raises(FileWriteError, match="not writable"):
                validate_output_path(str(temp_dir / "out.pdf"))


class TestExceptions:
    """Test cases for the exception hierarchy."""

    @pytest.mark.parametrize("error", [
        FileOpenError("a.json"),
        DeserializationError("bad"),
        FileWriteError("a.pdf"),
        UnsupportedPlatformError("Plan9"),
        ProcessLaunchError("failed"),
    ])
    def test_all_errors_share_base(self, error):
        assert isinstance(error, StatementError)

    def test_messages(self):
        assert str(FileOpenError("a.json", "file does not exist")) == (
            "Cannot open file: a.json (file does not exist)"
        )
        assert str(FileWriteError("a.pdf")) == "Cannot write file: a.pdf"
        assert str(UnsupportedPlatformError("")) == "Unsupported platform: unknown"
