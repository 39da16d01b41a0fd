"""Validation utilities for input and output paths."""

import os

from src.utils.exceptions import FileOpenError, FileWriteError


def validate_file_path(file_path: str) -> None:
    """Validate that a file path exists and is readable.

    Args:
        file_path: Path to the file to validate.

    Raises:
        FileOpenError: If file path is invalid.
    """
    if not file_path:
        raise FileOpenError("", "file path cannot be empty")

    if not os.path.exists(file_path):
        raise FileOpenError(file_path, "file does not exist")

    if not os.path.isfile(file_path):
        raise FileOpenError(file_path, "path is not a file")

    if not os.access(file_path, os.R_OK):
        raise FileOpenError(file_path, "file is not readable")


def validate_output_path(file_path: str) -> None:
    """Validate that a file can be created or overwritten at a path.

    Args:
        file_path: Path of the output file.

    Raises:
        FileWriteError: If the path cannot be written.
    """
    if not file_path:
        raise FileWriteError("", "file path cannot be empty")

    if os.path.isdir(file_path):
        raise FileWriteError(file_path, "path is a directory")

    dir_path = os.path.dirname(os.path.abspath(file_path))

    if not os.path.isdir(dir_path):
        raise FileWriteError(file_path, f"directory does not exist: {dir_path}")

    if not os.access(dir_path, os.W_OK):
        raise FileWriteError(file_path, f"directory is not writable: {dir_path}")
