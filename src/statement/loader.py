"""Loading and saving account statements as JSON."""

import json
from decimal import Decimal
from typing import Any

from src.statement.models import AccountStatement
from src.utils.exceptions import DeserializationError, FileOpenError, FileWriteError
from src.utils.logger import get_logger
from src.utils.validators import validate_file_path


def _reject_constant(name: str) -> Any:
    raise DeserializationError(f"Invalid JSON number: {name}")


def _encode(value: Any, indent: int, level: int = 0) -> str:
    """Encode decoded-JSON data, writing Decimals from their exact digits.

    Output layout matches json.dumps(value, indent=indent).
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot serialize non-finite number: {value}")
        return str(value)

    if isinstance(value, (dict, list)):
        if not value:
            return "{}" if isinstance(value, dict) else "[]"
        inner = "\n" + " " * (indent * (level + 1))
        outer = "\n" + " " * (indent * level)
        if isinstance(value, dict):
            parts = [f"{json.dumps(key)}: {_encode(item, indent, level + 1)}" for key, item in value.items()]
            return "{" + inner + ("," + inner).join(parts) + outer + "}"
        parts = [_encode(item, indent, level + 1) for item in value]
        return "[" + inner + ("," + inner).join(parts) + outer + "]"

    return json.dumps(value)


class StatementLoader:
    """Reads an AccountStatement from a JSON file in one atomic step."""

    def __init__(self) -> None:
        """Initialize statement loader."""
        self.logger = get_logger(__name__)

    def load(self, file_path: str) -> AccountStatement:
        """Load a statement from a JSON file.

        Args:
            file_path: Path to the statement JSON file.

        Returns:
            Parsed AccountStatement.

        Raises:
            FileOpenError: If the file cannot be opened or read.
            DeserializationError: If the content does not match the schema.
        """
        validate_file_path(file_path)

        try:
            with open(file_path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise FileOpenError(file_path, str(e))

        self.logger.debug(f"Read {len(raw)} bytes from {file_path}")

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(f"{file_path} is not valid UTF-8: {str(e)}")

        statement = self.loads(text)
        self.logger.info(
            f"Loaded statement from {file_path}: "
            f"{len(statement.balance_summary)} balance summary rows, "
            f"{len(statement.transactions)} transactions"
        )
        return statement

    def loads(self, text: str) -> AccountStatement:
        """Parse a statement from a JSON string.

        Raises:
            DeserializationError: If the text is not valid statement JSON.
        """
        try:
            data = json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise DeserializationError(f"Malformed JSON: {str(e)}")

        return AccountStatement.from_dict(data)

    def dumps(self, statement: AccountStatement, indent: int = 2) -> str:
        """Serialize a statement back to JSON using the input field names."""
        return _encode(statement.to_dict(), indent)

    def dump(self, statement: AccountStatement, file_path: str) -> None:
        """Write a statement to a JSON file.

        Raises:
            FileWriteError: If the file cannot be written.
        """
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(self.dumps(statement))
        except OSError as e:
            raise FileWriteError(file_path, str(e))

        self.logger.info(f"Statement written to {file_path}")
