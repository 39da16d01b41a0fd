"""Pytest configuration and fixtures for the Account Statement PDF Generator."""

import json
import logging
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import pytest
from PIL import Image

from src.config.settings import Settings


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def fixed_creation_date():
    """A fixed document creation date for reproducible PDFs."""
    return datetime(2024, 1, 31, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_statement_data() -> Dict[str, Any]:
    """Create sample statement data for testing."""
    return {
        "company_name": "Acme Bank",
        "company_address": "1 Main Street\nSpringfield",
        "customer_name": "Jane Doe",
        "customer_address": "42 Elm Road\nShelbyville",
        "account_name": "Everyday Checking",
        "account_number": "12345678",
        "report_generation_date": "2024-01-31 09:00",
        "balance_summary": [
            {
                "product": "Checking",
                "opening_balance": 1000.00,
                "closing_balance": 950.00,
                "money_in": 50.00,
                "money_out": 100.00,
            }
        ],
        "transactions": [
            {
                "date": "2024-01-01",
                "description": "Coffee",
                "money_out": 5.00,
                "money_in": 0,
                "balance": 995.00,
            }
        ],
    }


@pytest.fixture
def many_transactions_data(sample_statement_data) -> Dict[str, Any]:
    """Statement with enough transactions to span several pages."""
    data = dict(sample_statement_data)
    data["transactions"] = [
        {
            "date": f"2024-01-{(i % 28) + 1:02d}",
            "description": f"Payment {i:03d}",
            "money_out": 1.25,
            "money_in": 0,
            "balance": 1000 - 1.25 * (i + 1),
        }
        for i in range(60)
    ]
    return data


@pytest.fixture
def statement_file(temp_dir, sample_statement_data):
    """Write the sample statement to a JSON file."""
    path = temp_dir / "account_statement.json"
    path.write_text(json.dumps(sample_statement_data), encoding="utf-8")
    return str(path)


@pytest.fixture
def logo_file(temp_dir):
    """Create a small PNG logo."""
    path = temp_dir / "logo.png"
    Image.new("RGB", (60, 20), color=(0, 70, 140)).save(path, format="PNG")
    return str(path)


@pytest.fixture
def sample_settings(temp_dir, statement_file, logo_file, fixed_creation_date):
    """Create sample settings pointing at the temporary files."""
    return Settings(
        input_file=statement_file,
        output_file=str(temp_dir / "account_statement.pdf"),
        logo_file=logo_file,
        open_viewer=False,
        currency_symbol="$",
        creation_date=fixed_creation_date,
        log_level="INFO",
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove environment variables that change settings."""
    for name in (
        "STATEMENT_INPUT_FILE",
        "STATEMENT_OUTPUT_FILE",
        "STATEMENT_LOGO_FILE",
        "OPEN_VIEWER",
        "CURRENCY_SYMBOL",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_FILE",
        "SOURCE_DATE_EPOCH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """Drop handlers installed by main() so they do not outlive the test."""
    yield
    logging.getLogger("src").handlers.clear()
