"""Shared test fixtures for the sales dashboard."""

import json
import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import Settings
from src.common.models import SaleRecord
from src.dashboard.store import RecordStore


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return PROJECT_ROOT / "tests" / "fixtures"


@pytest.fixture
def raw_transactions(fixtures_dir) -> list[dict]:
    """Return the sample dataset as decoded JSON."""
    path = fixtures_dir / "product_transactions.json"
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_records(raw_transactions) -> list[SaleRecord]:
    """Return the sample dataset as sale records.

    March holds ids 3, 4, 6, 8, 10 and 12; May holds ids 7 and 9.
    """
    return [SaleRecord.model_validate(item) for item in raw_transactions]


@pytest.fixture
def example_records() -> list[SaleRecord]:
    """Three records: two sold in May, one in June."""
    return [
        SaleRecord(id=1, price=50, category="A", dateOfSale="2023-05-01"),
        SaleRecord(id=2, price=150, category="B", dateOfSale="2023-05-15"),
        SaleRecord(id=3, price=99, category="A", dateOfSale="2023-06-01"),
    ]


@pytest.fixture
def loaded_store(sample_records) -> RecordStore:
    """Provide a RecordStore holding the sample dataset."""
    store = RecordStore()
    store.replace(sample_records)
    return store


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a fake data source and a single fetch attempt."""
    return Settings(
        data_source={
            "url": "https://example.test/product_transaction.json",
            "request_timeout": 1,
            "max_retries": 1,
        },
    )
