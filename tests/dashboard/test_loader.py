"""Tests for the record store and the dataset loader."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest
import requests

from src.common.models import SaleRecord
from src.dashboard.errors import DataSourceUnavailable
from src.dashboard.loader import DatasetLoader, load_records
from src.dashboard.store import RecordStore


@pytest.fixture
def mock_client(raw_transactions) -> MagicMock:
    client = MagicMock()
    client.get_json.return_value = raw_transactions
    return client


@pytest.fixture
def loader(mock_client, test_settings) -> DatasetLoader:
    return DatasetLoader(RecordStore(), client=mock_client, settings=test_settings)


class TestRecordStore:
    def test_starts_empty(self):
        store = RecordStore()
        assert len(store) == 0
        assert store.snapshot() == ()
        assert store.is_loaded is False
        assert store.loaded_at is None

    def test_replace_swaps_whole_collection(self, sample_records):
        store = RecordStore()
        store.replace(sample_records[:2])
        old = store.snapshot()

        store.replace(sample_records)
        assert len(store) == len(sample_records)
        assert store.is_loaded is True
        # earlier snapshots are unaffected by the swap
        assert len(old) == 2

    def test_snapshot_is_immutable(self, sample_records):
        store = RecordStore()
        store.replace(sample_records)
        assert isinstance(store.snapshot(), tuple)


class TestLoadRecords:
    def test_parses_list(self, raw_transactions):
        records = load_records(raw_transactions)
        assert len(records) == 12
        assert all(isinstance(r, SaleRecord) for r in records)
        assert [r.id for r in records] == list(range(1, 13))

    def test_rejects_non_list(self):
        with pytest.raises(DataSourceUnavailable) as exc_info:
            load_records({"data": []}, source="test")
        assert "expected a JSON array" in exc_info.value.reason

    def test_rejects_malformed_record(self, raw_transactions):
        broken = list(raw_transactions) + [{"title": "no price or date"}]
        with pytest.raises(DataSourceUnavailable) as exc_info:
            load_records(broken)
        assert "record 12" in exc_info.value.reason


class TestDatasetLoader:
    def test_initialize(self, loader, mock_client, test_settings):
        assert loader.initialize() == 12
        assert len(loader.store) == 12
        mock_client.get_json.assert_called_once_with(test_settings.data_source.url)

    def test_initialize_is_idempotent(self, loader):
        loader.initialize()
        first = loader.store.snapshot()
        assert loader.initialize() == 12
        assert loader.store.snapshot() == first
        assert loader.store.snapshot() is not first

    @pytest.mark.parametrize(
        "error",
        [
            requests.ConnectionError("connection refused"),
            requests.Timeout("timed out"),
            requests.HTTPError("500 Server Error"),
            ValueError("Expecting value"),
        ],
    )
    def test_failure_keeps_previous_data(self, loader, mock_client, sample_records, error):
        loader.store.replace(sample_records[:3])
        mock_client.get_json.side_effect = error

        with pytest.raises(DataSourceUnavailable) as exc_info:
            loader.initialize()

        assert exc_info.value.url == loader.source_url
        assert exc_info.value.status_code == 503
        assert exc_info.value.__cause__ is error
        assert len(loader.store) == 3

    def test_malformed_payload_keeps_previous_data(self, loader, mock_client, sample_records):
        loader.store.replace(sample_records)
        mock_client.get_json.return_value = {"message": "not a list"}

        with pytest.raises(DataSourceUnavailable):
            loader.initialize()
        assert len(loader.store) == 12

    def test_concurrent_caller_waits_for_in_flight_refresh(self, loader, mock_client, sample_records):
        loader.store.replace(sample_records)
        results: list[int] = []

        loader._lock.acquire()
        worker = threading.Thread(target=lambda: results.append(loader.initialize()))
        worker.start()
        worker.join(timeout=0.2)
        assert worker.is_alive()

        loader._lock.release()
        worker.join(timeout=2)

        assert results == [12]
        mock_client.get_json.assert_not_called()

    def test_concurrent_caller_sees_in_flight_failure(self, loader, mock_client, sample_records):
        loader.store.replace(sample_records[:3])
        fetch_started = threading.Event()
        release_fetch = threading.Event()

        def slow_failing_fetch(url):
            fetch_started.set()
            release_fetch.wait(timeout=5)
            raise requests.ConnectionError("connection reset")

        mock_client.get_json.side_effect = slow_failing_fetch
        outcomes: dict[str, object] = {}

        def call(name):
            try:
                outcomes[name] = loader.initialize()
            except DataSourceUnavailable as exc:
                outcomes[name] = exc

        first = threading.Thread(target=call, args=("first",))
        first.start()
        assert fetch_started.wait(timeout=2)

        second = threading.Thread(target=call, args=("second",))
        second.start()
        second.join(timeout=0.2)
        assert second.is_alive()

        release_fetch.set()
        first.join(timeout=2)
        second.join(timeout=2)

        assert isinstance(outcomes["first"], DataSourceUnavailable)
        assert isinstance(outcomes["second"], DataSourceUnavailable)
        assert outcomes["second"].reason == outcomes["first"].reason
        assert mock_client.get_json.call_count == 1
        assert len(loader.store) == 3

    def test_success_after_failure_clears_error(self, loader, mock_client):
        mock_client.get_json.side_effect = requests.Timeout("timed out")
        with pytest.raises(DataSourceUnavailable):
            loader.initialize()

        mock_client.get_json.side_effect = None
        assert loader.initialize() == 12

        # a caller queued behind the successful refresh reports success
        loader._lock.acquire()
        results: list[int] = []
        worker = threading.Thread(target=lambda: results.append(loader.initialize()))
        worker.start()
        loader._lock.release()
        worker.join(timeout=2)
        assert results == [12]

    def test_default_client_uses_settings(self, test_settings):
        loader = DatasetLoader(RecordStore(), settings=test_settings)
        assert loader._client.timeout == 1
        assert loader._client.max_retries == 1
        assert loader.source_url == "https://example.test/product_transaction.json"
        loader.close()

    def test_load_from_file(self, loader, fixtures_dir, mock_client):
        count = loader.load_from_file(fixtures_dir / "product_transactions.json")
        assert count == 12
        assert len(loader.store) == 12
        mock_client.get_json.assert_not_called()

    def test_load_from_missing_file(self, loader, tmp_path):
        with pytest.raises(DataSourceUnavailable):
            loader.load_from_file(tmp_path / "missing.json")
        assert len(loader.store) == 0

    def test_load_from_invalid_json_file(self, loader, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DataSourceUnavailable):
            loader.load_from_file(path)
