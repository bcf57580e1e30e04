"""Dataset initializer: fetch the remote transaction list into the store.

Usage:
    store = RecordStore()
    loader = DatasetLoader(store)
    count = loader.initialize()
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from src.common.config import Settings, settings as default_settings
from src.common.http_client import HTTPClient
from src.common.models import SaleRecord

from .errors import DataSourceUnavailable
from .store import RecordStore

logger = logging.getLogger(__name__)


def load_records(payload: Any, source: str = "payload") -> list[SaleRecord]:
    """Coerce a decoded JSON payload into sale records.

    Args:
        payload: Decoded JSON, expected to be a list of objects.
        source: Where the payload came from, for error messages.

    Raises:
        DataSourceUnavailable: If the payload is not a list or an entry
            cannot be read as a sale record.
    """
    if not isinstance(payload, list):
        raise DataSourceUnavailable(
            source, f"expected a JSON array, got {type(payload).__name__}"
        )

    records: list[SaleRecord] = []
    for i, item in enumerate(payload):
        try:
            records.append(SaleRecord.model_validate(item))
        except ValidationError as exc:
            raise DataSourceUnavailable(
                source, f"record {i} is malformed: {exc.error_count()} error(s)"
            ) from exc
    return records


class DatasetLoader:
    """Fetches the dataset and swaps it into a RecordStore.

    A failed load leaves the store as it was. Concurrent callers share a
    single in-flight fetch: late arrivals wait for it instead of issuing
    their own request, and get its outcome (count or error).
    """

    def __init__(
        self,
        store: RecordStore,
        client: HTTPClient | None = None,
        source_url: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.store = store
        self.source_url = source_url or self.settings.data_source.url
        self._client = client or HTTPClient(
            timeout=self.settings.data_source.request_timeout,
            max_retries=self.settings.data_source.max_retries,
        )
        self._lock = threading.Lock()
        self._last_error: DataSourceUnavailable | None = None

    def initialize(self) -> int:
        """Fetch the dataset and replace the store contents.

        Returns:
            Number of records now in the store.

        Raises:
            DataSourceUnavailable: On network error, timeout, non-2xx
                status or a malformed body.
        """
        if not self._lock.acquire(blocking=False):
            logger.info("Dataset refresh already in progress, waiting for it")
            with self._lock:
                failed = self._last_error
            if failed is not None:
                raise DataSourceUnavailable(failed.url, failed.reason) from failed
            return len(self.store)
        try:
            count = self._refresh()
        except DataSourceUnavailable as exc:
            self._last_error = exc
            raise
        else:
            self._last_error = None
            return count
        finally:
            self._lock.release()

    def load_from_file(self, path: str | Path) -> int:
        """Replace the store contents from a local JSON file."""
        path = Path(path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Error reading dataset file %s: %s", path, exc)
            raise DataSourceUnavailable(str(path), str(exc)) from exc

        records = load_records(payload, source=str(path))
        self.store.replace(records)
        logger.info("Loaded %d records from %s", len(records), path)
        return len(records)

    def _refresh(self) -> int:
        logger.info("Fetching dataset from %s", self.source_url)
        try:
            payload = self._client.get_json(self.source_url)
        except requests.RequestException as exc:
            logger.error("Error initializing database: %s", exc)
            raise DataSourceUnavailable(self.source_url, str(exc)) from exc
        except ValueError as exc:
            logger.error("Error initializing database: invalid JSON body")
            raise DataSourceUnavailable(
                self.source_url, "response is not valid JSON"
            ) from exc

        try:
            records = load_records(payload, source=self.source_url)
        except DataSourceUnavailable as exc:
            logger.error("Error initializing database: %s", exc.reason)
            raise

        self.store.replace(records)
        logger.info("Database initialized successfully: %d records", len(records))
        return len(records)

    def close(self) -> None:
        self._client.close()
