"""In-memory holder for the sale record collection."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from src.common.models import SaleRecord


class RecordStore:
    """Owns the current record collection.

    The collection is an immutable tuple and ``replace`` swaps the whole
    reference in one assignment, so readers see either the previous or
    the new collection and never a mix of both.

    Usage:
        store = RecordStore()
        store.replace(records)
        view = filter_records(store.snapshot(), "march")
    """

    def __init__(self) -> None:
        self._records: tuple[SaleRecord, ...] = ()
        self.loaded_at: datetime | None = None

    def snapshot(self) -> tuple[SaleRecord, ...]:
        """Return the current collection."""
        return self._records

    def replace(self, records: Iterable[SaleRecord]) -> None:
        """Replace the collection wholesale."""
        new_records = tuple(records)
        self._records = new_records
        self.loaded_at = datetime.now(timezone.utc)

    @property
    def is_loaded(self) -> bool:
        return self.loaded_at is not None

    def __len__(self) -> int:
        return len(self._records)
