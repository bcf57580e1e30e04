"""Month and free-text filtering over the record collection."""

from __future__ import annotations

from collections.abc import Iterable

from src.common.models import SaleRecord

from .errors import MissingParameter


def require_month(value: str | None) -> str:
    """Return the lower-cased month term, or raise if it is absent.

    Raises:
        MissingParameter: If ``value`` is None or blank.
    """
    if value is None or not value.strip():
        raise MissingParameter("month")
    return value.strip().lower()


def matches_month(record: SaleRecord, month: str) -> bool:
    """True if the record's month name contains ``month`` (case-insensitive).

    Matching is by substring, so ``"ma"`` selects both March and May.
    """
    return month.lower() in record.month_name.lower()


def matches_search(record: SaleRecord, search: str) -> bool:
    """True if ``search`` occurs in the title, description or price.

    The comparison is case-sensitive. An empty term matches everything.
    """
    if not search:
        return True
    return (
        search in record.title
        or search in record.description
        or search in record.price_text
    )


def filter_records(
    records: Iterable[SaleRecord],
    month: str | None,
    search: str | None = "",
) -> list[SaleRecord]:
    """Select the records sold in ``month`` that match ``search``.

    Args:
        records: Full record collection, in source order.
        month: Month name or fragment. Required.
        search: Optional free-text term.

    Returns:
        Matching records, preserving their relative order.

    Raises:
        MissingParameter: If ``month`` is absent.
    """
    term = require_month(month)
    search = search or ""
    return [
        r for r in records
        if matches_month(r, term) and matches_search(r, search)
    ]
