"""Aggregations over a filtered view: totals, price histogram, categories.

All functions are pure. They read the view and return new result
objects without touching the records.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.common.models import SaleRecord

from .models import CategoryCount, PriceBucket, SaleStatistics

# (label, inclusive upper bound); the last bucket is open-ended.
PRICE_BUCKETS: tuple[tuple[str, float | None], ...] = (
    ("0-100", 100),
    ("101-200", 200),
    ("201-300", 300),
    ("301-400", 400),
    ("401-500", 500),
    ("501-600", 600),
    ("601-700", 700),
    ("701-800", 800),
    ("801-900", 900),
    ("901-above", None),
)


def compute_statistics(
    view: Sequence[SaleRecord], collection_size: int
) -> SaleStatistics:
    """Sum and count the view.

    Args:
        view: Month-filtered records.
        collection_size: Size of the full record collection.

    Returns:
        SaleStatistics where ``total_not_sold_items`` is the number of
        records outside the view.
    """
    total_amount = sum((r.price for r in view), 0)
    return SaleStatistics(
        total_sale_amount=total_amount,
        total_sold_items=len(view),
        total_not_sold_items=collection_size - len(view),
    )


def bucket_index(price: float) -> int:
    """Index of the first bucket whose upper bound is >= ``price``.

    Negative prices land in the first bucket.
    """
    for i, (_, upper) in enumerate(PRICE_BUCKETS):
        if upper is None or price <= upper:
            return i
    return len(PRICE_BUCKETS) - 1


def build_price_histogram(view: Sequence[SaleRecord]) -> list[PriceBucket]:
    """Count records per price range, zero-count buckets included."""
    buckets = [PriceBucket(range=label, upper_bound=upper) for label, upper in PRICE_BUCKETS]
    for record in view:
        buckets[bucket_index(record.price)].count += 1
    return buckets


def count_categories(view: Sequence[SaleRecord]) -> list[CategoryCount]:
    """Count records per category in first-seen order.

    Records without a category are skipped.
    """
    counts: dict[str, int] = {}
    for record in view:
        if record.category:
            counts[record.category] = counts.get(record.category, 0) + 1
    return [CategoryCount(category=c, item_count=n) for c, n in counts.items()]
