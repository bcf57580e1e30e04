"""Combined month view: listing, statistics and both charts in one call."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from src.common.models import SaleRecord

from .aggregators import build_price_histogram, compute_statistics, count_categories
from .errors import AggregationFailed
from .filters import filter_records, require_month
from .models import CombinedResponse
from .paginator import DEFAULT_PAGE, DEFAULT_PER_PAGE, paginate

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run_part(part: str, func: Callable[..., T], *args) -> T:
    """Run one sub-computation, wrapping any failure with the part name."""
    try:
        return func(*args)
    except Exception as exc:
        logger.error("Combined response part %s failed: %s", part, exc)
        raise AggregationFailed(part, exc) from exc


def combine(
    records: Sequence[SaleRecord],
    month: str | None,
    *,
    default_page: int = DEFAULT_PAGE,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> CombinedResponse:
    """Compute every month view against the same collection.

    The listing is the default page (``default_page`` of
    ``default_per_page`` records) with no search term; the statistics
    and charts use the whole month view.

    Raises:
        MissingParameter: If ``month`` is absent.
        AggregationFailed: If any part fails. No partial result is returned.
    """
    term = require_month(month)
    view = _run_part("filter", filter_records, records, term)

    transactions = _run_part(
        "transactions",
        paginate,
        view,
        default_page,
        default_per_page,
    )
    statistics = _run_part("statistics", compute_statistics, view, len(records))
    bar_chart = _run_part("barChart", build_price_histogram, view)
    pie_chart = _run_part("pieChart", count_categories, view)

    return CombinedResponse(
        transactions=transactions,
        statistics=statistics,
        bar_chart=bar_chart,
        pie_chart=pie_chart,
    )
