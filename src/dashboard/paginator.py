"""Page slicing for the transactions listing."""

from __future__ import annotations

import re
from collections.abc import Sequence

from src.common.models import SaleRecord

from .models import TransactionPage

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_page_param(value: object, default: int) -> int:
    """Read a page number or page size from a query value.

    Leading digits are taken (``"3abc"`` is 3). Missing, unparseable or
    zero values give ``default``; negative values are clamped to 1.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        number = value
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return default
        number = int(match.group(1))
    if number == 0:
        return default
    return max(number, 1)


def paginate(
    view: Sequence[SaleRecord],
    page: object = None,
    per_page: object = None,
    *,
    default_page: int = DEFAULT_PAGE,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> TransactionPage:
    """Slice one page out of the view.

    Args:
        view: Filtered records.
        page: 1-based page number, raw or parsed.
        per_page: Page size, raw or parsed.

    Returns:
        TransactionPage holding the slice and the size of the whole view.
        Pages past the end are empty.
    """
    page_number = parse_page_param(page, default_page)
    page_size = parse_page_param(per_page, default_per_page)

    start = (page_number - 1) * page_size
    end = start + page_size
    return TransactionPage(
        transactions=list(view[start:end]),
        total_transactions=len(view),
    )
