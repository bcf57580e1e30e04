"""Sales Dashboard - month views over the product transaction dataset."""

from .aggregators import build_price_histogram, compute_statistics, count_categories
from .combiner import combine
from .errors import (
    AggregationFailed,
    DashboardError,
    DataSourceUnavailable,
    MissingParameter,
)
from .filters import filter_records, require_month
from .loader import DatasetLoader, load_records
from .paginator import paginate, parse_page_param
from .store import RecordStore

__all__ = [
    "AggregationFailed",
    "DashboardError",
    "DataSourceUnavailable",
    "DatasetLoader",
    "MissingParameter",
    "RecordStore",
    "build_price_histogram",
    "combine",
    "compute_statistics",
    "count_categories",
    "filter_records",
    "load_records",
    "paginate",
    "parse_page_param",
    "require_month",
]
