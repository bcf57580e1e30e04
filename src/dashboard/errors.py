"""Error types raised by the dashboard core.

Each error carries a stable ``code`` and the HTTP status the API layer
answers with. Handlers translate them with ``to_dict()``.
"""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for dashboard errors."""

    code = "dashboard_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class MissingParameter(DashboardError):
    """A required query parameter was absent or blank."""

    code = "missing_parameter"
    status_code = 400

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required parameter: {name}")
        self.name = name

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["parameter"] = self.name
        return data


class DataSourceUnavailable(DashboardError):
    """The remote dataset could not be fetched or decoded."""

    code = "data_source_unavailable"
    status_code = 503

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to load data from {url}: {reason}")
        self.url = url
        self.reason = reason


class AggregationFailed(DashboardError):
    """One part of the combined response could not be computed."""

    code = "aggregation_failed"
    status_code = 500

    def __init__(self, part: str, cause: BaseException) -> None:
        super().__init__(f"Failed to compute {part}: {cause}")
        self.part = part
        self.cause = cause

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["part"] = self.part
        return data
