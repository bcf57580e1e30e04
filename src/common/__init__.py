# Common utilities and shared modules
"""
Shared components used by the dashboard:
- Data models (Pydantic schemas)
- HTTP client
- Logging configuration
- Project configuration
"""

from .config import settings, PROJECT_ROOT, CONFIG_DIR
from .http_client import HTTPClient
from .logging import setup_logging
from .models import SaleRecord

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "HTTPClient",
    "SaleRecord",
    "setup_logging",
]
