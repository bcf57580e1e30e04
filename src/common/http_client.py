"""HTTP client with timeout and retry for fetching remote datasets."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

logger = logging.getLogger(__name__)


class HTTPClient:
    """HTTP client wrapping a requests session.

    Features:
    - Per-request timeout
    - Automatic retries with exponential backoff
    - No retry on 4xx client errors (except 429)
    """

    BACKOFF_BASE = 2.0

    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = 3,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.max_retries = max(max_retries, 1)
        self._session = session or requests.Session()

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send a GET request with retries.

        Args:
            url: Target URL.
            params: Query parameters.
            headers: Extra headers.

        Returns:
            requests.Response object.

        Raises:
            requests.RequestException: After all retries exhausted.
        """
        last_exc: requests.RequestException | None = None
        for attempt in range(self.max_retries):
            try:
                resp = self._session.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=self.timeout,
                )
                resp.raise_for_status()
                return resp

            except requests.RequestException as exc:
                last_exc = exc

                if (
                    isinstance(exc, requests.HTTPError)
                    and exc.response is not None
                    and 400 <= exc.response.status_code < 500
                    and exc.response.status_code != 429
                ):
                    logger.warning("Request failed (4xx, no retry): %s", exc)
                    raise

                if attempt + 1 >= self.max_retries:
                    break

                wait_time = self.BACKOFF_BASE ** attempt
                logger.warning(
                    "Request failed (attempt %d/%d): %s, retrying in %.1fs",
                    attempt + 1,
                    self.max_retries,
                    exc,
                    wait_time,
                )
                time.sleep(wait_time)

        logger.error("All %d attempts failed for %s", self.max_retries, url)
        raise last_exc  # type: ignore[misc]

    def get_json(self, url: str, **kwargs: Any) -> Any:
        """GET a URL and decode its JSON body.

        Raises:
            requests.RequestException: On transport or HTTP failure.
            ValueError: If the body is not valid JSON.
        """
        return self.get(url, **kwargs).json()

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
