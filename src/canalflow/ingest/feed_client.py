"""Client for downloading the canal discharge feed."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from canalflow.config import get_settings

logger = logging.getLogger(__name__)


class FeedError(RuntimeError):
    """Raised when the discharge feed cannot be retrieved."""


class FeedClient:
    """Thin wrapper around ``requests`` that applies configured URL and timeout."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_settings()
        self.url = url or settings.feed_url
        self.timeout = timeout or settings.request_timeout
        self.session = session or requests.Session()

    def fetch_text(self) -> str:
        """Download the feed body. No retries are attempted."""
        logger.info("Fetching discharge feed from %s", self.url)
        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FeedError(f"Feed request to {self.url} failed: {exc}") from exc
        if not response.ok:
            raise FeedError(f"Feed error {response.status_code}: {response.text[:200]}")
        # The feed is UTF-8 but served without a charset.
        return response.content.decode("utf-8-sig", errors="replace")
