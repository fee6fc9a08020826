"""
Web Client for Gwent profile pages
"""

import logging
from typing import Optional

import requests

from gwent_crawler.config.settings import DEFAULT_HEADERS, REQUEST_TIMEOUT
from gwent_crawler.exceptions import FetchError


class WebClient:
    """HTTP client for Gwent profile pages, one request per player"""

    def __init__(self, timeout: Optional[float] = REQUEST_TIMEOUT):
        """
        Initialize web client.

        Args:
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.logger = logging.getLogger(__name__)

    def get(self, url: str) -> Optional[str]:
        """
        Fetch a page body.

        Args:
            url: URL to request

        Returns:
            Page text, or None if the server answered with anything but 200

        Raises:
            FetchError: If the request failed before a response arrived
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            self.logger.debug(f"HTTP {response.status_code} for {url}, skipping")
            return None

        return response.text

    def close(self):
        """Close the session"""
        self.session.close()
