"""Giphy image source."""

import logging
import requests
from typing import Any, List, Optional
from urllib.parse import urlencode
from moodgiphs.sources.base import ImageSource
from moodgiphs.models import Giph
from moodgiphs.config import Config
from moodgiphs.exceptions import NetworkError, ParseError, MalformedResponseError

logger = logging.getLogger(__name__)


class GiphySource(ImageSource):
    """Search Giphy for GIFs matching a mood keyword."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        super().__init__(api_key if api_key is not None else Config.GIPHY_API_KEY)
        self.base_url = (base_url or Config.GIPHY_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT

    def get_source_name(self) -> str:
        return "Giphy"

    def is_available(self) -> bool:
        """Check if a Giphy API key is configured."""
        return bool(self.api_key)

    def build_query(self, keyword: Optional[str]) -> str:
        """Build the search URL for a keyword.

        The keyword is URL-encoded here, so callers can pass raw user input.
        """
        if keyword is None:
            keyword = ''
        params = urlencode({'q': keyword, 'api_key': self.api_key})
        return f"{self.base_url}/search?{params}"

    def fetch(self, url: str) -> Any:
        """Send a single GET request and parse the body as JSON.

        The status code is not checked: an error reply from Giphy still
        carries a JSON body, and extract_results decides what it means.

        Raises:
            NetworkError: If the request could not complete
            ParseError: If the body is not valid JSON
        """
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Request to %s failed: %s", self.get_source_name(), e)
            raise NetworkError(f"Could not reach {self.get_source_name()}: {e}", url=url) from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s returned a body that is not JSON (status %s)",
                           self.get_source_name(), response.status_code)
            raise ParseError(f"Invalid JSON from {self.get_source_name()}: {e}", url=url) from e

    def extract_results(self, payload: Any) -> List[Giph]:
        """Turn a parsed search payload into Giph objects.

        Each item of ``data`` must carry ``images.fixed_height.url``. A single
        bad item fails the whole payload.

        Raises:
            MalformedResponseError: If the payload does not have the expected shape
        """
        if not isinstance(payload, dict):
            raise MalformedResponseError("Response payload is not a JSON object")

        data = payload.get('data')
        if not isinstance(data, list):
            raise MalformedResponseError("Response payload has no 'data' list")

        results = []
        for index, gif in enumerate(data):
            try:
                url = gif['images']['fixed_height']['url']
            except (KeyError, TypeError) as e:
                raise MalformedResponseError(
                    f"Item {index} has no images.fixed_height.url", index=index
                ) from e
            if not isinstance(url, str):
                raise MalformedResponseError(f"Item {index} has a non-string image url", index=index)
            results.append(Giph(image_url=url))

        return results

    def search(self, keyword: Optional[str]) -> List[Giph]:
        """Search Giphy for GIFs.

        Args:
            keyword: Mood keyword entered by the user

        Returns:
            List of Giph objects in provider order
        """
        url = self.build_query(keyword)
        logger.info("→ Fetching from %s: %r", self.get_source_name(), keyword)
        payload = self.fetch(url)
        results = self.extract_results(payload)
        logger.info("✓ %d results from %s", len(results), self.get_source_name())
        return results
