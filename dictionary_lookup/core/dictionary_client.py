"""Fetch word entries from the Free Dictionary API"""

from typing import Any

import requests  # type: ignore[import-untyped]

from ..config.settings import settings
from ..exceptions import TransportError
from ..logging_config import get_logger
from ..models.word_entry import WordEntry
from .constants import ApiConstants
from .decoder import decode_entries
from .interfaces import DictionaryClientInterface
from .request_builder import build_lookup_url

logger = get_logger(__name__)


class DictionaryClient(DictionaryClientInterface):
    """Looks up words with a single GET request per word"""

    def __init__(
        self,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.timeout = float(
            timeout if timeout is not None else settings.api.request_timeout
        )
        self.session = session or requests.Session()
        headers = ApiConstants.DEFAULT_HEADERS.copy()
        headers["User-Agent"] = settings.api.user_agent
        self.session.headers.update(headers)

    def fetch_raw(self, word: str) -> bytes:
        """Fetch the response body for a word, raising TransportError on failure"""
        url = build_lookup_url(word)
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.Timeout as e:
            raise TransportError(
                url, f"timed out after {self.timeout}s", original_error=e
            ) from e
        except requests.RequestException as e:
            raise TransportError(url, str(e), original_error=e) from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(
                url,
                self._describe_http_error(response),
                status_code=response.status_code,
                original_error=e,
            ) from e

        logger.debug(f"HTTP {response.status_code}, {len(response.content)} bytes")
        return response.content

    def lookup(self, word: str) -> list[WordEntry]:
        """Fetch and decode all entries for a word"""
        entries = decode_entries(self.fetch_raw(word))
        if not entries:
            logger.info(f"No entries returned for '{word.strip()}'")
        return entries

    @staticmethod
    def _describe_http_error(response: requests.Response) -> str:
        """Summarize an error response, using the API's error title when present"""
        reason = f"HTTP {response.status_code}"
        try:
            body: Any = response.json()
        except ValueError:
            return reason
        if isinstance(body, dict):
            title = body.get(ApiConstants.ERROR_TITLE_KEY)
            if title:
                return f"{reason} {title}"
        return reason
