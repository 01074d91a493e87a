"""
HTTP fetcher for BGP toolkit pages.

Performs one blocking GET per URL and parses the body with BeautifulSoup.
A non-200 status is only logged: the site can serve usable tables alongside
error codes, so the body is parsed regardless.
"""

import time
from dataclasses import dataclass

import requests
from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup

from bgp_query.config.settings import BGPSettings
from bgp_query.errors import DocumentParseError, TransportError
from bgp_query.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class FetchResult:
    """HTTP response data for a fetched page."""
    url: str
    status_code: int
    content: bytes = b""
    fetch_time: float = 0.0

    @property
    def ok(self) -> bool:
        """True when the server answered 200."""
        return self.status_code == 200


class Fetcher:
    """
    Fetches pages and turns them into navigable documents.
    """

    def __init__(
        self,
        settings: BGPSettings | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the fetcher.

        Args:
            settings: HTTP settings (timeout, user agent, parser)
            session: Optional pre-built requests session
        """
        self.settings = settings or BGPSettings()
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        })

    def fetch(self, url: str) -> FetchResult:
        """
        Fetch a URL.

        Args:
            url: URL to request

        Returns:
            FetchResult with the status code and raw body

        Raises:
            TransportError: If the request could not be completed
        """
        logger.debug("fetching_url", url=url)
        start_time = time.time()

        try:
            with self.session.get(url, timeout=self.settings.timeout) as response:
                result = FetchResult(
                    url=url,
                    status_code=response.status_code,
                    content=response.content,
                    fetch_time=time.time() - start_time,
                )
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

        if not result.ok:
            logger.warning("unexpected_status", url=url, status_code=result.status_code)

        logger.debug(
            "fetched_url",
            url=url,
            status_code=result.status_code,
            size=len(result.content),
            fetch_time=round(result.fetch_time, 3),
        )
        return result

    def parse(self, content: bytes | str, url: str | None = None) -> BeautifulSoup:
        """
        Parse markup into a document tree.

        Raises:
            DocumentParseError: If the configured parser is unavailable or rejects the markup
        """
        try:
            return BeautifulSoup(content, self.settings.parser)
        except (FeatureNotFound, ParserRejectedMarkup) as e:
            raise DocumentParseError(f"Could not parse document: {e}", url=url) from e

    def fetch_document(self, url: str) -> BeautifulSoup:
        """Fetch a URL and return its parsed document."""
        result = self.fetch(url)
        return self.parse(result.content, url=url)

    def close(self) -> None:
        self.session.close()
