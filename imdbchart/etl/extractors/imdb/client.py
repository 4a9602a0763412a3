"""IMDb page client.

Handles HTTP communication with IMDb: fetches a page and
parses it into a BeautifulSoup document. A single attempt
is made per page.
"""

from types import TracebackType

import httpx
from bs4 import BeautifulSoup

from imdbchart.etl.utils import setup_logger
from imdbchart.settings import settings

logger = setup_logger("etl.imdb_chart.client")


class IMDBClientError(Exception):
    """Base exception for IMDb client errors."""

    pass


class PageFetchError(IMDBClientError):
    """Raised when a page cannot be fetched or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize with the failing URL.

        Args:
            url: Page URL that failed.
            reason: Human readable failure reason.
        """
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class InvalidChartURLError(IMDBClientError):
    """Raised when the chart URL has no http(s) scheme or host."""

    pass


class SeedPageError(IMDBClientError):
    """Raised when the chart page itself cannot be fetched."""

    pass


class IMDBPageClient:
    """Async HTTP client returning parsed IMDb pages.

    One httpx.AsyncClient (and its connection pool) is shared by
    every fetch made while the client context is open.

    Attributes:
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client with settings.

        Args:
            timeout: Per-request timeout override (seconds).
            transport: Optional httpx transport (used by tests).
        """
        self._timeout = timeout if timeout is not None else settings.imdb.timeout
        self._transport = transport
        self._headers = {
            "User-Agent": settings.imdb.user_agent,
            "Accept-Language": settings.imdb.accept_language,
        }
        self._client: httpx.AsyncClient | None = None

    @property
    def timeout(self) -> float:
        """Get the per-request timeout."""
        return self._timeout

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "IMDBPageClient":
        """Enter context and create HTTP client."""
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers=self._headers,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client.

        Args:
            _exc_type: Exception type if raised.
            _exc_val: Exception value if raised.
            _exc_tb: Exception traceback if raised.
        """
        if self._client:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # HTTP Methods
    # -------------------------------------------------------------------------

    async def fetch(self, url: str) -> BeautifulSoup:
        """Fetch a page and parse it.

        Args:
            url: Absolute page URL.

        Returns:
            Parsed HTML document.

        Raises:
            PageFetchError: On transport error, timeout or non-2xx status.
            RuntimeError: If called outside the client context.
        """
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise PageFetchError(url, f"timed out after {self._timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise PageFetchError(url, f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise PageFetchError(url, str(e) or type(e).__name__) from e

        logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return BeautifulSoup(response.text, "html.parser")
