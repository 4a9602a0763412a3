"""Helpers de test : pages HTML factices et clients en mémoire."""

import asyncio

import httpx
from bs4 import BeautifulSoup

from imdbchart.etl.extractors.imdb.client import PageFetchError

CHART_URL = "https://www.imdb.com/chart/top"


# =============================================================================
# HTML BUILDERS
# =============================================================================


def build_chart_html(rows: list[tuple[str, str]]) -> str:
    """Page chart factice.

    Args:
        rows: (href, display name) par ligne du chart.

    Returns:
        HTML du chart.
    """
    cells = "".join(
        f'<tr><td class="titleColumn">{i + 1}. <a href="{href}">{name}</a>'
        f'<span class="secondaryInfo">(2000)</span></td></tr>'
        for i, (href, name) in enumerate(rows)
    )
    return f"<html><body><table><tbody>{cells}</tbody></table></body></html>"


def build_movie_html(
    title: str = "Inception",
    year: str = "2010",
    rating: str = "8.8",
    summary: str = "A thief who steals corporate secrets.",
    duration: str = "2h 28min",
    genres: tuple[str, ...] = ("Action", "Sci-Fi"),
    release_link: str = "16 July 2010 (USA)",
) -> str:
    """Page film factice au format title_wrapper / subtext."""
    genre_links = "".join(f'<a href="/search/title?genres={g}">{g}</a>, ' for g in genres)
    return f"""
    <html><body>
      <div class="title_block">
        <div class="title_wrapper">
          <h1>{title}&nbsp;(<span id="titleYear"><a href="/year/{year}/">{year}</a></span>)</h1>
          <div class="subtext">
            PG-13 | <time datetime="PT148M">
              {duration}
            </time> | {genre_links}
            <a href="/title/releaseinfo">{release_link}</a>
          </div>
        </div>
        <div class="ratings_wrapper">
          <div class="ratingValue"><strong title="{rating}"><span>{rating}</span></strong>/10</div>
        </div>
      </div>
      <div class="plot_summary">
        <div class="summary_text">
          {summary}
        </div>
      </div>
    </body></html>
    """


def parse(html: str) -> BeautifulSoup:
    """Parse HTML comme le client."""
    return BeautifulSoup(html, "html.parser")


# =============================================================================
# FAKE CLIENTS
# =============================================================================


class FakePageClient:
    """Client en mémoire contrôlant l'ordre de complétion.

    Attributes:
        pages: URL -> HTML.
        delays: URL -> secondes avant réponse.
        failing: URLs levant PageFetchError.
        calls: URLs demandées, dans l'ordre d'appel.
        in_flight: Requêtes en cours.
        max_in_flight: Pic de requêtes simultanées.
    """

    def __init__(
        self,
        pages: dict[str, str],
        delays: dict[str, float] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.pages = pages
        self.delays = delays or {}
        self.failing = failing or set()
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> BeautifulSoup:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            if url in self.failing or url not in self.pages:
                raise PageFetchError(url, "HTTP 404")
            return parse(self.pages[url])
        finally:
            self.in_flight -= 1
            self.completed.append(url)


def build_mock_transport(
    pages: dict[str, str],
    statuses: dict[str, int] | None = None,
    errors: dict[str, Exception] | None = None,
) -> httpx.MockTransport:
    """Transport httpx servant des pages en mémoire.

    Args:
        pages: URL -> HTML (200).
        statuses: URL -> code HTTP forcé.
        errors: URL -> exception levée par le transport.

    Returns:
        MockTransport utilisable par IMDBPageClient.
    """
    statuses = statuses or {}
    errors = errors or {}

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url in errors:
            raise errors[url]
        if url in statuses:
            return httpx.Response(statuses[url], text="error", request=request)
        if url in pages:
            return httpx.Response(200, text=pages[url], request=request)
        return httpx.Response(404, text="not found", request=request)

    return httpx.MockTransport(handler)

