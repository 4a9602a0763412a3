"""Fixtures pytest partagées pour tests ETL."""

from collections.abc import Callable

import httpx
import pytest

from tests.helpers import CHART_URL, build_chart_html, build_mock_transport, build_movie_html


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock variables env pour tests reproductibles."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_TO_FILE", "false")
    monkeypatch.delenv("IMDB_MAX_CONCURRENCY", raising=False)
    monkeypatch.delenv("IMDB_TIMEOUT", raising=False)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def chart_url() -> str:
    """URL du chart de test."""
    return CHART_URL


@pytest.fixture
def five_movies() -> list[dict[str, str]]:
    """Cinq films factices avec URL de détail."""
    titles = ["The Shawshank Redemption", "The Godfather", "The Dark Knight", "Inception", "Alien"]
    years = ["1994", "1972", "2008", "2010", "1979"]
    ratings = ["9.3", "9.2", "9.0", "8.8", "8.5"]
    return [
        {
            "href": f"/title/tt00000{i}/",
            "url": f"https://www.imdb.com/title/tt00000{i}/",
            "title": title,
            "year": year,
            "rating": rating,
        }
        for i, (title, year, rating) in enumerate(zip(titles, years, ratings))
    ]


@pytest.fixture
def chart_pages(
    chart_url: str, five_movies: list[dict[str, str]]
) -> dict[str, str]:
    """Chart + pages film indexés par URL."""
    pages = {chart_url: build_chart_html([(m["href"], m["title"]) for m in five_movies])}
    for movie in five_movies:
        pages[movie["url"]] = build_movie_html(
            title=movie["title"], year=movie["year"], rating=movie["rating"]
        )
    return pages


@pytest.fixture
def transport_factory() -> Callable[..., httpx.MockTransport]:
    """Fabrique de MockTransport."""
    return build_mock_transport
