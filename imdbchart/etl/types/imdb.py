"""IMDb scraped data types.

Definitions for the data structures harvested from an IMDb
chart page and extracted from movie detail pages.
"""

from dataclasses import dataclass
from typing import TypedDict


@dataclass(frozen=True)
class LinkEntry:
    """One chart row: a detail page link in chart order.

    Attributes:
        position: 0-based order of appearance on the chart page.
        url: Absolute detail page URL.
        display_name: Anchor text shown on the chart (not unique).
    """

    position: int
    url: str
    display_name: str


class MovieFields(TypedDict):
    """Raw fields pulled from a movie detail page."""

    title: str
    year: int
    rating: float
    summary: str
    duration: str
    genre: str


class MovieRecord(TypedDict):
    """Output record for one movie, keyed by its JSON field names."""

    title: str
    movie_release_year: int
    imdb_rating: float
    summary: str
    duration: str
    genre: str
