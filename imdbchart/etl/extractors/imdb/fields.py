"""IMDb detail page field extraction.

Pulls the title, year, rating, summary, duration and genre out
of a parsed movie page. Extraction never raises: numeric fields
fall back to defaults and missing elements yield empty strings.
"""

import math

from bs4 import BeautifulSoup

from imdbchart.etl.utils import setup_logger

DEFAULT_YEAR = 0
DEFAULT_RATING = 0.0

# Selectors on the movie detail page
TITLE_SELECTOR = "div .title_wrapper h1"  # Title (YYYY)
RATING_SELECTOR = "div .ratingValue strong span"
SUMMARY_SELECTOR = "div .summary_text"
DURATION_SELECTOR = "div .subtext time"
GENRE_SELECTOR = "div .subtext a"

GENRE_SEPARATOR = ", "

logger = setup_logger("etl.imdb_chart.fields")


class IMDBFieldExtractor:
    """Extracts movie fields from a parsed IMDb page."""

    @staticmethod
    def _select_text(page: BeautifulSoup, selector: str) -> str:
        """Concatenate the text of every match and trim it.

        Args:
            page: Parsed HTML.
            selector: CSS selector.

        Returns:
            Trimmed text, empty if nothing matches.
        """
        return "".join(node.get_text() for node in page.select(selector)).strip()

    # -------------------------------------------------------------------------
    # Title / Year
    # -------------------------------------------------------------------------

    @staticmethod
    def extract_title_and_year(page: BeautifulSoup) -> tuple[str, int]:
        """Extract title and release year.

        Args:
            page: Parsed HTML.

        Returns:
            (title, year) tuple.
        """
        title_with_year = IMDBFieldExtractor._select_text(page, TITLE_SELECTOR)
        return IMDBFieldExtractor.split_title_and_year(title_with_year)

    @staticmethod
    def split_title_and_year(title_with_year: str) -> tuple[str, int]:
        """Split a "Title (YYYY)" heading.

        The heading must contain exactly one "(". Anything else yields
        an empty title and the default year.

        Args:
            title_with_year: Heading text, e.g. "Inception (2010)".

        Returns:
            (title, year) tuple.
        """
        parts = title_with_year.strip().split("(")
        if len(parts) != 2:
            return "", DEFAULT_YEAR

        title = parts[0].strip()
        # Drop the closing parenthesis
        year_text = parts[1][:-1].strip()
        try:
            year = int(year_text)
        except ValueError:
            logger.debug(f"Unparsable year {year_text!r} for {title!r}")
            year = DEFAULT_YEAR

        return title, year

    # -------------------------------------------------------------------------
    # Rating
    # -------------------------------------------------------------------------

    @staticmethod
    def extract_rating(page: BeautifulSoup) -> float:
        """Extract IMDb rating.

        Args:
            page: Parsed HTML.

        Returns:
            Rating, DEFAULT_RATING if missing or unparsable.
        """
        return IMDBFieldExtractor.parse_rating(
            IMDBFieldExtractor._select_text(page, RATING_SELECTOR)
        )

    @staticmethod
    def parse_rating(text: str) -> float:
        """Parse a decimal rating string.

        Args:
            text: Rating text, e.g. "8.8".

        Returns:
            Parsed rating or DEFAULT_RATING.
        """
        try:
            rating = float(text.strip())
        except ValueError:
            logger.debug(f"Unparsable rating {text!r}")
            return DEFAULT_RATING

        # NaN/inf are not valid JSON numbers
        if not math.isfinite(rating):
            return DEFAULT_RATING
        return rating

    # -------------------------------------------------------------------------
    # Plain text fields
    # -------------------------------------------------------------------------

    @staticmethod
    def extract_summary(page: BeautifulSoup) -> str:
        """Extract the plot summary."""
        return IMDBFieldExtractor._select_text(page, SUMMARY_SELECTOR)

    @staticmethod
    def extract_duration(page: BeautifulSoup) -> str:
        """Extract the running time as displayed (e.g. "2h 28min")."""
        return IMDBFieldExtractor._select_text(page, DURATION_SELECTOR)

    # -------------------------------------------------------------------------
    # Genre
    # -------------------------------------------------------------------------

    @staticmethod
    def extract_genre(page: BeautifulSoup) -> str:
        """Extract genres.

        The last link of the subtext bar is the release date link,
        not a genre, so it is dropped.

        Args:
            page: Parsed HTML.

        Returns:
            Genres joined with ", ".
        """
        tags = [tag.get_text().strip() for tag in page.select(GENRE_SELECTOR)]
        return IMDBFieldExtractor.join_genres(tags)

    @staticmethod
    def join_genres(tags: list[str]) -> str:
        """Join all tags but the last one.

        Args:
            tags: Subtext link texts in document order.

        Returns:
            Genre string.
        """
        return GENRE_SEPARATOR.join(tags[:-1])
