"""IMDb record assembly.

Combines extracted page fields into output records.
"""

import logging

from bs4 import BeautifulSoup

from imdbchart.etl.extractors.imdb.fields import IMDBFieldExtractor
from imdbchart.etl.types import MovieFields, MovieRecord
from imdbchart.etl.utils import setup_logger


class IMDBNormalizer:
    """Builds MovieRecord output from a parsed movie page."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize normalizer.

        Args:
            logger: Optional logger instance.
        """
        self._logger = logger or setup_logger("etl.imdb_chart.normalizer")
        self._fields = IMDBFieldExtractor()

    def extract_fields(self, page: BeautifulSoup) -> MovieFields:
        """Run every field extractor on a page.

        Args:
            page: Parsed movie page.

        Returns:
            Raw extracted fields.
        """
        title, year = self._fields.extract_title_and_year(page)
        return MovieFields(
            title=title,
            year=year,
            rating=self._fields.extract_rating(page),
            summary=self._fields.extract_summary(page),
            duration=self._fields.extract_duration(page),
            genre=self._fields.extract_genre(page),
        )

    @staticmethod
    def normalize(fields: MovieFields) -> MovieRecord:
        """Map extracted fields to the output record.

        Args:
            fields: Raw extracted fields.

        Returns:
            MovieRecord with output field names.
        """
        return MovieRecord(
            title=fields["title"],
            movie_release_year=fields["year"],
            imdb_rating=fields["rating"],
            summary=fields["summary"],
            duration=fields["duration"],
            genre=fields["genre"],
        )

    def build_record(self, page: BeautifulSoup) -> MovieRecord:
        """Extract and assemble one record.

        Args:
            page: Parsed movie page.

        Returns:
            MovieRecord for the page.
        """
        record = self.normalize(self.extract_fields(page))
        if not record["title"]:
            self._logger.debug("Page heading did not match 'Title (YYYY)'")
        return record
