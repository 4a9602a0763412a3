"""ETL extractors package."""

from imdbchart.etl.extractors.base import BaseExtractor
from imdbchart.etl.extractors.imdb import IMDBChartExtractor

__all__ = ["BaseExtractor", "IMDBChartExtractor"]
