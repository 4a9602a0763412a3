"""IMDb chart extractor package.

Scrapes an IMDb chart page and the movie pages it links to.

Classes:
    IMDBChartExtractor: Main extractor orchestrating a run.
    IMDBPageClient: Async page client (httpx + BeautifulSoup).
    ChartLinkHarvester: Ordered chart link collection.
    FanOutScheduler: Concurrent fetch+extract with order restoration.
    IMDBFieldExtractor: Per-field extraction rules.
    IMDBNormalizer: Record assembly.
    IMDBUrlBuilder: URL validation and resolution.

Usage:
    from imdbchart.etl.extractors.imdb import IMDBChartExtractor

    extractor = IMDBChartExtractor()
    records = extractor.extract(chart_url="https://www.imdb.com/chart/top", items_count=10)
"""

from imdbchart.etl.extractors.imdb.client import (
    IMDBClientError,
    IMDBPageClient,
    InvalidChartURLError,
    PageFetchError,
    SeedPageError,
)
from imdbchart.etl.extractors.imdb.fields import IMDBFieldExtractor
from imdbchart.etl.extractors.imdb.harvester import ChartLinkHarvester
from imdbchart.etl.extractors.imdb.imdb import IMDBChartExtractor
from imdbchart.etl.extractors.imdb.normalizer import IMDBNormalizer
from imdbchart.etl.extractors.imdb.scheduler import FanOutScheduler, fan_out
from imdbchart.etl.extractors.imdb.url_builder import IMDBUrlBuilder

__all__ = [
    "IMDBChartExtractor",
    "IMDBPageClient",
    "ChartLinkHarvester",
    "FanOutScheduler",
    "fan_out",
    "IMDBFieldExtractor",
    "IMDBNormalizer",
    "IMDBUrlBuilder",
    "IMDBClientError",
    "PageFetchError",
    "InvalidChartURLError",
    "SeedPageError",
]
