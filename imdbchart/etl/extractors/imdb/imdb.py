"""IMDb chart extractor.

Orchestrates a scrape run: fetches the chart page, harvests
its links and fans out over the detail pages.
"""

import asyncio
from typing import Any

import httpx

from imdbchart.etl.extractors.base import BaseExtractor
from imdbchart.etl.extractors.imdb.client import IMDBPageClient, PageFetchError, SeedPageError
from imdbchart.etl.extractors.imdb.harvester import ChartLinkHarvester
from imdbchart.etl.extractors.imdb.normalizer import IMDBNormalizer
from imdbchart.etl.extractors.imdb.scheduler import FanOutScheduler
from imdbchart.etl.extractors.imdb.url_builder import IMDBUrlBuilder
from imdbchart.etl.types import ETLResult, MovieRecord
from imdbchart.settings import settings


class IMDBChartExtractor(BaseExtractor):
    """Extracts movie records from an IMDb chart.

    Attributes:
        harvester: Chart link harvester.
        normalizer: Record assembler.
        last_result: Statistics of the most recent run.
    """

    name = "imdb_chart"

    def __init__(
        self,
        max_concurrency: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize IMDb chart extractor.

        Args:
            max_concurrency: Cap on in-flight detail fetches.
                Defaults to IMDB_MAX_CONCURRENCY (unbounded when unset).
            timeout: Per-request timeout override (seconds).
            transport: Optional httpx transport (used by tests).
        """
        super().__init__()
        self._harvester = ChartLinkHarvester(self.logger)
        self._normalizer = IMDBNormalizer(self.logger)
        self._max_concurrency = (
            max_concurrency if max_concurrency is not None else settings.imdb.max_concurrency
        )
        self._timeout = timeout
        self._transport = transport
        self.last_result: ETLResult | None = None

    # -------------------------------------------------------------------------
    # Main Extraction
    # -------------------------------------------------------------------------

    def extract(self, **kwargs: Any) -> list[MovieRecord]:
        """Execute chart extraction (sync wrapper).

        Kwargs:
            chart_url: Chart page URL (default IMDB_CHART_URL).
            items_count: Maximum number of movies to extract.

        Returns:
            Movie records in chart order.
        """
        chart_url = kwargs.get("chart_url") or settings.imdb.chart_url
        items_count = kwargs["items_count"]

        return asyncio.run(self.extract_async(chart_url=chart_url, items_count=items_count))

    async def extract_async(self, chart_url: str, items_count: int) -> list[MovieRecord]:
        """Execute chart extraction asynchronously.

        Args:
            chart_url: Chart page URL.
            items_count: Maximum number of movies to extract (>= 0).

        Returns:
            Movie records in chart order. Entries whose page could not
            be fetched are omitted.

        Raises:
            ValueError: If items_count is negative.
            InvalidChartURLError: If chart_url is not an http(s) URL.
            SeedPageError: If the chart page cannot be fetched.
        """
        if items_count < 0:
            raise ValueError(f"items_count must be >= 0, got {items_count}")
        IMDBUrlBuilder.validate_chart_url(chart_url)

        self._start_extraction()
        self.logger.info(f"Chart: {chart_url} (items: {items_count})")

        async with IMDBPageClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                seed_page = await client.fetch(chart_url)
            except PageFetchError as e:
                self._log_error(f"Chart page fetch failed: {e.reason}")
                raise SeedPageError(f"Chart page fetch failed: {e}") from e

            entries = self._harvester.harvest(seed_page, chart_url)

            scheduler = FanOutScheduler(
                client,
                normalizer=self._normalizer,
                max_concurrency=self._max_concurrency,
                logger=self.logger,
            )
            records = await scheduler.run(entries, items_count)

        self._extracted_count = len(records)
        stats = scheduler.last_stats

        result = self._end_extraction()
        result["requested"] = items_count
        result["dispatched"] = stats["dispatched"]
        result["failed"] = stats["failed"]
        result["success"] = result["success"] and stats["failed"] == 0
        self.last_result = result

        return records
