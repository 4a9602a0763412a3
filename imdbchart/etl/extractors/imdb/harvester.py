"""Chart page link harvesting."""

import logging

from bs4 import BeautifulSoup

from imdbchart.etl.extractors.imdb.url_builder import IMDBUrlBuilder
from imdbchart.etl.types import LinkEntry
from imdbchart.etl.utils import setup_logger

# Anchor of each chart row
CHART_ROW_SELECTOR = ".titleColumn a"


class ChartLinkHarvester:
    """Collects detail page links from a chart page, in chart order."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize harvester.

        Args:
            logger: Optional logger instance.
        """
        self._logger = logger or setup_logger("etl.imdb_chart.harvester")

    def harvest(self, seed_document: BeautifulSoup, seed_url: str) -> list[LinkEntry]:
        """Extract the ordered chart links.

        Document order is authoritative for the final output order.
        An empty chart yields an empty list. Anchors whose href cannot
        be resolved are skipped.

        Args:
            seed_document: Parsed chart page.
            seed_url: URL the chart page was fetched from.

        Returns:
            LinkEntry list with positions 0..n-1.
        """
        site_root = IMDBUrlBuilder.build_site_root(seed_url)
        entries: list[LinkEntry] = []

        for anchor in seed_document.select(CHART_ROW_SELECTOR):
            href = anchor.get("href")
            if not href:
                continue

            display_name = anchor.get_text().strip()
            try:
                url = IMDBUrlBuilder.build_full_url(site_root, str(href))
            except ValueError as e:
                self._logger.warning(f"Skipping chart link {display_name!r} ({href!r}): {e}")
                continue

            entries.append(LinkEntry(position=len(entries), url=url, display_name=display_name))

        self._logger.info(f"Harvested {len(entries)} chart links from {seed_url}")
        return entries
