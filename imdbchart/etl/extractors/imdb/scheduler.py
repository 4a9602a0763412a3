"""Concurrent fetch-and-extract of chart detail pages.

Dispatches one task per chart entry in the work set, waits for
all of them, then restores chart order. Completed jobs are
correlated back to the chart by their harvest position, so
movies sharing a display name never collide.
"""

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

from bs4 import BeautifulSoup

from imdbchart.etl.extractors.imdb.client import PageFetchError
from imdbchart.etl.extractors.imdb.normalizer import IMDBNormalizer
from imdbchart.etl.types import FanOutStats, LinkEntry, MovieRecord
from imdbchart.etl.utils import setup_logger


class PageFetcher(Protocol):
    """Anything that can fetch and parse a page."""

    async def fetch(self, url: str) -> BeautifulSoup: ...


class FanOutScheduler:
    """Runs fetch+extract jobs for the first `limit` chart entries.

    The completion queue and task group are created per batch, so
    concurrent batches never share state.

    Attributes:
        max_concurrency: Cap on in-flight fetches (None = one per entry).
        last_stats: Counters of the most recent batch.
    """

    def __init__(
        self,
        client: PageFetcher,
        normalizer: IMDBNormalizer | None = None,
        max_concurrency: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize scheduler.

        Args:
            client: Page fetcher shared by every job.
            normalizer: Record assembler (default IMDBNormalizer).
            max_concurrency: Optional cap on simultaneous fetches.
            logger: Optional logger instance.

        Raises:
            ValueError: If max_concurrency is < 1.
        """
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

        self._client = client
        self._logger = logger or setup_logger("etl.fan_out")
        self._normalizer = normalizer or IMDBNormalizer(self._logger)
        self.max_concurrency = max_concurrency
        self.last_stats = FanOutStats(dispatched=0, succeeded=0, failed=0)

    async def run(self, entries: Sequence[LinkEntry], limit: int) -> list[MovieRecord]:
        """Fetch and extract the work set, returning records in chart order.

        Args:
            entries: Harvested chart entries in chart order.
            limit: Maximum number of entries to process (>= 0).

        Returns:
            Records of successfully fetched entries, in chart order.

        Raises:
            ValueError: If limit is negative.
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        work_set = list(entries[:limit])
        if not work_set:
            self.last_stats = FanOutStats(dispatched=0, succeeded=0, failed=0)
            return []

        # Sized to the work set: producers never block
        completed: asyncio.Queue[tuple[int, MovieRecord]] = asyncio.Queue(
            maxsize=len(work_set)
        )
        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        self._logger.info(
            f"Dispatching {len(work_set)} jobs "
            f"(max concurrency: {self.max_concurrency or 'unbounded'})"
        )

        async with asyncio.TaskGroup() as group:
            for entry in work_set:
                group.create_task(self._run_job(entry, completed, semaphore))

        results: dict[int, MovieRecord] = {}
        while not completed.empty():
            position, record = completed.get_nowait()
            results[position] = record

        ordered = [
            results[entry.position] for entry in entries[:limit] if entry.position in results
        ]

        self.last_stats = FanOutStats(
            dispatched=len(work_set),
            succeeded=len(results),
            failed=len(work_set) - len(results),
        )
        self._logger.info(
            f"Batch done: {self.last_stats['succeeded']}/{len(work_set)} succeeded, "
            f"{self.last_stats['failed']} failed"
        )
        return ordered

    async def _run_job(
        self,
        entry: LinkEntry,
        completed: asyncio.Queue[tuple[int, MovieRecord]],
        semaphore: asyncio.Semaphore | None,
    ) -> None:
        """Fetch one detail page and queue its record.

        A fetch failure is logged and the job finishes without
        queuing anything.

        Args:
            entry: Chart entry owned by this job.
            completed: Batch completion queue.
            semaphore: Optional concurrency limiter.
        """
        try:
            if semaphore is None:
                page = await self._client.fetch(entry.url)
            else:
                async with semaphore:
                    page = await self._client.fetch(entry.url)
        except PageFetchError as e:
            self._logger.warning(
                f"Skipping #{entry.position + 1} {entry.display_name!r}: {e}"
            )
            return

        record = self._normalizer.build_record(page)
        completed.put_nowait((entry.position, record))
        self._logger.debug(f"✓ #{entry.position + 1} {record['title'] or entry.display_name}")


async def fan_out(
    entries: Sequence[LinkEntry],
    limit: int,
    client: PageFetcher,
    max_concurrency: int | None = None,
) -> list[MovieRecord]:
    """Fetch and extract the first `limit` entries concurrently.

    Args:
        entries: Harvested chart entries in chart order.
        limit: Maximum number of entries to process (>= 0).
        client: Page fetcher.
        max_concurrency: Optional cap on simultaneous fetches.

    Returns:
        Records in chart order; failed entries are omitted.
    """
    scheduler = FanOutScheduler(client, max_concurrency=max_concurrency)
    return await scheduler.run(entries, limit)
