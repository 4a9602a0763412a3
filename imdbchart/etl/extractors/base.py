"""Base extractor abstract class.

Provides common interface and utilities for all
ETL extractors.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime

from imdbchart.etl.types import ETLResult
from imdbchart.etl.utils import setup_logger
from imdbchart.settings import settings


class BaseExtractor(ABC):
    """Abstract base class for all ETL extractors.

    Provides common functionality for logging and result tracking.

    Attributes:
        name: Extractor identifier (e.g., 'imdb_chart').
        logger: Logger instance for this extractor.
    """

    name: str = "base"

    def __init__(self) -> None:
        """Initialize base extractor."""
        log_dir = settings.logging.log_path if settings.logging.to_file else None
        self._logger = setup_logger(
            f"etl.{self.name}",
            level=logging.getLevelName(settings.logging.level),
            log_dir=log_dir,
        )
        self._start_time: datetime | None = None
        self._extracted_count: int = 0
        self._errors: list[str] = []

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    @abstractmethod
    def extract(self, **kwargs: object) -> object:
        """Execute the extraction process.

        Args:
            **kwargs: Extractor-specific parameters.

        Returns:
            Extracted data.
        """
        pass

    def _start_extraction(self) -> None:
        """Mark the start of extraction."""
        self._start_time = datetime.now()
        self._extracted_count = 0
        self._errors = []
        self._logger.info(f"Starting {self.name} extraction")

    def _end_extraction(self) -> ETLResult:
        """Mark the end of extraction and return result.

        Returns:
            ETLResult with final statistics.
        """
        duration = self._calculate_duration()
        success = len(self._errors) == 0

        self._logger.info(
            f"Completed {self.name} extraction: {self._extracted_count} items in {duration:.2f}s"
        )

        return ETLResult(
            source=self.name,
            success=success,
            count=self._extracted_count,
            errors=self._errors if self._errors else [],
            duration_seconds=duration,
        )

    def _calculate_duration(self) -> float:
        """Calculate extraction duration in seconds."""
        if self._start_time is None:
            return 0.0
        delta = datetime.now() - self._start_time
        return delta.total_seconds()

    def _log_error(self, message: str) -> None:
        """Log and track an error.

        Args:
            message: Error message to log.
        """
        self._logger.error(message)
        self._errors.append(message)
