"""Command Line Interface for the IMDb chart scraper.

Usage:
    imdbchart <chart_url> <items_count> [--max-concurrency N] [--sequential]

Prints the records as a single JSON line on stdout. Logs go to
stderr. Exits with 1 on invalid arguments, chart page failure,
empty result or serialization failure.
"""

import argparse
import sys
import traceback
from typing import NoReturn

from imdbchart.etl.extractors.imdb import IMDBChartExtractor, IMDBClientError
from imdbchart.etl.loaders import JSONStdoutWriter, SerializationError
from imdbchart.etl.utils import set_level, setup_logger
from imdbchart.settings import get_settings_summary, settings

logger = setup_logger("etl.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


# =============================================================================
# ARGUMENT PARSING
# =============================================================================


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser exiting with EXIT_FAILURE on usage errors."""

    def error(self, message: str) -> NoReturn:
        """Print usage and exit with EXIT_FAILURE.

        Args:
            message: Error description.
        """
        self.print_usage(sys.stderr)
        logger.error(message)
        sys.exit(EXIT_FAILURE)


def _non_negative_int(value: str) -> int:
    """Parse the items count argument.

    Args:
        value: Raw argument.

    Returns:
        Parsed count.

    Raises:
        argparse.ArgumentTypeError: If not an integer >= 0.
    """
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid itemsCount: {value!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(f"Invalid itemsCount: {value!r}")
    return count


def _positive_int(value: str) -> int:
    """Parse a strictly positive integer option."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a positive integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer: {value!r}")
    return number


def _positive_float(value: str) -> float:
    """Parse a strictly positive float option."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a positive number: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"Expected a positive number: {value!r}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        Configured parser.
    """
    parser = _ArgumentParser(
        prog="imdbchart",
        description="Extract movie records from an IMDb chart as JSON",
    )

    parser.add_argument("chart_url", help="Chart page URL, e.g. https://www.imdb.com/chart/top")
    parser.add_argument(
        "items_count",
        type=_non_negative_int,
        help="Maximum number of movies to extract (>= 0)",
    )

    concurrency = parser.add_mutually_exclusive_group()
    concurrency.add_argument(
        "--max-concurrency",
        type=_positive_int,
        default=None,
        help="Cap on simultaneous page fetches "
        f"(default: {settings.imdb.max_concurrency or 'unbounded'})",
    )
    concurrency.add_argument(
        "--sequential",
        action="store_true",
        help="Fetch movie pages one at a time",
    )

    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        help=f"Per-request timeout in seconds (default: {settings.imdb.timeout})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help=f"Log level (default: {settings.logging.level})",
    )

    return parser


def _parse_cli_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments without program name (default sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    return _build_parser().parse_args(argv)


# =============================================================================
# COMMAND HANDLERS
# =============================================================================


def _run_extraction(args: argparse.Namespace) -> int:
    """Scrape the chart and print the records.

    Args:
        args: Parsed arguments.

    Returns:
        Process exit code.
    """
    max_concurrency = 1 if args.sequential else args.max_concurrency
    extractor = IMDBChartExtractor(max_concurrency=max_concurrency, timeout=args.timeout)
    set_level(args.log_level or settings.logging.level)
    logger.debug(f"Settings: {get_settings_summary()}")

    try:
        records = extractor.extract(chart_url=args.chart_url, items_count=args.items_count)
    except IMDBClientError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    if not records:
        logger.info("No movie record.")
        return EXIT_FAILURE

    try:
        JSONStdoutWriter().write(records)
    except SerializationError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    return EXIT_OK


def _handle_fatal_error(error: Exception) -> NoReturn:
    """Handle unexpected fatal error.

    Args:
        error: Exception that caused the failure.
    """
    traceback.print_exc()
    logger.error(f"Scrape failed: {error}")
    sys.exit(EXIT_FAILURE)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def main(argv: list[str] | None = None) -> NoReturn:
    """CLI entry point.

    Args:
        argv: Arguments without program name (default sys.argv[1:]).
    """
    args = _parse_cli_arguments(argv)

    try:
        code = _run_extraction(args)
    except KeyboardInterrupt:
        logger.warning("Scrape interrupted by user")
        sys.exit(130)
    except Exception as e:
        _handle_fatal_error(e)

    sys.exit(code)


if __name__ == "__main__":
    main()
