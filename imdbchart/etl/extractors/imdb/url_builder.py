"""IMDb URL builder.

Validates chart URLs and resolves chart row links into
absolute detail page URLs.
"""

from urllib.parse import urljoin, urlsplit

from imdbchart.etl.extractors.imdb.client import InvalidChartURLError


class IMDBUrlBuilder:
    """Builds and validates URLs for IMDb scraping."""

    VALID_SCHEMES = ("http", "https")

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @classmethod
    def validate_chart_url(cls, chart_url: str) -> str:
        """Check that the chart URL is an absolute http(s) URL.

        Args:
            chart_url: Chart page URL from the command line.

        Returns:
            The URL, unchanged.

        Raises:
            InvalidChartURLError: If scheme or host is missing.
        """
        try:
            parts = urlsplit(chart_url)
        except ValueError as e:
            raise InvalidChartURLError(f"URL parse failed: {chart_url!r} ({e})") from e

        if parts.scheme.lower() not in cls.VALID_SCHEMES or not parts.netloc:
            raise InvalidChartURLError(
                f"URL parse failed: {chart_url!r} is not an absolute http(s) URL"
            )
        return chart_url

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    @classmethod
    def build_site_root(cls, chart_url: str) -> str:
        """Build the scheme://host/ root of a chart URL.

        Args:
            chart_url: Absolute chart URL.

        Returns:
            Site root with trailing slash, e.g. https://www.imdb.com/.
        """
        parts = urlsplit(cls.validate_chart_url(chart_url))
        return f"{parts.scheme}://{parts.netloc}/"

    @classmethod
    def build_full_url(cls, site_root: str, href: str) -> str:
        """Resolve a chart link against the site root.

        Args:
            site_root: Root from build_site_root.
            href: Link as found in the chart (usually /title/tt.../).

        Returns:
            Absolute URL. Absolute hrefs pass through unchanged.
        """
        return urljoin(site_root, href.strip())
