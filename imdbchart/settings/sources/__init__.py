"""Data source settings.

Exports configuration classes for scraped sources:
- IMDb (Scraping)
"""

from imdbchart.settings.sources.imdb import IMDBSettings

__all__ = [
    "IMDBSettings",
]
