"""ETL data types package.

Usage:
    from imdbchart.etl.types import LinkEntry, MovieRecord
"""

from imdbchart.etl.types.imdb import LinkEntry, MovieFields, MovieRecord
from imdbchart.etl.types.pipeline import ETLResult, FanOutStats

__all__ = [
    # IMDb
    "LinkEntry",
    "MovieFields",
    "MovieRecord",
    # Pipeline
    "ETLResult",
    "FanOutStats",
]
