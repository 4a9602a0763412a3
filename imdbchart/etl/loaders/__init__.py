"""ETL loaders package.

Provides writers for emitting extracted records.
"""

from imdbchart.etl.loaders.json_writer import JSONStdoutWriter, SerializationError

__all__ = [
    "JSONStdoutWriter",
    "SerializationError",
]
