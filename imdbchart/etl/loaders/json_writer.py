"""JSON output writer.

Serializes movie records as a single-line JSON array.
"""

import json
import sys
from typing import TextIO

from imdbchart.etl.types import MovieRecord


class SerializationError(Exception):
    """Raised when records cannot be serialized to JSON."""

    pass


class JSONStdoutWriter:
    """Writes records to a text stream (stdout by default)."""

    name = "json_stdout"

    @staticmethod
    def dumps(records: list[MovieRecord]) -> str:
        """Serialize records to one JSON line.

        Args:
            records: Records in output order.

        Returns:
            JSON array string.

        Raises:
            SerializationError: If a record holds a non-serializable value.
        """
        try:
            return json.dumps(records, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"JSON serialization failed: {e}") from e

    def write(self, records: list[MovieRecord], stream: TextIO | None = None) -> int:
        """Write records as a single JSON line.

        Args:
            records: Records in output order.
            stream: Target stream (default sys.stdout).

        Returns:
            Number of records written.
        """
        output = self.dumps(records)
        target = stream if stream is not None else sys.stdout
        target.write(output + "\n")
        target.flush()
        return len(records)
