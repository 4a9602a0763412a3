"""ETL pipeline data types.

TypedDict definitions for extraction results and run statistics.
"""

from typing import NotRequired, TypedDict


class ETLResult(TypedDict):
    """Result of an ETL extraction step."""

    source: str
    success: bool
    count: int
    errors: NotRequired[list[str]]
    duration_seconds: NotRequired[float]
    requested: NotRequired[int]
    dispatched: NotRequired[int]
    failed: NotRequired[int]


class FanOutStats(TypedDict):
    """Counters of one fan-out batch."""

    dispatched: int
    succeeded: int
    failed: int
