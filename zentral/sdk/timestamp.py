"""Date-time codec for the Zentral API.

Zentral serializes date-times without a zone designator and with
microsecond precision, e.g. ``2022-07-22T01:02:03.444444``. Values are
naive datetimes in UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

TIMESTAMP_LAYOUT = "%Y-%m-%dT%H:%M:%S.%f"


def parse_timestamp(value: str) -> datetime:
    """Parse a Zentral date-time string.

    The microsecond part is optional. A ``Z`` suffix or an explicit offset
    is accepted and converted to a naive UTC datetime.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Format a datetime using the Zentral wire layout."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime(TIMESTAMP_LAYOUT)


def _validate(value: Any) -> Any:
    if isinstance(value, str):
        return parse_timestamp(value)
    return value


Timestamp = Annotated[
    datetime,
    BeforeValidator(_validate),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]
