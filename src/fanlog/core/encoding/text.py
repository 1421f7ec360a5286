"""Text rendering helpers shared by the drivers."""

from collections.abc import Mapping
from datetime import datetime


def format_timestamp(
    timestamp: float, time_format: str | None = None, timespec: str = "milliseconds"
) -> str:
    """Render a Unix timestamp in local time with its UTC offset.

    Args:
        timestamp: Unix timestamp in seconds.
        time_format: strftime pattern. When unset the result is ISO-8601 with
            a ``+HH:MM`` offset, e.g. ``2024-05-01T12:30:00.125+02:00``.
        timespec: Precision of the ISO-8601 default, as accepted by
            ``datetime.isoformat``. Ignored when time_format is given.
    """
    moment = datetime.fromtimestamp(timestamp).astimezone()
    if time_format is None:
        return moment.isoformat(timespec=timespec)
    return moment.strftime(time_format)


def format_attributes(attributes: Mapping[str, str]) -> str:
    """Render attributes as ``k=v, k=v`` in insertion order."""
    return ", ".join(f"{key}={value}" for key, value in attributes.items())
