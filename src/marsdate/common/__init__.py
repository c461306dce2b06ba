"""Contains helpers shared by the conversion engine, logging, and the command line tool."""

from __future__ import annotations

from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a timestamp for `dt` that can be embedded in a file name.

    Args:
        dt: The date and time to stamp. Defaults to now.

    Returns:
        `dt` in ISO format, without colons or decimal points.
    """
    if dt is None:
        dt = datetime.now()
    return dt.isoformat().replace(":", "-").replace(".", "")
