"""
Domain time utilities (pure).

Centralized timestamp format for audit records.

The audit trail is stamped in local wall-clock time. The domain never reads the
clock itself; timestamps are always passed in explicitly.
"""

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """
    Render a timestamp as `YYYY-MM-DD HH:MM:SS`.

    Sub-second precision and any timezone offset are dropped; the value is
    rendered as the wall-clock time it carries.
    """

    return value.strftime(TIMESTAMP_FORMAT)
