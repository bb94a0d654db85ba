"""Clock helpers."""

from __future__ import annotations

import datetime as dt
import math

from deploy_notifier.errors import ConfigurationError


def utcnow() -> dt.datetime:
    """Current timezone-aware datetime in UTC."""
    return dt.datetime.now(dt.timezone.utc)


def parse_slack_ts(ts: str) -> dt.datetime:
    """
    Interpret a Slack message timestamp as a UTC datetime.

    Example
    -------
    '1662768005.000200' → 2022-09-10 00:00:05.000200+00:00
    """
    try:
        seconds = float(ts)
        if not math.isfinite(seconds):
            raise ValueError("timestamp is not finite")
        return dt.datetime.fromtimestamp(seconds, tz=dt.timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        raise ConfigurationError(f"Invalid thread timestamp: {ts!r}") from exc


def elapsed_seconds(since: dt.datetime, now: dt.datetime) -> int:
    """Whole seconds between ``since`` and ``now``, regardless of order."""
    return int(abs((now - since).total_seconds()))
