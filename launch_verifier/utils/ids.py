"""Analysis id and timestamp helpers.

Kept free of pipeline state so a different clock or id source can be
swapped in without touching the analysis code.
"""

from __future__ import annotations

import itertools
import threading
import time
from datetime import UTC, datetime

_counter = itertools.count(1)
_counter_lock = threading.Lock()


def new_analysis_id(now_ms: int | None = None) -> str:
    """Return a process-unique id: ``analysis_<epoch ms>_<sequence>``.

    The sequence number makes two ids minted in the same millisecond differ.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    with _counter_lock:
        seq = next(_counter)
    return f"analysis_{now_ms}_{seq}"


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 UTC with a trailing Z, second precision."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def utc_now() -> datetime:
    return datetime.now(UTC)
