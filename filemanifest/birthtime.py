"""Creation-time lookup and ISO-8601 conversion for manifest entries."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

_CTIME_FALLBACK_REPORTED = False


def file_birthtime(stat_result: os.stat_result) -> float:
    """Return creation time in epoch seconds for ``stat_result``.

    Uses ``st_birthtime`` where the platform reports it. Otherwise falls back
    to ``st_ctime`` (inode change time on POSIX) and logs the substitution
    once per process.
    """
    global _CTIME_FALLBACK_REPORTED

    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    if not _CTIME_FALLBACK_REPORTED:
        _CTIME_FALLBACK_REPORTED = True
        logger.debug("st_birthtime unavailable on this platform; using st_ctime as creation time")
    return float(stat_result.st_ctime)


def format_birthtime(timestamp: float) -> str:
    """Format epoch seconds as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_birthtime(value: str) -> datetime:
    """Parse a formatted birthtime back into an aware UTC datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
