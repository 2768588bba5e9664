from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

_logger = logging.getLogger(__name__)

# "9:00", "09:00", "09:00:00", "09:00:00.000"
_SLOT_TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2})(?::\d{1,2}(?:\.\d+)?)?$")


def format_slot_time(raw: Any) -> str:
    """Format a wire time string as zero-padded 24-hour HH:MM. Raises ValueError if malformed."""
    if not isinstance(raw, str):
        raise ValueError(f"Slot time must be a string, got {type(raw).__name__}")
    match = _SLOT_TIME_RE.match(raw.strip())
    if not match:
        raise ValueError(f"Unrecognized slot time: {raw!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Slot time out of range: {raw!r}")
    return f"{hour:02d}:{minute:02d}"


def normalize_slot_times(raw_times: Iterable[Any]) -> tuple[str, ...]:
    """Format every wire time, preserving order. Malformed entries are skipped."""
    times: list[str] = []
    for raw in raw_times:
        try:
            times.append(format_slot_time(raw))
        except ValueError as e:
            _logger.warning("Skipping malformed slot time", extra={"error": str(e)})
    return tuple(times)
