# -*- coding: utf-8 -*-
"""
Time handling: HH:MM 24-hour strings, minutes since midnight and shift duration.

Duration is always derived from start/finish: a finish earlier than the start
wraps past midnight (22:00-06:00 = 8h), and the result is rounded up to the
configured step (3 minutes = 0.05h by default, so 7h01 -> 7.05).
"""

import re
from typing import Optional

from . import config

TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

MINUTES_PER_DAY = 24 * 60


def parse_time(s: str) -> Optional[int]:
    """Parse HH:MM or H:MM to minutes since midnight. Returns None if invalid."""
    if not s or not isinstance(s, str):
        return None
    m = TIME_RE.match(s.strip())
    if not m:
        return None
    h, mn = int(m.group(1)), int(m.group(2))
    if h > 23 or mn > 59:
        return None
    return h * 60 + mn


def format_time(minutes: int) -> str:
    """Minutes since midnight to HH:MM. Values past midnight wrap (1470 -> 00:30)."""
    minutes = max(minutes, 0) % MINUTES_PER_DAY
    h, mn = divmod(minutes, 60)
    return f"{h:02d}:{mn:02d}"


def normalize_time_str(s: str) -> Optional[str]:
    """'9:05' -> '09:05'. Returns None if the string is not a valid time of day."""
    m = parse_time(s)
    return format_time(m) if m is not None else None


def elapsed_minutes(start_min: int, finish_min: int) -> int:
    """Minutes from start to finish; finish before start means the next day."""
    if finish_min < start_min:
        finish_min += MINUTES_PER_DAY
    return finish_min - start_min


def round_up_hours(minutes: int, step_minutes: Optional[int] = None) -> float:
    """
    Minutes to hours rounded up to a multiple of step_minutes.
    Integer arithmetic so exact multiples (120 min) stay exact (2.0, not 2.05).
    The result is not rounded to decimals again: with a step that is not a
    divisor of 60 (7 min) that would round 14 min down to 0.23 h.
    """
    step = config.ROUNDING_STEP_MINUTES if step_minutes is None else step_minutes
    if step <= 0:
        return minutes / 60.0
    steps = -(-minutes // step)
    return steps * step / 60.0


def calculate_hours(start_time: str, finish_time: str, step_minutes: Optional[int] = None) -> float:
    """Total hours between two HH:MM strings. Missing or invalid times give 0."""
    start_min = parse_time(start_time)
    finish_min = parse_time(finish_time)
    if start_min is None or finish_min is None:
        return 0.0
    return round_up_hours(elapsed_minutes(start_min, finish_min), step_minutes)
