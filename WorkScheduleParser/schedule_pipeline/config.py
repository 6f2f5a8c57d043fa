# -*- coding: utf-8 -*-
"""Central configuration: staff marker, boilerplate denylist, thresholds and time rules."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_RULES = {
    # Surname of the rostered staff member; appears next to every client on the schedule
    "staff_name_marker": "Larner",
    # Lines containing any of these phrases are headers, titles or summaries
    "boilerplate_phrases": [
        "Care Horizons",
        "Staff Work Schedule",
        "Coordinator",
        "Status Selection",
        "Staff providing care",
        "Visits",
        "date time dur",
    ],
    # A fragment needs more than this many characters to be considered an entry
    "min_fragment_length": 20,
    # Durations are rounded up to this many minutes (3 min = 0.05 h); 0 disables rounding
    "rounding_step_minutes": 3,
    # A January date goes to next year once the current month reaches this value
    "january_rollover_from_month": 12,
}


def _load_rules(json_path: Path | None = None) -> dict:
    """Loads schedule_rules.json if present; otherwise (or for bad values) uses defaults."""
    if json_path is None:
        json_path = Path(__file__).resolve().parent / "schedule_rules.json"
    result = dict(_DEFAULT_RULES)
    if not json_path.exists():
        return result
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring %s: %s", json_path, e)
        return result
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", json_path)
        return result

    marker = data.get("staff_name_marker")
    if isinstance(marker, str) and marker.strip():
        result["staff_name_marker"] = marker.strip()
    phrases = data.get("boilerplate_phrases")
    if isinstance(phrases, list) and all(isinstance(p, str) for p in phrases):
        result["boilerplate_phrases"] = [p for p in phrases if p.strip()]
    for key, low, high in (
        ("min_fragment_length", 0, 500),
        ("rounding_step_minutes", 0, 60),
        ("january_rollover_from_month", 1, 13),
    ):
        value = data.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and low <= value <= high:
            result[key] = value
    return result


RULES = _load_rules()

STAFF_NAME_MARKER = RULES["staff_name_marker"]
BOILERPLATE_PHRASES = tuple(RULES["boilerplate_phrases"])
MIN_FRAGMENT_LENGTH = RULES["min_fragment_length"]
ROUNDING_STEP_MINUTES = RULES["rounding_step_minutes"]
# 13 means "never": January dates always stay in the current year
JANUARY_ROLLOVER_FROM_MONTH = RULES["january_rollover_from_month"]

DAY_TOKENS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Fixed corrections for known quirks of the source scheduling system (not overridable).
# A shift starting at 23:00 is logged as 00:00 of the following day.
LATE_START_TIME = "23:00"
LATE_START_REPLACEMENT = "00:00"
# Finish-time substitutions
FINISH_TIME_CORRECTIONS = {
    "07:00": "08:00",
    "22:59": "23:59",
}
# Start time of the second half of a shift split across two rows
SPLIT_SHIFT_START = "07:00"
SPLIT_SHIFT_START_REPLACEMENT = "08:00"
