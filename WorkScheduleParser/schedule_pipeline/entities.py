# -*- coding: utf-8 -*-
"""
Entities: the WorkEntry record and field recognition (date, time range, client)
inside one fragment.

Table columns are lost once the document is linearised, so the client name is
found by a chain of strategies tried in order; each returns a name or None to
pass to the next one. An empty client is acceptable, a wrong one is not, which
is why tokens carrying the staff member's surname are always skipped.
"""

import logging
import re
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional

from . import config
from .errors import InvalidEntryError
from .segment import RECORD_ANCHOR as RE_DATE
from .time_utils import calculate_hours, format_time, normalize_time_str

logger = logging.getLogger(__name__)

RE_TIME_RANGE = re.compile(r"(\d{1,2}):(\d{2})\s*-\s*(\d{1,2}):(\d{2})")
RE_DURATION_TOKEN = re.compile(r"^\d{1,2}:\d{2}$")
# "Argo, B" / "O'Neil,J" / "Smith-Jones , AB"
RE_CLIENT_NAME = re.compile(r"\b([A-Z][A-Za-z'\-]+)\s*,\s*([A-Z]{1,2})\b")

MAX_INITIAL_LENGTH = 3

FALSE_STRINGS = ("false", "0", "no")


def new_entry_id() -> str:
    return uuid.uuid4().hex


def parse_miles(value, label: str) -> float:
    try:
        miles = float(value or 0)
    except (TypeError, ValueError) as e:
        raise InvalidEntryError(f"{label} must be a number, got {value!r}") from e
    if miles < 0:
        raise InvalidEntryError(f"{label} cannot be negative")
    return miles


def _parse_worked(value) -> bool:
    # Stored records may carry "false"/"0" from a CSV round-trip
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def _stored_time(data: dict, key: str) -> str:
    value = normalize_time_str(data.get(key))
    if value is None:
        raise InvalidEntryError(f"Invalid {key} {data.get(key)!r}, expected HH:MM")
    return value


@dataclass(frozen=True)
class WorkEntry:
    """One worked shift: a day, a client and a time range with its derived hours."""
    date: date
    client: str
    start_time: str
    finish_time: str
    total_hours: float
    client_miles: float = 0.0
    commute_miles: float = 0.0
    worked: bool = True  # counted in submitted totals; set by the UI, never by parsing
    id: str = field(default_factory=new_entry_id)

    def to_dict(self) -> dict:
        """Record in the shape used by the UI and its storage."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "client": self.client,
            "startTime": self.start_time,
            "finishTime": self.finish_time,
            "totalHours": self.total_hours,
            "clientMiles": self.client_miles,
            "commuteMiles": self.commute_miles,
            "worked": self.worked,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkEntry":
        """
        Reads a stored record back. Times are normalised ("9:00" -> "09:00") and
        totalHours is recomputed, never trusted. Bad times or miles raise
        InvalidEntryError.
        """
        start = _stored_time(data, "startTime")
        finish = _stored_time(data, "finishTime")
        try:
            entry_date = date.fromisoformat(str(data["date"]).strip())
        except (KeyError, ValueError) as e:
            raise InvalidEntryError(f"Invalid date {data.get('date')!r}, expected YYYY-MM-DD") from e
        return cls(
            id=str(data.get("id") or new_entry_id()),
            date=entry_date,
            client=data.get("client") or "",
            start_time=start,
            finish_time=finish,
            total_hours=calculate_hours(start, finish),
            client_miles=parse_miles(data.get("clientMiles"), "Client miles"),
            commute_miles=parse_miles(data.get("commuteMiles"), "Commute miles"),
            worked=_parse_worked(data.get("worked")),
        )


@dataclass
class RecognizedFields:
    """Fields found in one fragment. The year is not known yet."""
    day: int
    month: int
    start_time: str
    finish_time: str
    client: str = ""


def _build_time(hour: str, minute: str) -> Optional[str]:
    h, m = int(hour), int(minute)
    if h > 23 or m > 59:
        return None
    return format_time(h * 60 + m)


def _clean_client(name: str) -> str:
    name = re.sub(r"\s+", " ", name).strip()
    return re.sub(r"[,\s]+$", "", name)


def _client_after_time(fragment: str, time_end: int, staff_marker: str) -> Optional[str]:
    """
    Walk the tokens after the time range: skip the duration column ("02:00") and
    the staff name; the first token with a comma is the client's surname, followed
    by the initial when the next token is short.
    """
    tokens = fragment[time_end:].split()
    marker = staff_marker.lower()
    for j, token in enumerate(tokens):
        if RE_DURATION_TOKEN.match(token):
            continue
        if marker and marker in token.lower():
            continue
        if "," in token:
            client = token
            if j + 1 < len(tokens) and len(tokens[j + 1]) <= MAX_INITIAL_LENGTH:
                client += " " + tokens[j + 1]
            return client
    return None


def _client_from_name_pattern(fragment: str, time_end: int, staff_marker: str) -> Optional[str]:
    """Fallback: first "Surname, I" anywhere in the fragment that is not the staff member."""
    marker = staff_marker.lower()
    for m in RE_CLIENT_NAME.finditer(fragment):
        if marker and marker in m.group(0).lower():
            continue
        return f"{m.group(1)}, {m.group(2)}"
    return None


ClientStrategy = Callable[[str, int, str], Optional[str]]

CLIENT_STRATEGIES: List[ClientStrategy] = [
    _client_after_time,
    _client_from_name_pattern,
]


def recognize_client(fragment: str, time_end: int, staff_marker: Optional[str] = None) -> str:
    marker = config.STAFF_NAME_MARKER if staff_marker is None else staff_marker
    for strategy in CLIENT_STRATEGIES:
        found = strategy(fragment, time_end, marker)
        if found:
            cleaned = _clean_client(found)
            if cleaned:
                return cleaned
    return ""


def recognize_fields(fragment: str, staff_marker: Optional[str] = None) -> Optional[RecognizedFields]:
    """
    Date, time range and client of one fragment, or None when the date or the
    time range is missing (the fragment is skipped, never an error).
    """
    dm = RE_DATE.search(fragment)
    if not dm:
        logger.debug("No date in fragment: %r", fragment[:80])
        return None
    tm = RE_TIME_RANGE.search(fragment)
    if not tm:
        logger.debug("No time range in fragment: %r", fragment[:80])
        return None
    start = _build_time(tm.group(1), tm.group(2))
    finish = _build_time(tm.group(3), tm.group(4))
    if start is None or finish is None:
        logger.debug("Invalid time range %r in fragment", tm.group(0))
        return None

    client = recognize_client(fragment, tm.end(), staff_marker)
    if not client:
        logger.debug("No client recognised in fragment: %r", fragment[:80])
    return RecognizedFields(
        day=int(dm.group(2)),
        month=int(dm.group(3)),
        start_time=start,
        finish_time=finish,
        client=client,
    )
