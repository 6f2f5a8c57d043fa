# -*- coding: utf-8 -*-
"""
Import: raw schedule text (or a document) -> clean, merged list of WorkEntry.

clean -> segment -> recognise -> normalise -> split-shift pass -> merge.
Every call is independent; nothing is kept between imports.
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from .clean import clean_text
from .entities import WorkEntry, parse_miles, new_entry_id, recognize_fields
from .errors import InvalidEntryError, NoEntriesFoundError
from .ingest import extract_text
from .merge import merge_entries
from .normalize import adjust_split_shift_starts, apply_boundary_rules, to_work_entry
from .segment import segment_records
from .time_utils import calculate_hours, normalize_time_str

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 500

EXPECTED_FORMAT_HINT = (
    'Expected a date like "Fri 2/1", a time range like "09:00-11:00" '
    "and client names after the time."
)


@dataclass
class EntryTotals:
    """Totals over the entries marked as worked."""
    total_hours: float
    client_miles: float
    commute_miles: float
    entry_count: int


def import_text(
    text: str,
    today: Optional[date] = None,
    staff_marker: Optional[str] = None,
) -> List[WorkEntry]:
    """
    Runs the whole pipeline over one document's text. Fragments without a
    date or time range are skipped. Raises NoEntriesFoundError if none survive.
    """
    fragments = segment_records(clean_text(text))
    entries: List[WorkEntry] = []
    for fragment in fragments:
        fields = recognize_fields(fragment, staff_marker=staff_marker)
        if fields is None:
            continue
        try:
            entry = to_work_entry(fields, today=today)
        except ValueError:
            logger.debug("Invalid calendar date %d/%d in fragment: %r", fields.day, fields.month, fragment[:80])
            continue
        entries.append(entry)

    if not entries:
        preview = (text or "")[:PREVIEW_CHARS]
        raise NoEntriesFoundError(f"No valid entries found in document. {EXPECTED_FORMAT_HINT}", preview)

    logger.info("Recognised %d entries from %d fragments", len(entries), len(fragments))
    entries = adjust_split_shift_starts(entries)
    return merge_entries(entries)


def import_document(
    path: str | Path,
    today: Optional[date] = None,
    staff_marker: Optional[str] = None,
) -> List[WorkEntry]:
    """Decodes the document and imports its text. Decode failures raise DocumentDecodeError."""
    return import_text(extract_text(path), today=today, staff_marker=staff_marker)


def build_manual_entry(
    entry_date: date | str,
    client: str,
    start_time: str,
    finish_time: str,
    client_miles: float = 0.0,
    commute_miles: float = 0.0,
    worked: bool = True,
    entry_id: Optional[str] = None,
) -> WorkEntry:
    """
    Entry typed in by hand: no recognition, but the same time corrections and
    derived hours as imported entries. Pass entry_id when editing an existing entry.
    """
    if isinstance(entry_date, str):
        try:
            entry_date = date.fromisoformat(entry_date.strip())
        except ValueError as e:
            raise InvalidEntryError(f"Invalid date {entry_date!r}, expected YYYY-MM-DD") from e
    start = normalize_time_str(start_time)
    finish = normalize_time_str(finish_time)
    if start is None or finish is None:
        raise InvalidEntryError(f"Invalid time range {start_time!r}-{finish_time!r}, expected HH:MM")

    entry_date, start, finish = apply_boundary_rules(entry_date, start, finish)
    return WorkEntry(
        id=entry_id or new_entry_id(),
        date=entry_date,
        client=(client or "").strip(),
        start_time=start,
        finish_time=finish,
        total_hours=calculate_hours(start, finish),
        client_miles=parse_miles(client_miles, "Client miles"),
        commute_miles=parse_miles(commute_miles, "Commute miles"),
        worked=bool(worked),
    )


def summarize(entries: Iterable[WorkEntry]) -> EntryTotals:
    """Hours and miles of the worked entries only; unworked ones are listed but not counted."""
    hours = client_miles = commute_miles = 0.0
    count = 0
    for entry in entries:
        if not entry.worked:
            continue
        hours += entry.total_hours
        client_miles += entry.client_miles
        commute_miles += entry.commute_miles
        count += 1
    return EntryTotals(
        total_hours=round(hours, 2),
        client_miles=round(client_miles, 1),
        commute_miles=round(commute_miles, 1),
        entry_count=count,
    )
