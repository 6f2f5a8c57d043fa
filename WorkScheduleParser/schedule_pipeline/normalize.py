# -*- coding: utf-8 -*-
"""
Normalisation: give recognised fields a concrete year and apply the fixed time
corrections of the source scheduling system.

- 23:00 start  -> 00:00 of the following day
- 07:00 finish -> 08:00
- 22:59 finish -> 23:59
- on import, a 07:00 start on any entry but the first -> 08:00 (second half of
  a shift the source split across two rows)
"""

import logging
from dataclasses import replace
from datetime import date, timedelta
from typing import List, Optional, Tuple

from . import config
from .entities import RecognizedFields, WorkEntry
from .time_utils import calculate_hours

logger = logging.getLogger(__name__)


def resolve_year(day: int, month: int, today: Optional[date] = None) -> date:
    """
    Schedules print day/month only. The year is the current one, except that a
    January date seen from the rollover month (December) belongs to next year.
    Raises ValueError for impossible dates (31/2).
    """
    today = today or date.today()
    year = today.year
    if month == 1 and today.month >= config.JANUARY_ROLLOVER_FROM_MONTH:
        year += 1
    return date(year, month, day)


def apply_boundary_rules(entry_date: date, start_time: str, finish_time: str) -> Tuple[date, str, str]:
    """Applies the literal-time corrections independently of each other."""
    if start_time == config.LATE_START_TIME:
        logger.debug("Start %s on %s moved to %s next day", start_time, entry_date, config.LATE_START_REPLACEMENT)
        start_time = config.LATE_START_REPLACEMENT
        entry_date = entry_date + timedelta(days=1)
    corrected = config.FINISH_TIME_CORRECTIONS.get(finish_time)
    if corrected:
        logger.debug("Finish %s moved to %s", finish_time, corrected)
        finish_time = corrected
    return entry_date, start_time, finish_time


def to_work_entry(fields: RecognizedFields, today: Optional[date] = None) -> WorkEntry:
    """Builds an imported entry: miles default to 0 and worked to True."""
    entry_date = resolve_year(fields.day, fields.month, today)
    entry_date, start, finish = apply_boundary_rules(entry_date, fields.start_time, fields.finish_time)
    return WorkEntry(
        date=entry_date,
        client=fields.client,
        start_time=start,
        finish_time=finish,
        total_hours=calculate_hours(start, finish),
    )


def adjust_split_shift_starts(entries: List[WorkEntry]) -> List[WorkEntry]:
    """
    Second pass over the imported list, in document order: every entry after
    the first that starts at 07:00 starts at 08:00 instead, hours recomputed.
    """
    result: List[WorkEntry] = entries[:1]
    for entry in entries[1:]:
        if entry.start_time == config.SPLIT_SHIFT_START:
            new_start = config.SPLIT_SHIFT_START_REPLACEMENT
            logger.debug("Split shift on %s: start %s -> %s", entry.date, entry.start_time, new_start)
            entry = replace(
                entry,
                start_time=new_start,
                total_hours=calculate_hours(new_start, entry.finish_time),
            )
        result.append(entry)
    return result
