# -*- coding: utf-8 -*-
"""
Merging: entries with the same date and client are one real shift that the
source document split over several rows (usually at a page break).

The merged entry spans from the earliest start to the latest finish, sums the
miles of every row and takes everything else from the first row.
"""

import logging
from dataclasses import replace
from datetime import date
from typing import Dict, List, Tuple

from .entities import WorkEntry
from .time_utils import calculate_hours

logger = logging.getLogger(__name__)


def merge_key(entry: WorkEntry) -> Tuple[date, str]:
    return (entry.date, (entry.client or "").strip().lower())


def _merge_group(group: List[WorkEntry]) -> WorkEntry:
    first = group[0]
    earliest = min(e.start_time for e in group)
    latest = max(e.finish_time for e in group)
    return replace(
        first,
        start_time=earliest,
        finish_time=latest,
        total_hours=calculate_hours(earliest, latest),
        client_miles=sum(e.client_miles or 0 for e in group),
        commute_miles=sum(e.commute_miles or 0 for e in group),
    )


def merge_entries(entries: List[WorkEntry]) -> List[WorkEntry]:
    """
    At most one entry per (date, client) key, in order of first appearance.
    Keys seen once are returned as the same object, so merging twice is a no-op.
    """
    if not entries:
        return []
    groups: Dict[Tuple[date, str], List[WorkEntry]] = {}
    for entry in entries:
        groups.setdefault(merge_key(entry), []).append(entry)

    merged: List[WorkEntry] = []
    for key, group in groups.items():
        if len(group) == 1:
            merged.append(group[0])
            continue
        entry = _merge_group(group)
        logger.debug(
            "Merged %d entries for %s %r: %s-%s (%.2fh)",
            len(group), key[0], key[1], entry.start_time, entry.finish_time, entry.total_hours,
        )
        merged.append(entry)
    logger.info("Merge complete: %d entries -> %d entries", len(entries), len(merged))
    return merged
