# -*- coding: utf-8 -*-
"""Cleaning: trim lines and drop schedule boilerplate (titles, column headers, pagination)."""

import logging
import re
from typing import Iterable, Iterator, Optional

from . import config
from .segment import RECORD_ANCHOR

logger = logging.getLogger(__name__)

# "Page 3", "Page 3 of 7", "-- 2 of 5 --"
RE_PAGE_MARKER = re.compile(r"\bpage\s+\d+\b|--\s*\d+\s+of\s+\d+\s*--", re.IGNORECASE)
RE_DATE_TOKEN = re.compile(r"\bdate\b", re.IGNORECASE)
RE_TIME_TOKEN = re.compile(r"\btime\b", re.IGNORECASE)


def _contains_phrase(line: str, phrase: str) -> bool:
    """
    Phrases match case-sensitively ("Visits" is the summary line, "Home visits"
    is an activity). An all-lowercase phrase ("date time dur") ignores case.
    """
    if phrase.islower():
        return phrase in line.lower()
    return phrase in line


def is_boilerplate(line: str, phrases: Optional[Iterable[str]] = None) -> bool:
    """
    True if the line is a title, column header, pagination marker or summary line.

    Phrases and header tokens are only looked for ahead of the line's first
    record anchor: "Fri 2/1 ... Coordinator meeting" is an entry whose activity
    happens to contain a phrase. Pagination markers count anywhere.
    """
    if RE_PAGE_MARKER.search(line):
        return True
    anchor = RECORD_ANCHOR.search(line)
    head = line[:anchor.start()] if anchor else line
    for phrase in (config.BOILERPLATE_PHRASES if phrases is None else phrases):
        if phrase and _contains_phrase(head, phrase):
            return True
    # Column header row: "Date  Time  Dur  Staff  Client ..."
    return bool(RE_DATE_TOKEN.search(head) and RE_TIME_TOKEN.search(head))


def iter_clean_lines(text: str, phrases: Optional[Iterable[str]] = None) -> Iterator[str]:
    """
    Yields trimmed, non-empty lines that are not boilerplate. Content is never altered.

    Whole lines are dropped: when a document comes out as one long line that
    starts with a title, its entries go with it. Such drops are logged at INFO.
    """
    if not text:
        return
    if phrases is not None:
        phrases = tuple(phrases)
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if is_boilerplate(line, phrases):
            anchors = len(RECORD_ANCHOR.findall(line))
            if anchors:
                logger.info("Dropped boilerplate line holding %d record anchor(s): %r", anchors, line[:80])
            continue
        yield line


def clean_text(text: str, phrases: Optional[Iterable[str]] = None) -> str:
    return "\n".join(iter_clean_lines(text, phrases))
