# -*- coding: utf-8 -*-
"""
Segmentation: cut the cleaned text into one fragment per schedule entry.

Exported text often has no reliable line breaks (a Word document can come out
as a single line), so the only stable delimiter is the date anchor that opens
every entry: a three-letter day name followed by day/month, e.g. "Fri 2/1".
"""

import logging
import re
from typing import List, Optional

from . import config

logger = logging.getLogger(__name__)

# "Fri 2/1", "mon 12-1", "Tue 6 / 1"
RECORD_ANCHOR = re.compile(
    r"\b(" + "|".join(config.DAY_TOKENS) + r")\s*(\d{1,2})\s*[/\-]\s*(\d{1,2})\b",
    re.IGNORECASE,
)


def segment_records(text: str, min_length: Optional[int] = None) -> List[str]:
    """
    Returns the fragments in order of appearance. Each anchor starts a fragment
    that runs up to the next anchor; text before the first anchor is discarded.
    Fragments that are too short to hold a time range and a name are dropped.
    """
    if not text:
        return []
    threshold = config.MIN_FRAGMENT_LENGTH if min_length is None else min_length
    starts = [m.start() for m in RECORD_ANCHOR.finditer(text)]
    fragments: List[str] = []
    for idx, start in enumerate(starts):
        end = starts[idx + 1] if idx + 1 < len(starts) else len(text)
        fragment = text[start:end].strip()
        if len(fragment) <= threshold:
            logger.debug("Dropping short fragment: %r", fragment)
            continue
        fragments.append(fragment)
    logger.info("Segmented %d fragment(s) from %d anchor(s)", len(fragments), len(starts))
    return fragments
