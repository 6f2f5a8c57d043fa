# -*- coding: utf-8 -*-
"""Pipeline: schedule document text -> merged list of work entries."""

from .clean import iter_clean_lines, clean_text
from .segment import segment_records
from .entities import WorkEntry, RecognizedFields, recognize_fields
from .normalize import resolve_year, apply_boundary_rules, adjust_split_shift_starts
from .time_utils import calculate_hours
from .merge import merge_entries, merge_key
from .ingest import extract_text
from .importer import import_text, import_document, build_manual_entry, summarize, EntryTotals
from .errors import ScheduleImportError, DocumentDecodeError, NoEntriesFoundError, InvalidEntryError

__all__ = [
    "iter_clean_lines",
    "clean_text",
    "segment_records",
    "WorkEntry",
    "RecognizedFields",
    "recognize_fields",
    "resolve_year",
    "apply_boundary_rules",
    "adjust_split_shift_starts",
    "calculate_hours",
    "merge_entries",
    "merge_key",
    "extract_text",
    "import_text",
    "import_document",
    "build_manual_entry",
    "summarize",
    "EntryTotals",
    "ScheduleImportError",
    "DocumentDecodeError",
    "NoEntriesFoundError",
    "InvalidEntryError",
]
