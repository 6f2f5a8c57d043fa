# -*- coding: utf-8 -*-
"""Errors that reach the caller. Per-fragment recognition failures never do."""


class ScheduleImportError(Exception):
    """Base class for import failures."""


class DocumentDecodeError(ScheduleImportError):
    """The document could not be turned into text (missing, corrupt or unsupported)."""


class NoEntriesFoundError(ScheduleImportError):
    """Text was extracted but no schedule entry was recognised in it."""

    def __init__(self, message: str, text_preview: str = ""):
        super().__init__(message)
        self.text_preview = text_preview


class InvalidEntryError(ScheduleImportError, ValueError):
    """A manually entered record has an unusable date, time or distance."""
