# -*- coding: utf-8 -*-
"""Ingest: read a PDF, Word or plain-text schedule and return its raw text."""

import logging
from pathlib import Path
from typing import List

import docx
import pdfplumber
from docx.oxml.ns import qn
from docx.table import Table, _Row
from docx.text.paragraph import Paragraph

from .errors import DocumentDecodeError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt")


def extract_text_from_pdf(pdf_path: str | Path) -> str:
    """Text of every page, pages joined by newlines."""
    parts: List[str] = []
    try:
        with pdfplumber.open(pdf_path) as pdf:
            for i, page in enumerate(pdf.pages):
                text = page.extract_text()
                if text:
                    parts.append(text)
                else:
                    logger.debug("Page %d has no extractable text", i + 1)
    except Exception as e:
        raise DocumentDecodeError(f"Failed to read PDF {pdf_path}: {e}") from e
    return "\n".join(parts)


def _row_text(row: _Row) -> str:
    # A horizontally merged cell appears in row.cells once per grid column it spans
    cells: List[str] = []
    previous = None
    for cell in row.cells:
        if previous is not None and cell._tc is previous:
            continue
        previous = cell._tc
        text = cell.text.strip()
        if text:
            cells.append(text)
    return " ".join(cells)


def extract_text_from_docx(docx_path: str | Path) -> str:
    """
    Paragraphs and schedule tables in document order, one line per table row
    (cells joined by spaces) so each row keeps its date, times and names together.
    """
    try:
        document = docx.Document(str(docx_path))
    except Exception as e:
        raise DocumentDecodeError(f"Failed to read Word document {docx_path}: {e}") from e
    lines: List[str] = []
    for child in document.element.body.iterchildren():
        if child.tag == qn("w:p"):
            lines.append(Paragraph(child, document).text)
        elif child.tag == qn("w:tbl"):
            lines.extend(_row_text(row) for row in Table(child, document).rows)
    return "\n".join(lines)


def extract_text(path: str | Path) -> str:
    """
    Raw text of a schedule document, chosen by file suffix.
    Raises DocumentDecodeError if no text can be produced.
    """
    path = Path(path)
    if not path.exists():
        raise DocumentDecodeError(f"Document not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        text = extract_text_from_pdf(path)
    elif suffix == ".docx":
        text = extract_text_from_docx(path)
    elif suffix == ".txt":
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise DocumentDecodeError(f"Failed to read {path}: {e}") from e
    else:
        raise DocumentDecodeError(
            f"Unsupported document type {suffix or '(none)'}; expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )
    if not text.strip():
        raise DocumentDecodeError(f"No extractable text in {path} (scanned or empty document?)")
    logger.info("Extracted %d characters from %s", len(text), path.name)
    return text
