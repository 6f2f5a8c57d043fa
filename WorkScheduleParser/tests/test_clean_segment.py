# -*- coding: utf-8 -*-
"""Cleaning of boilerplate lines and segmentation into one fragment per entry."""

import logging
import sys
import types
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from schedule_pipeline import config
from schedule_pipeline.clean import clean_text, is_boilerplate, iter_clean_lines
from schedule_pipeline.segment import segment_records


def test_iter_clean_lines_is_lazy_and_filters():
    text = """
   Care Horizons - Staff Work Schedule
Coordinator: J Bloggs
   Fri 2/1 09:00-11:00 02:00 Larner, M Argo, B Day Support

DATE   TIME   DUR   STAFF   CLIENT
Page 2 of 5
-- 3 of 5 --
Status Selection: All
Staff providing care: Larner, M
Sat 3/1 10:00-12:00 02:00 Larner, M Preece, K Day Support
"""
    lines = iter_clean_lines(text)
    assert isinstance(lines, types.GeneratorType)
    assert list(lines) == [
        "Fri 2/1 09:00-11:00 02:00 Larner, M Argo, B Day Support",
        "Sat 3/1 10:00-12:00 02:00 Larner, M Preece, K Day Support",
    ]


def test_clean_never_alters_content():
    line = "Fri 2/1   09:00 - 11:00  02:00 Larner,  M Argo, B"
    assert clean_text("  " + line + "  \n") == line


def test_empty_input():
    assert list(iter_clean_lines("")) == []
    assert clean_text("") == ""


def test_header_row_needs_both_date_and_time():
    assert is_boilerplate("Date Time Client")
    assert not is_boilerplate("Date of birth on file")
    assert not is_boilerplate("Time sheet notes")


def test_phrases_match_case_sensitively():
    assert is_boilerplate("Visits: 4")
    assert not is_boilerplate("Home visits and shopping")
    assert is_boilerplate("date time dur staff client")
    assert is_boilerplate("DATE TIME DUR STAFF CLIENT")


def test_phrases_inside_an_entry_keep_the_line():
    lines = [
        "Fri 2/1 09:00-11:00 02:00 Larner, M Argo, B Home visits",
        "Sat 3/1 09:00-11:00 02:00 Larner, M Preece, K Coordinator meeting",
    ]
    assert list(iter_clean_lines("\n".join(lines))) == lines
    assert is_boilerplate("Coordinator: J Bloggs Fri 2/1 09:00-11:00 02:00 Larner, M Argo, B")


def test_dropped_line_with_entries_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="schedule_pipeline.clean")
    text = (
        "Staff Work Schedule Fri 2/1 09:00-11:00 02:00 Larner, M Argo, B Day Support "
        "Sat 3/1 10:00-12:00 02:00 Larner, M Preece, K Day Support"
    )
    assert clean_text(text) == ""
    assert "2 record anchor(s)" in caplog.text


def test_custom_phrases():
    assert is_boilerplate("ACME Rota", phrases=["acme rota"])
    assert not is_boilerplate("Staff Work Schedule", phrases=["acme rota"])


def test_configured_phrases_are_used(monkeypatch):
    monkeypatch.setattr(config, "BOILERPLATE_PHRASES", ("Week commencing",))
    assert is_boilerplate("Week commencing 5/1")
    assert not is_boilerplate("Care Horizons")


def test_segment_by_anchor_without_line_breaks():
    text = (
        "Schedule for Larner "
        "Fri 2/1 09:00-11:00 02:00 Larner, M Argo, B Day Support "
        "Sat 3/1 10:00-12:00 02:00 Larner, M Preece, K Day Support"
    )
    fragments = segment_records(text)
    assert fragments == [
        "Fri 2/1 09:00-11:00 02:00 Larner, M Argo, B Day Support",
        "Sat 3/1 10:00-12:00 02:00 Larner, M Preece, K Day Support",
    ]


def test_fragment_spans_lines_until_next_anchor():
    text = "Fri 2/1 09:00-11:00\n02:00 Larner, M\nArgo, B Day Support\nsun 4-1 08:00-09:00 01:00 Larner, M Preece, K"
    fragments = segment_records(text)
    assert len(fragments) == 2
    assert fragments[0].startswith("Fri 2/1")
    assert fragments[0].endswith("Argo, B Day Support")
    assert fragments[1].startswith("sun 4-1")


def test_short_fragments_dropped():
    text = "Fri 2/1 09:00-11:00 Sat 3/1 10:00-12:00 02:00 Larner, M Preece, K"
    fragments = segment_records(text)
    assert fragments == ["Sat 3/1 10:00-12:00 02:00 Larner, M Preece, K"]
    assert len(segment_records(text, min_length=5)) == 2


def test_no_anchor_no_fragments():
    assert segment_records("Nothing to see here, just a long line of text") == []
    assert segment_records("") == []
