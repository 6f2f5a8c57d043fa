# -*- coding: utf-8 -*-
"""Duration, year resolution and the fixed boundary-time corrections."""

import math
import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from schedule_pipeline import config
from schedule_pipeline.entities import RecognizedFields, WorkEntry
from schedule_pipeline.normalize import (
    adjust_split_shift_starts,
    apply_boundary_rules,
    resolve_year,
    to_work_entry,
)
from schedule_pipeline.time_utils import (
    calculate_hours,
    format_time,
    normalize_time_str,
    parse_time,
)


def test_same_day_duration_rounds_up_to_005():
    pairs = [("09:00", "11:00"), ("08:15", "16:40"), ("00:00", "23:59"), ("10:00", "10:01"), ("06:30", "07:00")]
    for start, finish in pairs:
        minutes = parse_time(finish) - parse_time(start)
        expected = math.ceil(minutes / 3) * 0.05
        assert calculate_hours(start, finish) == pytest.approx(expected)
        assert calculate_hours(start, finish) >= minutes / 60


def test_exact_hours_are_not_bumped():
    assert calculate_hours("09:00", "11:00") == 2.0
    assert calculate_hours("09:00", "16:01") == 7.05


def test_overnight_wrap():
    assert calculate_hours("22:00", "06:00") == 8.0
    assert calculate_hours("23:30", "00:15") == 0.75


def test_equal_or_missing_times():
    assert calculate_hours("09:00", "09:00") == 0.0
    assert calculate_hours("", "09:00") == 0.0
    assert calculate_hours("09:00", None) == 0.0


def test_rounding_can_be_disabled(monkeypatch):
    assert calculate_hours("09:00", "16:01", step_minutes=0) == pytest.approx(421 / 60, abs=1e-4)
    monkeypatch.setattr(config, "ROUNDING_STEP_MINUTES", 0)
    assert calculate_hours("09:00", "16:01") == pytest.approx(421 / 60, abs=1e-4)


def test_other_steps_never_round_down():
    for step in (1, 5, 7, 15, 60):
        for finish in ("09:01", "09:14", "10:59", "16:01"):
            minutes = parse_time(finish) - parse_time("09:00")
            assert calculate_hours("09:00", finish, step_minutes=step) >= minutes / 60
    assert calculate_hours("09:00", "09:14", step_minutes=7) == pytest.approx(14 / 60)
    assert calculate_hours("09:00", "09:15", step_minutes=7) == pytest.approx(21 / 60)
    assert calculate_hours("09:00", "09:20", step_minutes=15) == 0.5


def test_time_helpers():
    assert parse_time("7:05") == 425
    assert parse_time("24:00") is None
    assert parse_time("noon") is None
    assert format_time(1470) == "00:30"
    assert normalize_time_str(" 9:05 ") == "09:05"
    assert normalize_time_str("9.05") is None


def test_resolve_year():
    assert resolve_year(2, 1, today=date(2026, 6, 1)) == date(2026, 1, 2)
    assert resolve_year(2, 1, today=date(2026, 12, 1)) == date(2027, 1, 2)
    assert resolve_year(30, 12, today=date(2026, 12, 1)) == date(2026, 12, 30)
    with pytest.raises(ValueError):
        resolve_year(31, 2, today=date(2026, 6, 1))


def test_rollover_month_is_configurable(monkeypatch):
    monkeypatch.setattr(config, "JANUARY_ROLLOVER_FROM_MONTH", 11)
    assert resolve_year(2, 1, today=date(2026, 11, 3)) == date(2027, 1, 2)
    monkeypatch.setattr(config, "JANUARY_ROLLOVER_FROM_MONTH", 13)
    assert resolve_year(2, 1, today=date(2026, 12, 31)) == date(2026, 1, 2)


def test_late_start_moves_to_next_day():
    for finish in ("07:00", "09:00", "23:30"):
        d, start, _ = apply_boundary_rules(date(2026, 12, 31), "23:00", finish)
        assert d == date(2027, 1, 1)
        assert start == "00:00"


def test_finish_corrections():
    assert apply_boundary_rules(date(2026, 1, 2), "22:00", "07:00") == (date(2026, 1, 2), "22:00", "08:00")
    assert apply_boundary_rules(date(2026, 1, 2), "11:30", "22:59") == (date(2026, 1, 2), "11:30", "23:59")
    assert apply_boundary_rules(date(2026, 1, 2), "07:00", "09:00") == (date(2026, 1, 2), "07:00", "09:00")


def test_to_work_entry():
    fields = RecognizedFields(day=2, month=1, start_time="23:00", finish_time="07:00", client="Preece, K")
    entry = to_work_entry(fields, today=date(2026, 10, 19))
    assert entry.date == date(2026, 1, 3)
    assert (entry.start_time, entry.finish_time) == ("00:00", "08:00")
    assert entry.total_hours == 8.0
    assert (entry.client_miles, entry.commute_miles, entry.worked) == (0, 0, True)


def _entry(start, finish):
    return WorkEntry(
        date=date(2026, 1, 2),
        client="Argo, B",
        start_time=start,
        finish_time=finish,
        total_hours=calculate_hours(start, finish),
    )


def test_split_shift_start_skips_first_entry():
    entries = [_entry("07:00", "09:00"), _entry("22:00", "07:00"), _entry("07:00", "10:00")]
    adjusted = adjust_split_shift_starts(entries)
    assert adjusted[0] is entries[0]
    assert adjusted[1] is entries[1]
    assert adjusted[2].start_time == "08:00"
    assert adjusted[2].total_hours == 2.0
    assert adjusted[2].id == entries[2].id
    # input list untouched
    assert entries[2].start_time == "07:00"


def test_split_shift_on_empty_list():
    assert adjust_split_shift_starts([]) == []
