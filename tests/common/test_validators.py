from __future__ import annotations

from datetime import date, timedelta, time

import pytest

from src.attendance_journal.attendance_journal.common.datetime_utils import format_time, parse_iso_date
from src.attendance_journal.attendance_journal.common.validators import parse_bool, parse_int, require_fields
from src.attendance_journal.attendance_journal.core.exceptions import ValidationError


def test_require_fields_treats_empty_values_as_missing():
    require_fields({"a": "1", "b": 0}, ("a", "b"), "msg")

    for data in ({"a": "1"}, {"a": "1", "b": ""}, {"a": "1", "b": None}):
        with pytest.raises(ValidationError, match="msg"):
            require_fields(data, ("a", "b"), "msg")


def test_parse_int_rejects_bools_and_text():
    assert parse_int("42", "x") == 42
    assert parse_int(7, "x") == 7
    assert parse_int(" -3 ", "x") == -3
    for bad in (True, "4.2", "abc", None, [1], "--5", "\u00b2", "1_000"):
        with pytest.raises(ValidationError):
            parse_int(bad, "x")


def test_parse_bool_accepts_json_and_text_forms():
    assert parse_bool(True, "x") is True
    assert parse_bool(0, "x") is False
    assert parse_bool("TRUE", "x") is True
    with pytest.raises(ValidationError):
        parse_bool("yes", "x")


def test_parse_iso_date():
    assert parse_iso_date("2026-03-02") == date(2026, 3, 2)
    with pytest.raises(ValidationError):
        parse_iso_date("2026-02-30")


def test_format_time_handles_connector_timedelta():
    assert format_time(timedelta(hours=8, minutes=30)) == "08:30:00"
    assert format_time(time(10, 15)) == "10:15:00"
    assert format_time(None) is None
