from __future__ import annotations

from datetime import date, time, timedelta
from pathlib import Path

import pytest

from attendance_tracker.common.datetime_utils import format_hhmm, sunday_based_weekday
from attendance_tracker.database.bootstrap import _strip_create_db_and_use, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def test_schema_splits_into_table_statements():
    sql = _strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))

    assert len(statements) == 3
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_semicolon_inside_quotes_is_kept():
    statements = list(iter_sql_statements("INSERT INTO t VALUES ('a;b');\nSELECT 1;"))

    assert statements == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


@pytest.mark.parametrize(
    "value,expected",
    [
        (time(9, 5), "09:05"),
        (timedelta(hours=14, minutes=30), "14:30"),
        ("8:00", "08:00"),
        ("08:00:00", "08:00"),
    ],
)
def test_format_hhmm(value, expected):
    assert format_hhmm(value) == expected


def test_format_hhmm_rejects_garbage():
    with pytest.raises(ValueError):
        format_hhmm("noon")


def test_sunday_based_weekday():
    assert sunday_based_weekday(date(2026, 2, 1)) == 0  # Sunday
    assert sunday_based_weekday(date(2026, 2, 7)) == 6  # Saturday
