from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from lap_counter.formatter import LongStyleFormatter
from lap_counter.projection import rowsFor, titleFor
from lap_counter.shared import LapRecord

T0 = datetime(2016, 8, 12, 15, 4, 5, tzinfo=timezone.utc)


def test_long_style_in_utc():
    formatter = LongStyleFormatter(timezone.utc)

    assert formatter.formatLongStyle(T0) == "3:04:05 PM UTC"


def test_long_style_morning_and_midnight():
    formatter = LongStyleFormatter(timezone.utc)

    assert formatter.formatLongStyle(T0.replace(hour=9)) == "9:04:05 AM UTC"
    assert formatter.formatLongStyle(T0.replace(hour=0)) == "12:04:05 AM UTC"


def test_long_style_converts_to_formatter_zone():
    try:
        helsinki = ZoneInfo("Europe/Helsinki")
    except ZoneInfoNotFoundError:
        pytest.skip("no timezone database")
    formatter = LongStyleFormatter(helsinki)

    assert formatter.formatLongStyle(T0) == "6:04:05 PM EEST"


def test_fixed_offsets_render_as_gmt():
    plus_two = LongStyleFormatter(timezone(timedelta(hours=2)))
    minus_half = LongStyleFormatter(timezone(timedelta(hours=-3, minutes=-30)))

    assert plus_two.formatLongStyle(T0) == "5:04:05 PM GMT+2"
    assert minus_half.formatLongStyle(T0) == "11:34:05 AM GMT-3:30"


def test_title_counts_every_lap():
    laps = tuple(LapRecord(time=T0) for _ in range(3))

    assert titleFor(()) == "0 laps"
    assert titleFor(laps[:1]) == "1 laps"
    assert titleFor(laps) == "3 laps"


def test_rows_are_most_recent_first():
    formatter = LongStyleFormatter(timezone.utc)
    laps = (
        LapRecord(time=T0),
        LapRecord(time=T0 + timedelta(seconds=1)),
        LapRecord(time=T0 + timedelta(seconds=2)),
    )

    assert rowsFor(laps, formatter) == [
        "3:04:07 PM UTC", "3:04:06 PM UTC", "3:04:05 PM UTC",
    ]


def test_row_text_does_not_depend_on_later_laps():
    formatter = LongStyleFormatter(timezone.utc)
    first = LapRecord(time=T0)
    laps = (first,)
    before = rowsFor(laps, formatter)[-1]

    for i in range(1, 5):
        laps = (*laps, LapRecord(time=T0 + timedelta(minutes=i)))

    assert rowsFor(laps, formatter)[-1] == before
