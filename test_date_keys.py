"""Tests for day keys and the supported date range."""

from datetime import date, datetime, timedelta, timezone

import pytest

from date_keys import (
    InvalidKeyError,
    clamp_to_field,
    decode,
    encode,
    is_in_range,
    key_for,
)


def test_encode_pads_components():
    assert encode(date(2026, 2, 9)) == "2026-02-09"
    assert encode(date(1970, 1, 1)) == "1970-01-01"


def test_encode_drops_time_of_day():
    assert encode(datetime(2024, 3, 5, 0, 0)) == "2024-03-05"
    assert encode(datetime(2024, 3, 5, 23, 59, 59)) == "2024-03-05"


def test_encode_converts_aware_datetime_to_local_day():
    aware = datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))
    assert encode(aware) == encode(aware.astimezone())


def test_decode_returns_local_midnight():
    assert decode("2024-02-29") == datetime(2024, 2, 29, 0, 0)


@pytest.mark.parametrize("key", [
    "2024-2-29", "24-02-29", "2024/02/29", "2024-02-29T00:00", " 2024-02-29", "", "abcd-ef-gh",
    "2024-01-01\n", "٢٠٢٤-٠١-٠١",
])
def test_decode_rejects_malformed_keys(key):
    with pytest.raises(InvalidKeyError):
        decode(key)


def test_clamp_rejects_non_ascii_digits():
    with pytest.raises(InvalidKeyError):
        clamp_to_field("٢٠٢٤-٠١-٠١")


@pytest.mark.parametrize("key", ["2023-02-29", "2024-04-31", "2024-13-01", "2024-00-10", "2024-01-00"])
def test_decode_rejects_impossible_days(key):
    with pytest.raises(InvalidKeyError):
        decode(key)


def test_decode_rejects_non_strings():
    with pytest.raises(InvalidKeyError):
        decode(20240101)


def test_invalid_key_is_a_value_error():
    with pytest.raises(ValueError):
        decode("nope")


def test_round_trip_across_a_leap_year():
    day = date(2024, 1, 1)
    while day.year == 2024:
        assert decode(encode(day)).date() == day
        day += timedelta(days=1)


def test_keys_sort_in_date_order():
    days = [date(1999, 12, 31), date(2000, 1, 1), date(1970, 1, 2), date(2199, 6, 30)]
    assert sorted(encode(d) for d in days) == [encode(d) for d in sorted(days)]


def test_key_for_does_not_validate():
    assert key_for(2024, 2, 31) == "2024-02-31"


def test_range_bounds_are_inclusive():
    assert is_in_range(date(1970, 1, 1))
    assert is_in_range(date(2200, 1, 1))
    assert is_in_range(datetime(2200, 1, 1, 23, 0))
    assert not is_in_range(date(1969, 12, 31))
    assert not is_in_range(date(2200, 1, 2))


def test_clamp_to_field():
    assert clamp_to_field("2024-05-05") == "2024-05-05"
    assert clamp_to_field("1969-12-31") == "1970-01-01"
    assert clamp_to_field("2300-07-04") == "2200-01-01"
    with pytest.raises(InvalidKeyError):
        clamp_to_field("2024-05")
