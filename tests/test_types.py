import datetime as dt

import pytest

from chdriver.types import (
    InvalidUUIDFormatError,
    date_value,
    datetime_value,
    uuid_from_bytes,
    uuid_to_bytes,
)


def test_uuid_zero_round_trip():
    origin = "00000000-0000-0000-0000-000000000000"
    raw = uuid_to_bytes(origin)
    assert raw == bytes(16)
    assert uuid_from_bytes(raw) == origin


def test_uuid_to_bytes_known_value():
    text = "123e4567-e89b-12d3-a456-426655440000"
    assert uuid_to_bytes(text) == bytes.fromhex("123e4567e89b12d3a456426655440000")


def test_uuid_upper_case_is_accepted_and_formatted_lower():
    text = "ABCDEF01-2345-6789-ABCD-EF0123456789"
    assert uuid_from_bytes(uuid_to_bytes(text)) == text.lower()


@pytest.mark.parametrize(
    "text",
    [
        "123e4567xe89b-12d3-a456-426655440000",
        "123e4567-e89b-12d3-a456-42665544000g",
        "zz3e4567-e89b-12d3-a456-426655440000",
        "123e4567-e89b",
    ],
)
def test_uuid_to_bytes_rejects_bad_text(text):
    with pytest.raises(InvalidUUIDFormatError):
        uuid_to_bytes(text)


def test_uuid_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError, match="invalid UUID length: 3"):
        uuid_from_bytes(b"abc")


def test_uuid_from_bytes_accepts_string():
    assert uuid_from_bytes("0123456789abcdef") == "30313233-3435-3637-3839-616263646566"


def test_date_value_truncates_to_utc_midnight():
    moscow = dt.timezone(dt.timedelta(hours=3))
    value = dt.datetime(2017, 1, 1, 23, 30, 15, tzinfo=moscow)
    assert date_value(value) == dt.datetime(2017, 1, 1, tzinfo=dt.timezone.utc)


def test_date_value_accepts_plain_date():
    assert date_value(dt.date(2021, 7, 11)) == dt.datetime(
        2021, 7, 11, tzinfo=dt.timezone.utc
    )


def test_datetime_value_keeps_wall_clock_in_utc():
    zone = dt.timezone(dt.timedelta(hours=-5))
    value = dt.datetime(2017, 1, 1, 10, 20, 30, 999, tzinfo=zone)
    result = datetime_value(value)
    assert result == dt.datetime(2017, 1, 1, 10, 20, 30, tzinfo=dt.timezone.utc)
    assert result.microsecond == 0