"""Timezone-less date and datetime values, and UUIDs carried as 16 raw bytes."""

from __future__ import annotations

import datetime as _dt

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DASH_POSITIONS = (8, 13, 18, 23)
_BYTE_OFFSETS = (0, 2, 4, 6, 9, 11, 14, 16, 19, 21, 24, 26, 28, 30, 32, 34)


class InvalidUUIDFormatError(ValueError):
    """Raised when text is not a UUID in canonical 8-4-4-4-12 form."""

    def __init__(self, message: str = "invalid UUID format") -> None:
        super().__init__(message)


def date_value(value: _dt.date) -> _dt.datetime:
    """Keep only the calendar date of value, as midnight UTC.

    The date is read in value's own timezone; the zone itself is discarded.
    """
    return _dt.datetime(value.year, value.month, value.day, tzinfo=_dt.timezone.utc)


def datetime_value(value: _dt.datetime) -> _dt.datetime:
    """Keep the wall-clock date and time of value to the second, relabelled as UTC."""
    return _dt.datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        tzinfo=_dt.timezone.utc,
    )


def uuid_to_bytes(text: str) -> bytes:
    """Convert a canonical UUID string into its 16 bytes."""
    if len(text) < 36 or any(text[pos] != "-" for pos in _DASH_POSITIONS):
        raise InvalidUUIDFormatError()
    pairs = [text[offset:offset + 2] for offset in _BYTE_OFFSETS]
    if not all(set(pair) <= _HEX_DIGITS for pair in pairs):
        raise InvalidUUIDFormatError()
    return bytes(int(pair, 16) for pair in pairs)


def uuid_from_bytes(data: bytes | str) -> str:
    """Format 16 raw bytes (or a 16-byte string) as a lower-case canonical UUID."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if len(raw) != 16:
        raise ValueError(f"invalid UUID length: {len(raw)}")
    digits = raw.hex()
    return "-".join(
        (digits[:8], digits[8:12], digits[12:16], digits[16:20], digits[20:])
    )