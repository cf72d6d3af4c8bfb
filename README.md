# chdriver

The client-side parts of a driver for a columnar database server. It has no
third-party dependencies.

## Modules

- `chdriver.query_settings` picks known per-query server settings out of a
  URL query string or a mapping of parameters. Call `parse_query_settings` to
  get a `QuerySettings`. Each known setting has a `SettingType`: `UINT`,
  `INT`, `BOOL` or `TIME`. The full list is in `QUERY_SETTINGS`.
  - Empty or absent values are skipped.
  - Numeric values must be unsigned 64-bit integers. Boolean values accept
    `1/t/T/true/True/TRUE` and `0/f/F/false/False/FALSE`. Anything else
    raises `ValueError`.
  - `QuerySettings.serialize()` returns the wire encoding. For each setting it
    writes a varint-length name followed by a varint value. `is_empty()` tells
    whether any settings were found. The `text` attribute holds the accepted
    settings as `name=value` pairs joined with `&`.
  - `encode_uvarint` and `encode_string` are the encoders used by `serialize()`.
- `chdriver.result` holds `Result`, the result of a statement that returns no
  rows.
  - `last_insert_id()` and `rows_affected()` raise `NotSupportedError` unless
    you passed a value for them when you created the `Result`.
- `chdriver.word_matcher` holds `WordMatcher`. It is a case-insensitive
  automaton: you feed it one character at a time with `match()`, and it
  returns `True` when the whole word has just been seen.
  - `contains_word(haystack, needle)` runs a matcher over a whole string.
- `chdriver.tls_config` is a process-wide, thread-safe registry of TLS
  configuration objects, kept by name. Use `register_tls_config`,
  `deregister_tls_config` and `get_tls_config`.
- `chdriver.types` converts date and time values and UUIDs.
  - `date_value` keeps the calendar date as midnight UTC.
  - `datetime_value` keeps the wall-clock time to the second and relabels it
    as UTC.
  - `uuid_to_bytes` turns a canonical UUID string into 16 bytes. If the text
    is in the wrong form it raises `InvalidUUIDFormatError`, a `ValueError`.
  - `uuid_from_bytes` turns 16 bytes back into lower-case canonical text. Any
    other length raises `ValueError`.
- `chdriver.rows` holds `Rows`, which iterates over a stream of
  `(BlockKind, Block)` pairs.
  - A `Block` is column-major: `values[column][row]`.
  - Data blocks are read in order and empty blocks are skipped.
  - Totals and extremes blocks are kept aside. You reach them through
    `has_next_result_set()` and `next_result_set()`.
  - You can read rows with `next_row()` or by iterating over the `Rows`
    object.
  - `close()` drains the stream and calls the optional `finish` callback once.
  - `Rows` works as a context manager.

## Installation

```
pip install .
```

## Examples

```python
from chdriver.query_settings import encode_uvarint, parse_query_settings
from chdriver.rows import Block, BlockKind, Rows
from chdriver.types import uuid_from_bytes, uuid_to_bytes
from chdriver.word_matcher import contains_word

settings = parse_query_settings("max_threads=4&extremes=true")
assert settings.text == "max_threads=4&extremes=true"
payload = settings.serialize()

assert encode_uvarint(300) == b"\xac\x02"
assert contains_word("select * from test", "sElEct")

raw = uuid_to_bytes("123e4567-e89b-12d3-a456-426655440000")
assert uuid_from_bytes(raw) == "123e4567-e89b-12d3-a456-426655440000"

block = Block(values=[[1, 2], ["a", "b"]])
with Rows(["id", "name"], [(BlockKind.DATA, block)]) as rows:
    assert list(rows) == [(1, "a"), (2, "b")]
```

## What it does not do

This package does not open network connections and does not speak the
server's native protocol. It does not send queries, bind statement parameters
or decode blocks from the wire. `Rows` reads blocks that the caller has
already received and decoded. The TLS registry only stores configuration
objects and does nothing else with them. There is no command-line tool.

## Tests

```
pip install .[test]
pytest
```