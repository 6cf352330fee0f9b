"""Numeric field extraction for Twelve Data quote payloads.

Two `FieldSource` implementations:

- `ScanFieldSource` finds the key as a literal substring and parses the
  number that follows it. It does not care whether the match sits in a real
  key position, which makes it tolerant of truncated or non-JSON bodies.
- `JsonFieldSource` decodes the payload and reads top-level keys.
"""

from __future__ import annotations

import re
from typing import Any

import orjson

# Characters skipped between the end of a key and the start of its value
_SEPARATORS = ' :"'

# Leading numeric prefix, as accepted by C's atof
_NUMBER_PREFIX = re.compile(
    r"""
    \s*
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
        | inf(?:inity)?
        | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def parse_leading_float(text: str) -> float:
    """Parse the longest numeric prefix of `text`; 0.0 if there is none."""
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group().strip())


def extract_numeric_field(payload: str, key: str) -> float:
    """Pull the number that follows the first occurrence of `key` in `payload`.

    Example:
        extract_numeric_field('{"volume": "1234567"}', '"volume"') -> 1234567.0

    Returns 0.0 when the key is absent or no number follows it.
    """
    index = payload.find(key)
    if index < 0:
        return 0.0

    index += len(key)
    while index < len(payload) and payload[index] in _SEPARATORS:
        index += 1

    return parse_leading_float(payload[index:])


class ScanFieldSource:
    """Substring-scan field source. Absent fields read as 0.0."""

    def __init__(self, payload: str) -> None:
        self._payload = payload

    def get(self, key: str) -> float | None:
        return extract_numeric_field(self._payload, key)


class JsonFieldSource:
    """Structured field source backed by orjson.

    Keys may be passed quoted (`'"volume"'`) or bare (`'volume'`). Values that
    are missing or not numeric come back as None.
    """

    def __init__(self, payload: str) -> None:
        try:
            data = orjson.loads(payload)
        except orjson.JSONDecodeError:
            data = None
        self._data: dict[str, Any] = data if isinstance(data, dict) else {}

    def get(self, key: str) -> float | None:
        value = self._data.get(key.strip('"'))
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return None


FIELD_SOURCES: dict[str, type[ScanFieldSource] | type[JsonFieldSource]] = {
    "scan": ScanFieldSource,
    "json": JsonFieldSource,
}
