"""Tests for numeric field extraction from quote payloads."""

import math

import pytest

from topflow.providers.base import FieldSource
from topflow.providers.twelvedata.fields import (
    JsonFieldSource,
    ScanFieldSource,
    extract_numeric_field,
    parse_leading_float,
)

# Trimmed Twelve Data /quote response
SAMPLE_QUOTE = (
    '{"symbol":"MSFT","name":"Microsoft Corp","exchange":"NASDAQ","currency":"USD",'
    '"open":"101.00","high":"103.00","low":"99.50","close":"102.00",'
    '"volume":"500000","previous_close":"100.00","change":"2.00",'
    '"percent_change":"1.50","average_volume":"250000","is_market_open":true}'
)


class TestParseLeadingFloat:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("123.45", 123.45),
            ("-7.5abc", -7.5),
            ("+3", 3.0),
            (".25,", 0.25),
            ("1e3}", 1000.0),
            ("2.5E-1", 0.25),
            ("12.", 12.0),
            ("  42", 42.0),
            ("1e", 1.0),
            ("", 0.0),
            ("abc", 0.0),
            ("-", 0.0),
        ],
    )
    def test_prefixes(self, text: str, expected: float) -> None:
        assert parse_leading_float(text) == expected

    def test_infinity(self) -> None:
        assert parse_leading_float("inf") == math.inf
        assert parse_leading_float("-Infinity") == -math.inf

    def test_nan(self) -> None:
        assert math.isnan(parse_leading_float("NaN"))


class TestExtractNumericField:
    def test_absent_key_returns_zero(self) -> None:
        assert extract_numeric_field(SAMPLE_QUOTE, '"dividend"') == 0.0

    def test_empty_payload(self) -> None:
        assert extract_numeric_field("", '"volume"') == 0.0

    @pytest.mark.parametrize(
        "payload",
        [
            "key: 123.45",
            "key:123.45",
            'key":"123.45"',
            'key " : " 123.45 trailing',
            "prefix key:::  123.45,next",
        ],
    )
    def test_separator_mixes(self, payload: str) -> None:
        assert extract_numeric_field(payload, "key") == 123.45

    def test_quoted_string_values(self) -> None:
        assert extract_numeric_field(SAMPLE_QUOTE, '"previous_close"') == 100.0
        assert extract_numeric_field(SAMPLE_QUOTE, '"change"') == 2.0
        assert extract_numeric_field(SAMPLE_QUOTE, '"percent_change"') == 1.5
        assert extract_numeric_field(SAMPLE_QUOTE, '"average_volume"') == 250000.0

    def test_quoted_key_does_not_match_suffix(self) -> None:
        # "volume" must not be found inside "average_volume"
        payload = '{"average_volume":"9","volume":"5"}'
        assert extract_numeric_field(payload, '"volume"') == 5.0

    def test_unquoted_key_matches_first_substring(self) -> None:
        # Plain substring search: a bare key hits the tail of "average_volume"
        payload = '{"average_volume":"9","volume":"5"}'
        assert extract_numeric_field(payload, "volume") == 9.0

    def test_first_occurrence_wins(self) -> None:
        payload = '{"change":"1.0","fifty_two_week":{"change":"5.0"}}'
        assert extract_numeric_field(payload, '"change"') == 1.0

    def test_non_numeric_value_returns_zero(self) -> None:
        assert extract_numeric_field('{"volume":null}', '"volume"') == 0.0

    def test_key_at_end_of_payload(self) -> None:
        assert extract_numeric_field('{"x":1,"volume"', '"volume"') == 0.0


class TestScanFieldSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(ScanFieldSource(SAMPLE_QUOTE), FieldSource)

    def test_missing_reads_zero(self) -> None:
        assert ScanFieldSource(SAMPLE_QUOTE).get('"missing"') == 0.0

    def test_reads_value(self) -> None:
        assert ScanFieldSource(SAMPLE_QUOTE).get('"volume"') == 500000.0


class TestJsonFieldSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(JsonFieldSource(SAMPLE_QUOTE), FieldSource)

    def test_reads_quoted_and_bare_keys(self) -> None:
        source = JsonFieldSource(SAMPLE_QUOTE)
        assert source.get('"volume"') == 500000.0
        assert source.get("average_volume") == 250000.0

    def test_numeric_json_values(self) -> None:
        source = JsonFieldSource('{"volume": 12, "change": -0.5}')
        assert source.get("volume") == 12.0
        assert source.get("change") == -0.5

    def test_missing_and_non_numeric(self) -> None:
        source = JsonFieldSource('{"name":"Microsoft","is_market_open":true,"obj":{}}')
        assert source.get("volume") is None
        assert source.get("name") is None
        assert source.get("is_market_open") is None
        assert source.get("obj") is None

    def test_undecodable_payload_reads_nothing(self) -> None:
        source = JsonFieldSource('{"volume": 12')
        assert source.get("volume") is None

    def test_non_object_payload(self) -> None:
        assert JsonFieldSource("[1, 2, 3]").get("volume") is None

    def test_ignores_nested_keys(self) -> None:
        source = JsonFieldSource('{"fifty_two_week":{"change":"5.0"}}')
        assert source.get("change") is None
