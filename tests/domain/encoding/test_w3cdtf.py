"""Tests for W3C-DTF date decoding."""
import datetime as dt

import pytest

from catalog_meta.domain.encoding.w3cdtf import decode_date, encode_date, parse_w3cdtf

UTC = dt.timezone.utc


@pytest.mark.parametrize("raw, expected", [
    ("2024", dt.datetime(2024, 1, 1, tzinfo=UTC)),
    ("2024-03", dt.datetime(2024, 3, 1, tzinfo=UTC)),
    ("2024-03-17", dt.datetime(2024, 3, 17, tzinfo=UTC)),
    ("2024-03-17T10:15Z", dt.datetime(2024, 3, 17, 10, 15, tzinfo=UTC)),
    ("2024-03-17T10:15:30Z", dt.datetime(2024, 3, 17, 10, 15, 30, tzinfo=UTC)),
    ("2024-03-17T10:15:30.123Z", dt.datetime(2024, 3, 17, 10, 15, 30, 123000, tzinfo=UTC)),
    ("2024-03-17T12:15:30+02:00", dt.datetime(2024, 3, 17, 10, 15, 30, tzinfo=UTC)),
    ("2024-03-17T10:15:30", dt.datetime(2024, 3, 17, 10, 15, 30, tzinfo=UTC)),
])
def test_parse_w3cdtf_profiles(raw, expected):
    assert parse_w3cdtf(raw) == expected


@pytest.mark.parametrize("raw", ["17.03.2024", "2024-13-01", "2024-02-30", "yesterday", "2024-03-17T25:00Z"])
def test_parse_w3cdtf_invalid(raw):
    assert parse_w3cdtf(raw) is None


def test_parse_w3cdtf_truncates_to_milliseconds():
    assert parse_w3cdtf("2024-03-17T10:15:30.1239Z").microsecond == 123000


def test_decode_date_uses_period_start():
    value = "start=2024-03-17T10:00:00Z; end=2024-03-17T11:00:00Z; scheme=W3C-DTF;"
    assert decode_date(value) == dt.datetime(2024, 3, 17, 10, tzinfo=UTC)


def test_decode_date_undecodable():
    assert decode_date("not a date") is None
    assert decode_date("name=only a name; scheme=W3C-DTF;") is None
    assert decode_date(None) is None


def test_encode_date():
    value = dt.datetime(2024, 3, 17, 10, 15, 30, 45000, tzinfo=UTC)
    assert encode_date(value) == "2024-03-17T10:15:30.045Z"
    assert encode_date(dt.datetime(2024, 1, 2)) == "2024-01-02T00:00:00.000Z"
    assert parse_w3cdtf(encode_date(value)) == value
