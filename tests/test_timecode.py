"""Tests for the HH:MM:SS.mmm time codec."""

import math

import pytest

from mediainform.utils import decode, encode, key_to_timestamp, to_float32


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "00:00:00.000"),
        (123.6, "00:02:03.600"),
        (3685.005, "01:01:25.005"),
        (4086.355, "01:08:06.355"),
    ],
)
def test_encode(seconds, expected):
    assert encode(seconds) == expected


def test_encode_single_precision_input():
    """Durations parsed as float32 still format to the intended millisecond."""
    assert encode(to_float32(4086.355)) == "01:08:06.355"
    assert encode(to_float32(3685.005)) == "01:01:25.005"


def test_encode_truncates_below_a_millisecond():
    assert encode(1.0009) == "00:00:01.000"


def test_encode_does_not_wrap_hours():
    assert encode(25 * 3600) == "25:00:00.000"


@pytest.mark.parametrize("seconds", [-1.0, math.nan, math.inf])
def test_encode_invalid_is_zero(seconds):
    assert encode(seconds) == "00:00:00.000"


@pytest.mark.parametrize(
    ("timestamp", "expected"),
    [
        ("00:00:00.000", 0),
        ("01:00:00.000", 3600),
        ("01:01:00.000", 3660),
        ("01:25:30.675", 5130.675),
    ],
)
def test_decode(timestamp, expected):
    assert decode(timestamp) == to_float32(expected)


@pytest.mark.parametrize("timestamp", ["", "00:00:00", "0:00:00.000", "00:00:00.5", "aa:bb:cc.ddd"])
def test_decode_invalid(timestamp):
    with pytest.raises(ValueError):
        decode(timestamp)


@pytest.mark.parametrize("timestamp", ["00:00:00.000", "00:01:47.607", "00:54:44.781", "01:08:06.355"])
def test_round_trip(timestamp):
    assert encode(decode(timestamp)) == timestamp


def test_key_to_timestamp():
    assert key_to_timestamp("_00_01_47_607") == "00:01:47.607"
    assert key_to_timestamp("_01_06_51_257") == "01:06:51.257"


@pytest.mark.parametrize("key", ["_00_01_47", "_00_01_47_6070", "_00_01_47_607_", "_aa_01_47_607", "00_01_47_607"])
def test_key_to_timestamp_invalid(key):
    with pytest.raises(ValueError):
        key_to_timestamp(key)
