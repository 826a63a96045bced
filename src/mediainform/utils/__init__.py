"""Utility functions for mediainform."""

from .coerce import (
    ZERO_TIME,
    parse_bool,
    parse_float32,
    parse_timestamp,
    parse_unsigned,
    to_float32,
    to_lower_text,
    to_text,
)
from .timecode import decode, encode, key_to_timestamp

__all__ = [
    # Coercion
    "ZERO_TIME",
    "parse_bool",
    "parse_float32",
    "parse_timestamp",
    "parse_unsigned",
    "to_float32",
    "to_lower_text",
    "to_text",
    # Time codec
    "decode",
    "encode",
    "key_to_timestamp",
]
