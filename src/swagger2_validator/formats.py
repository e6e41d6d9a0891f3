"""Swagger 2.0 format registry.

Extends the draft-4 formats known to jsonschema with the data type
formats Swagger adds on top of JSON Schema:

- byte: base64 alphabet, padded
- date: YYYY-MM-DD shape, no calendar check
- double / float: anything that looks like a number
- int32 / int64: integral text that survives a signed 32/64 bit round trip
"""

import re
import struct
import sys

from jsonschema import Draft4Validator, FormatChecker

BYTE_RE = re.compile(r"^[A-Za-z0-9+/=]+$")
DATE_RE = re.compile(r"^(\d+)-(\d+)-(\d+)$")
INTEGER_RE = re.compile(r"^-?\d+(\.\d+)?$")
NUMBER_RE = re.compile(
    r"^\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)\s*$",
    re.IGNORECASE,
)

# struct codes for signed integers of a fixed width
INT32 = "<i"
INT64 = "<q"

NATIVE_INT64 = sys.maxsize > 2**32


def _as_text(value) -> str | None:
    # Formats only apply to strings and numbers; None means "not applicable".
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


def is_byte_string(value) -> bool:
    text = _as_text(value)
    return text is None or bool(BYTE_RE.match(text))


def is_date(value) -> bool:
    text = _as_text(value)
    return text is None or bool(DATE_RE.match(text))


def looks_like_number(value) -> bool:
    text = _as_text(value)
    return text is None or bool(NUMBER_RE.match(text))


def fits_integer(value, code: str) -> bool:
    """Check that value packs into the struct integer code without loss."""
    text = _as_text(value)
    if text is None:
        return True
    match = INTEGER_RE.match(text)
    if not match:
        return False
    if match.group(1):
        # a fractional part never survives the round trip
        return False
    number = int(text)
    try:
        (unpacked,) = struct.unpack(code, struct.pack(code, number))
    except struct.error:
        return False
    return text == str(unpacked)


def is_int32(value) -> bool:
    return fits_integer(value, INT32)


def is_int64(value) -> bool:
    return fits_integer(value, INT64)


def _unchecked(value) -> bool:
    return True


def swagger_formats() -> dict:
    """Format name to predicate; int64 is unchecked without native 64 bit ints."""
    return {
        "byte": is_byte_string,
        "date": is_date,
        "double": looks_like_number,
        "float": looks_like_number,
        "int32": is_int32,
        "int64": is_int64 if NATIVE_INT64 else _unchecked,
    }


def build_format_checker() -> FormatChecker:
    """Return a draft-4 FormatChecker extended with the Swagger formats."""
    checker = FormatChecker(formats=())
    checker.checkers.update(Draft4Validator.FORMAT_CHECKER.checkers)
    for name, predicate in swagger_formats().items():
        checker.checks(name)(predicate)
    return checker


# Built once at import time, read-only afterwards.
FORMAT_CHECKER = build_format_checker()
