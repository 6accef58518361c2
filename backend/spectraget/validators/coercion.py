"""Loose coercion helpers shared by the checkers.

Request payloads arrive from decoded query strings and JSON bodies, so the
checkers accept values loosely: numbers are parsed from a leading numeric
prefix, dates from several layouts, and non-string values are compared
through a plain text form.
"""

import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional

from spectraget.validators.reference_data import (
    DATE_FORMATS,
    FLOAT_PREFIX_PATTERN,
    INT_PREFIX_PATTERN,
    MAX_TIMESTAMP_MS,
    OBJECT_TEXT,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_number(value: Any) -> bool:
    """True for ints and floats; bools are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` for whole values."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def to_text(value: Any) -> str:
    """Plain text form of a payload value."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, dict):
        return OBJECT_TEXT
    return str(value)


def is_loosely_falsy(value: Any) -> bool:
    """Whether a value counts as absent: None, False, "", 0 or NaN.

    Empty lists and mappings are present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if is_number(value):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def parse_int_prefix(value: Any) -> Optional[int]:
    """Parse the leading base-10 integer of a value, or None if there is none."""
    match = INT_PREFIX_PATTERN.match(to_text(value))
    if not match:
        return None
    return int(match.group(1))


def parse_float_prefix(value: Any) -> Optional[float]:
    """Parse the leading decimal number of a value, or None if there is none."""
    match = FLOAT_PREFIX_PATTERN.match(to_text(value))
    if not match:
        return None
    return float(match.group(1).replace("Infinity", "inf"))


def _parse_date_text(text: str) -> Optional[float]:
    text = text.strip()
    if not text:
        return None

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = None

    if parsed is None:
        for fmt in DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - EPOCH).total_seconds() * 1000


def parse_date(value: Any) -> Optional[float]:
    """Interpret a value as a point in time, in epoch milliseconds.

    None is the epoch, numbers and bools are already epoch milliseconds,
    anything else is parsed from its text form (naive times are UTC).
    Returns None when the value is not a valid date.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool) or is_number(value):
        # Out-of-range ints are rejected before float() can overflow
        if isinstance(value, float) and math.isnan(value):
            return None
        if abs(value) > MAX_TIMESTAMP_MS:
            return None
        return float(value)
    return _parse_date_text(to_text(value))


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def ip_to_number(address: Any) -> float:
    """Fold a dotted-quad address into a signed 32-bit number.

    Each octet is shifted in with 32-bit wraparound and octets are not range
    checked. A non-numeric last octet yields NaN, which never compares as
    outside a range; a non-numeric earlier octet discards what came before it.
    """
    acc: float = 0
    for part in to_text(address).split("."):
        shifted = _to_int32(int(acc) if not math.isnan(acc) else 0) << 8
        octet = parse_int_prefix(part)
        acc = _to_int32(shifted) + octet if octet is not None else math.nan
    return acc
