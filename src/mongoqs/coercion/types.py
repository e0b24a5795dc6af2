# -*- encoding: utf-8 -*-
"""
Value parsers, one per field type.

Each parser takes one raw string and returns the typed value, or None
when the string is not valid for that type. A failed value is dropped by
the caller; it is never an error.
"""

import re
from datetime import datetime
from typing import Any, Callable, Optional

from bson import ObjectId
from bson.errors import InvalidId
from dateutil.parser import isoparse

from mongoqs.fields.field import QField, FieldType

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')

# Significant digits in INT64_MAX; anything longer is out of range
_INT64_DIGITS = len(str(INT64_MAX))

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(value: str, qfield: Optional[QField] = None) -> Optional[int]:
    """Signed base-10 integer that fits in 64 bits."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    # int() refuses very long digit strings, so range-check by length first
    if len(value.lstrip("+-").lstrip("0")) > _INT64_DIGITS:
        return None
    number = int(value)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def parse_float(value: str, qfield: Optional[QField] = None) -> Optional[float]:
    # float() tolerates surrounding whitespace and digit underscores
    if value != value.strip() or "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_bool(value: str, qfield: Optional[QField] = None) -> Optional[bool]:
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    return None


def parse_timestamp(value: str, qfield: Optional[QField] = None) -> Optional[datetime]:
    """
    Parse a timestamp.

    With no layouts configured on the field, the value must be RFC 3339,
    including its UTC offset. Otherwise each layout is tried in order and
    the first that parses wins.
    """
    layouts = qfield.time_layouts if qfield is not None else ()
    if layouts:
        for layout in layouts:
            try:
                return datetime.strptime(value, layout)
            except ValueError:
                continue
        return None

    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        return None
    return parsed


def parse_object_id(value: str, qfield: Optional[QField] = None) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


# Typed (non-string) field types and their parsers
Parser = Callable[[str, Optional[QField]], Any]

PARSERS: dict[FieldType, Parser] = {
    FieldType.INTEGER: parse_int,
    FieldType.FLOAT: parse_float,
    FieldType.BOOLEAN: parse_bool,
    FieldType.TIMESTAMP: parse_timestamp,
    FieldType.IDENTIFIER: parse_object_id,
}


def get_parser(field_type: FieldType) -> Optional[Parser]:
    """Return the parser for a typed field, or None for string-like types."""
    return PARSERS.get(field_type)
