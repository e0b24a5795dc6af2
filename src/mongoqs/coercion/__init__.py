"""
MongoQS Coercion module.

Converts raw query values into typed filter operands:
- Per-type value parsers (integer, float, boolean, timestamp, ObjectId)
- Escaped, case-insensitive search patterns for string fields
- Filter fragment assembly with drop-on-failure semantics
"""

from mongoqs.coercion.types import (
    parse_int,
    parse_float,
    parse_bool,
    parse_timestamp,
    parse_object_id,
    get_parser,
)
from mongoqs.coercion.patterns import build_pattern
from mongoqs.coercion.filters import coerce, build_fragment, build_filter

__all__ = [
    # Parsers
    "parse_int",
    "parse_float",
    "parse_bool",
    "parse_timestamp",
    "parse_object_id",
    "get_parser",
    # Patterns
    "build_pattern",
    # Filters
    "coerce",
    "build_fragment",
    "build_filter",
]
