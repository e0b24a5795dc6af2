"""MongoQS Translator module - Maps query parameters to a QResult."""

from mongoqs.translator.result import QResult
from mongoqs.translator.assembler import (
    QueryParams,
    assemble,
    first_value,
    parse_projection,
    parse_sort,
    parse_count,
    lookup_value,
    default_value,
    resolve_value,
)
from mongoqs.translator.processor import QProcessor, new_processor

__all__ = [
    "QResult",
    "QProcessor",
    "new_processor",
    "QueryParams",
    "assemble",
    "first_value",
    "parse_projection",
    "parse_sort",
    "parse_count",
    "lookup_value",
    "default_value",
    "resolve_value",
]
