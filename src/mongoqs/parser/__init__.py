"""MongoQS Parser module - Operator vocabulary, grammar, and value tokenizer."""

from mongoqs.parser.ast import (
    Operator,
    OperatorKind,
    OperatorValueMap,
    SortDirection,
    ProjectionMarker,
    SEPARATOR,
    REGEX_PREDICATE,
)
from mongoqs.parser.tokenizer import ValueTokenizer, TOKENIZER, tokenize

__all__ = [
    "ValueTokenizer",
    "TOKENIZER",
    "tokenize",
    "Operator",
    "OperatorKind",
    "OperatorValueMap",
    "SortDirection",
    "ProjectionMarker",
    "SEPARATOR",
    "REGEX_PREDICATE",
]
