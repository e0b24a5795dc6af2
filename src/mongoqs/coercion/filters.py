# -*- encoding: utf-8 -*-
"""
Filter fragment construction.

Turns one field's raw query value into the predicate mapping stored under
that field's key in QResult.filter:

    count  "gt:1,lt:10"        -> {"$gt": 1, "$lt": 10}
    name   "slike:Jo.hn"       -> {"$regex": Regex("^Jo\\.hn", "i")}
    id     "in:bad,6050e7..."  -> {"$in": [ObjectId("6050e7...")]}

Values that do not parse for the field's type are dropped. An operator
with no usable value is left out, and a field with no usable operator
produces no fragment at all.
"""

import logging
from typing import Any, Optional

from mongoqs.coercion.patterns import build_pattern
from mongoqs.coercion.types import get_parser
from mongoqs.fields.field import QField, FieldType
from mongoqs.parser.ast import (
    Operator,
    OperatorKind,
    OperatorValueMap,
    REGEX_PREDICATE,
    SEPARATOR,
)
from mongoqs.parser.tokenizer import tokenize

logger = logging.getLogger(__name__)

_MISSING = object()


def _coerce_string(op: Operator, values: list[str]) -> Any:
    if op.kind is OperatorKind.SET:
        kept = [v for v in values if v.strip()]
        return kept if kept else _MISSING
    # Comparisons match the literal text, separators included
    joined = SEPARATOR.join(values)
    return joined if joined.strip() else _MISSING


def _coerce_typed(qfield: QField, op: Operator, values: list[str]) -> Any:
    parse = get_parser(qfield.type)
    parsed = []
    for v in values:
        result = parse(v, qfield)
        if result is None:
            logger.debug("Dropping %r for %s field %r (%s)", v, qfield.type.value, qfield.key, op.value)
            continue
        parsed.append(result)

    if not parsed:
        return _MISSING
    if op.kind is OperatorKind.SET:
        return parsed
    # Several values for one comparison: the last valid one wins
    return parsed[-1]


def coerce(qfield: QField, op: Operator, values: list[str]) -> Any:
    """
    Coerce one operator's values for a field.

    Returns:
        A typed scalar (comparison), a typed list (set operator), a Regex
        (search operator), or None when nothing usable remains
    """
    if op.kind is OperatorKind.SEARCH:
        # A blank phrase would match every document
        if qfield.type is not FieldType.STRING or not SEPARATOR.join(values).strip():
            return None
        return build_pattern(op, values)

    if qfield.type in (FieldType.STRING, FieldType.META):
        result = _coerce_string(op, values)
    else:
        result = _coerce_typed(qfield, op, values)
    return None if result is _MISSING else result


def build_fragment(qfield: QField, op_values: OperatorValueMap) -> Optional[dict]:
    """
    Build a field's predicate mapping from already tokenized values.

    Args:
        qfield: Field being filtered
        op_values: Operator -> raw values, as produced by the tokenizer

    Returns:
        Predicate mapping, or None if no operator contributed
    """
    fragment: dict[str, Any] = {}
    contributions = 0
    for op, values in op_values.items():
        operand = coerce(qfield, op, values)
        if operand is None:
            continue
        contributions += 1
        predicate = REGEX_PREDICATE if op.kind is OperatorKind.SEARCH else op.predicate
        fragment[predicate] = operand

    if contributions == 0:
        return None
    return fragment


def build_filter(qfield: QField, raw_value: str) -> Optional[dict]:
    """Tokenize a raw query value and build the field's predicate mapping."""
    return build_fragment(qfield, tokenize(raw_value))
