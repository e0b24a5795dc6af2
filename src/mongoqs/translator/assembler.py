# -*- encoding: utf-8 -*-
"""
Result Assembler - builds a QResult from raw query parameters.

Resolution for each declared field, in registry order:
1. the value under the field's key
2. otherwise the first alias with a non-empty value, in declaration order
3. otherwise the field's default supplier, if any
4. otherwise the field is skipped entirely

A client value that yields no usable filter also falls back to the
default, when the field has one.

A resolved meta field is copied verbatim into QResult.meta. Any other
resolved field may pick up projection and sort entries, then contributes
its filter fragment.
"""

import logging
from typing import Any, Mapping, Optional

from mongoqs.coercion.filters import build_filter
from mongoqs.coercion.types import parse_int
from mongoqs.fields.field import QField
from mongoqs.fields.registry import FieldRegistry
from mongoqs.parser.ast import ProjectionMarker, SortDirection, SEPARATOR
from mongoqs.translator.result import QResult

logger = logging.getLogger(__name__)

# Accepted parameter maps: plain str values, or lists of str (first one used)
QueryParams = Mapping[str, Any]


def first_value(params: QueryParams, name: str) -> str:
    """
    Return the first value for a parameter, or "" if there is none.

    Works with plain dicts, dicts of lists, and multi-dicts exposing
    ``getlist`` (werkzeug, starlette).
    """
    getlist = getattr(params, "getlist", None)
    if callable(getlist):
        values = getlist(name)
        return str(values[0]) if values else ""

    value = params.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return str(value[0]) if value else ""
    return str(value)


def _split_tokens(raw: str) -> list[str]:
    # URL decoding turns an unescaped "+" into a space, hence the strip
    return [t.strip() for t in raw.split(SEPARATOR) if t.strip()]


def parse_projection(raw: str) -> tuple[set[str], int]:
    """
    Parse the projection parameter.

    Every listed name shares one inclusion value: the sum of its markers
    (+1 for "+" or no marker, -1 for "-") starting from 1, clamped to
    0 or 1. Inclusion and exclusion cannot be mixed in one projection.

    Returns:
        Names listed (markers removed) and the clamped inclusion value
    """
    names = set()
    total = 1
    for token in _split_tokens(raw):
        marker = ProjectionMarker.INCLUDE
        for candidate in ProjectionMarker:
            if token.startswith(candidate.value):
                marker = candidate
                token = token[len(candidate.value):]
                break
        names.add(token)
        total += marker.weight
    return names, max(0, min(1, total))


def parse_sort(raw: str) -> dict[str, int]:
    """Parse the sort parameter into name -> 1 (ascending) / -1 (descending)."""
    sorts = {}
    for token in _split_tokens(raw):
        direction = SortDirection.ASC
        for candidate in SortDirection:
            if token.startswith(candidate.value):
                direction = candidate
                token = token[len(candidate.value):]
                break
        sorts[token] = direction.order
    return sorts


def parse_count(raw: str) -> int:
    """Parse limit/skip; anything but a non-negative integer means 0."""
    count = parse_int(raw)
    if count is None or count < 0:
        return 0
    return count


def lookup_value(qfield: QField, params: QueryParams) -> Optional[str]:
    """Find the value the client sent for a field, by key then aliases."""
    for name in qfield.names:
        value = first_value(params, name)
        if value:
            return value
    return None


def default_value(qfield: QField) -> Optional[str]:
    """Call a field's default supplier; an empty result counts as none."""
    if qfield.default is None:
        return None
    value = qfield.default()
    if value:
        logger.debug("Using default %r for field %r", value, qfield.key)
        return value
    return None


def resolve_value(qfield: QField, params: QueryParams) -> Optional[str]:
    """
    Find a field's raw value by key, then aliases, then default.

    Returns:
        The raw value in grammar syntax, or None if the field is absent
    """
    value = lookup_value(qfield, params)
    if value is None:
        value = default_value(qfield)
    return value


def assemble(registry: FieldRegistry, params: QueryParams) -> QResult:
    """
    Convert raw query parameters into a QResult.

    Parameters that match no declared field or reserved name are ignored.

    Args:
        registry: Validated field declarations
        params: Raw query parameters

    Returns:
        A new QResult; nothing is shared with earlier calls
    """
    reserved = registry.reserved
    result = QResult()

    projected, inclusion = parse_projection(first_value(params, reserved.projection))
    sorts = parse_sort(first_value(params, reserved.sort))
    result.limit = parse_count(first_value(params, reserved.limit))
    result.skip = parse_count(first_value(params, reserved.skip))

    sort_rank = {name: i for i, name in enumerate(sorts)}
    ranked_sorts = []

    for qfield in registry:
        supplied = lookup_value(qfield, params)
        value = supplied if supplied is not None else default_value(qfield)
        if value is None:
            logger.debug("Field %r not supplied, skipping", qfield.key)
            continue

        if qfield.is_meta:
            result.meta[qfield.key] = value
            continue

        if qfield.is_projectable and any(n in projected for n in qfield.names):
            result.projection[qfield.key] = inclusion

        if qfield.is_sortable:
            for name in qfield.names:
                if name in sorts:
                    ranked_sorts.append((sort_rank[name], qfield.key, sorts[name]))
                    break

        fragment = build_filter(qfield, value)
        if fragment is None and supplied is not None and qfield.has_default:
            # Nothing usable in what the client sent
            fallback = default_value(qfield)
            if fallback is not None:
                fragment = build_filter(qfield, fallback)
        if fragment is not None:
            result.filter[qfield.key] = fragment

    # Sort priority follows the order names were listed in
    for _, key, order in sorted(ranked_sorts):
        result.sort[key] = order

    return result
