"""
Search pattern construction for like / slike / elike.

Client text is always escaped, so a search value can only ever match
itself literally.
"""

import re

from bson.regex import Regex

from mongoqs.parser.ast import Operator, SEPARATOR

CASE_INSENSITIVE = "i"

_ANCHORS = {
    Operator.LIKE: ("", ""),
    Operator.SLIKE: ("^", ""),
    Operator.ELIKE: ("", "$"),
}


def build_pattern(kind: Operator, values: list[str]) -> Regex:
    """
    Build a case-insensitive search regex.

    Args:
        kind: One of Operator.LIKE, Operator.SLIKE, Operator.ELIKE
        values: Raw fragments; rejoined with the separator into one phrase

    Returns:
        bson Regex with the "i" flag

    Example:
        >>> build_pattern(Operator.SLIKE, ["Jo.hn"]).pattern
        '^Jo\\\\.hn'
    """
    start, end = _ANCHORS[kind]
    phrase = re.escape(SEPARATOR.join(values))
    return Regex(start + phrase + end, CASE_INSENSITIVE)
