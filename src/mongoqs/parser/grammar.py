"""
MongoQS Grammar - Lark grammar for a single query parameter value.

A value is a run of text interleaved with operator tokens (``gt:``).
Operator tokens partition the value into segments; each segment is the
text from the end of one operator token to the start of the next, and is
later split on commas into individual values:

    gt:1,lt:10          -> gt [1], lt [10]
    in:a,b,c            -> in [a, b, c]
    Alice               -> eq [Alice]

Operator tokens are found anywhere in the value, with no regard for the
surrounding text, and the longest operator word wins. A colon in a value
that is preceded by an operator word (``domain:x`` contains ``in:``) is
therefore read as an operator token.
"""

import re

from mongoqs.parser.ast import Operator, OPERATOR_DELIMITER


def operator_pattern() -> str:
    """Regex matching any operator token, longest word first."""
    words = sorted((op.value for op in Operator), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(w) for w in words) + ")" + re.escape(OPERATOR_DELIMITER)


# OPERATOR outranks TEXT, and TEXT stops wherever an operator token starts
VALUE_GRAMMAR_TEMPLATE = r'''
start: (OPERATOR | TEXT)*

OPERATOR.2: /{operator}/
TEXT: /(?:(?!{operator})[\s\S])+/
'''


def get_grammar() -> str:
    """Return the query value grammar string for use with Lark."""
    return VALUE_GRAMMAR_TEMPLATE.format(operator=operator_pattern())
