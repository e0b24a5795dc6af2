"""
MongoQS Tokenizer - splits one raw query value into operator -> values.

The Lark parser is compiled once, at import time, and shared by every
call; parsing keeps no state between calls.
"""

from lark import Lark, Transformer

from mongoqs.parser.grammar import get_grammar
from mongoqs.parser.ast import Operator, OperatorValueMap, SEPARATOR


class ValueTransformer(Transformer):
    """
    Lark Transformer that folds a parsed value into an OperatorValueMap.
    """

    def OPERATOR(self, token):
        return Operator.from_token(str(token))

    def TEXT(self, token):
        return str(token)

    def start(self, items):
        # (operator, text) per segment; leading text belongs to eq
        segments = []
        for item in items:
            if isinstance(item, Operator):
                segments.append([item, ""])
            elif segments:
                segments[-1][1] += item
            else:
                segments.append([Operator.EQ, item])

        result: OperatorValueMap = {}
        for op, text in segments:
            fragments = text.split(SEPARATOR)
            # Separator right before the next operator, or at the very end
            if fragments[-1] == "":
                fragments.pop()
            # "a,gt:" still names gt, with nothing to compare against
            result.setdefault(op, []).extend(fragments)

        return result


class ValueTokenizer:
    """
    Tokenizer for query parameter values.

    Example:
        tokenizer = ValueTokenizer()
        tokenizer.tokenize("gt:1,lt:10")
        # {Operator.GT: ["1"], Operator.LT: ["10"]}
    """

    def __init__(self):
        self._parser = Lark(
            get_grammar(),
            parser='lalr',
            lexer='contextual',
            transformer=ValueTransformer(),
        )

    def tokenize(self, raw_value: str) -> OperatorValueMap:
        """
        Split a raw value into operator tokens and their value fragments.

        Content before the first operator token, or the whole value when
        there is none, belongs to ``eq``. Repeated operators accumulate
        their values in encounter order.

        Args:
            raw_value: A single query parameter value

        Returns:
            Fresh mapping of Operator to raw value fragments
        """
        return self._parser.parse(raw_value)


# Shared by every processor
TOKENIZER = ValueTokenizer()


def tokenize(raw_value: str) -> OperatorValueMap:
    """Convenience function using the shared tokenizer."""
    return TOKENIZER.tokenize(raw_value)
