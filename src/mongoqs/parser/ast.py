"""
MongoQS operator vocabulary.

The fixed set of operator words a query value may use, how each one
behaves during coercion, and the sign markers accepted by the sort and
projection parameters.
"""

from enum import Enum


# List separator between values, and between sort/projection tokens
SEPARATOR = ","

# Delimiter that terminates an operator word (e.g. "gt:")
OPERATOR_DELIMITER = ":"

# Prefix that turns an operator word into a backend predicate ("gt" -> "$gt")
PREDICATE_PREFIX = "$"


class OperatorKind(Enum):
    """How an operator consumes its values."""
    COMPARISON = "comparison"  # one operand
    SET = "set"                # list of operands
    SEARCH = "search"          # regex built from the joined values


class Operator(Enum):
    """
    Operator words of the query value grammar.

    - eq, ne, gt, gte, lt, lte: single-valued comparisons
    - in, nin, all: membership against a list of values
    - like, slike, elike: contains / starts with / ends with (string fields)
    """
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IN = "in"
    NIN = "nin"
    ALL = "all"
    LIKE = "like"
    SLIKE = "slike"
    ELIKE = "elike"

    @property
    def kind(self) -> OperatorKind:
        return _OPERATOR_KINDS[self]

    @property
    def token(self) -> str:
        """Operator as written in a query value, e.g. ``gte:``."""
        return self.value + OPERATOR_DELIMITER

    @property
    def predicate(self) -> str:
        """Operator as the backend expects it, e.g. ``$gte``."""
        return PREDICATE_PREFIX + self.value

    @classmethod
    def from_token(cls, token: str) -> "Operator":
        """Look up an operator by its grammar token (``gt:``) or bare word."""
        return cls(token.rstrip(OPERATOR_DELIMITER))


_OPERATOR_KINDS = {
    Operator.EQ: OperatorKind.COMPARISON,
    Operator.NE: OperatorKind.COMPARISON,
    Operator.GT: OperatorKind.COMPARISON,
    Operator.GTE: OperatorKind.COMPARISON,
    Operator.LT: OperatorKind.COMPARISON,
    Operator.LTE: OperatorKind.COMPARISON,
    Operator.IN: OperatorKind.SET,
    Operator.NIN: OperatorKind.SET,
    Operator.ALL: OperatorKind.SET,
    Operator.LIKE: OperatorKind.SEARCH,
    Operator.SLIKE: OperatorKind.SEARCH,
    Operator.ELIKE: OperatorKind.SEARCH,
}

# Predicate emitted for every search operator
REGEX_PREDICATE = PREDICATE_PREFIX + "regex"


class SortDirection(Enum):
    """Sort marker and the direction it selects."""
    ASC = "+"
    DESC = "-"

    @property
    def order(self) -> int:
        return 1 if self is SortDirection.ASC else -1


class ProjectionMarker(Enum):
    """Projection marker and its contribution to the projection sum."""
    INCLUDE = "+"
    EXCLUDE = "-"

    @property
    def weight(self) -> int:
        return 1 if self is ProjectionMarker.INCLUDE else -1


# Mapping produced by the tokenizer: operator -> raw value fragments
OperatorValueMap = dict[Operator, list[str]]
