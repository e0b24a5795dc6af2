"""
Tests for the query value tokenizer.

Tests the Lark-based split of one raw value into operator -> values.
"""

import pytest

from mongoqs.parser import ValueTokenizer, tokenize, Operator, OperatorKind
from mongoqs.parser.grammar import get_grammar, operator_pattern


class TestValueTokenizer:
    """Tests for ValueTokenizer class."""

    @pytest.fixture
    def tokenizer(self):
        """Create a tokenizer instance."""
        return ValueTokenizer()

    def test_plain_value_is_equality(self, tokenizer):
        """A value with no operator belongs to eq."""
        assert tokenizer.tokenize("Alice") == {Operator.EQ: ["Alice"]}

    def test_plain_list_is_equality(self, tokenizer):
        """Separated values with no operator are all eq values."""
        assert tokenizer.tokenize("a,b,c") == {Operator.EQ: ["a", "b", "c"]}

    def test_two_operators(self, tokenizer):
        """Each operator collects the values that follow it."""
        result = tokenizer.tokenize("gt:1,lt:10")
        assert result == {Operator.GT: ["1"], Operator.LT: ["10"]}

    def test_list_operator(self, tokenizer):
        """Values after a list operator stay with it until the next operator."""
        result = tokenizer.tokenize("in:a,b,c")
        assert result == {Operator.IN: ["a", "b", "c"]}

    def test_leading_content_is_equality(self, tokenizer):
        """Content before the first operator token is assigned to eq."""
        result = tokenizer.tokenize("x,y,nin:1,2")
        assert result == {Operator.EQ: ["x", "y"], Operator.NIN: ["1", "2"]}

    def test_longest_operator_wins(self, tokenizer):
        """Operators sharing a prefix are told apart."""
        test_cases = [
            ("gte:5", Operator.GTE),
            ("gt:5", Operator.GT),
            ("lte:5", Operator.LTE),
            ("lt:5", Operator.LT),
            ("nin:5", Operator.NIN),
            ("in:5", Operator.IN),
            ("slike:5", Operator.SLIKE),
            ("elike:5", Operator.ELIKE),
            ("like:5", Operator.LIKE),
            ("ne:5", Operator.NE),
            ("all:5", Operator.ALL),
            ("eq:5", Operator.EQ),
        ]

        for raw, expected_op in test_cases:
            assert tokenizer.tokenize(raw) == {expected_op: ["5"]}, f"Failed for {raw}"

    def test_repeated_operator_accumulates(self, tokenizer):
        """A repeated operator appends in encounter order."""
        result = tokenizer.tokenize("in:1,gt:0,in:2")
        assert result[Operator.IN] == ["1", "2"]
        assert result[Operator.GT] == ["0"]
        assert list(result) == [Operator.IN, Operator.GT]

    def test_trailing_separator_discarded(self, tokenizer):
        """One trailing empty fragment is dropped."""
        assert tokenizer.tokenize("a,b,") == {Operator.EQ: ["a", "b"]}

    def test_interior_empty_fragment_kept(self, tokenizer):
        """Empty fragments between separators are kept."""
        assert tokenizer.tokenize("a,,b") == {Operator.EQ: ["a", "", "b"]}

    def test_operator_without_values(self, tokenizer):
        """A trailing operator token registers with no values."""
        result = tokenizer.tokenize("a,gt:")
        assert result == {Operator.EQ: ["a"], Operator.GT: []}

    def test_empty_value(self, tokenizer):
        """An empty raw value yields no values at all."""
        assert tokenizer.tokenize("") == {}

    def test_unknown_word_is_value(self, tokenizer):
        """A colon after an unrecognised word is part of the value."""
        assert tokenizer.tokenize("foo:bar") == {Operator.EQ: ["foo:bar"]}
        assert tokenizer.tokenize("gtx:1") == {Operator.EQ: ["gtx:1"]}

    def test_operator_found_inside_text(self, tokenizer):
        """Operator tokens partition the value wherever they occur."""
        assert tokenizer.tokenize("domain:x") == {Operator.EQ: ["doma"], Operator.IN: ["x"]}

    def test_operators_without_separator(self, tokenizer):
        """Adjacent operator segments need no separator between them."""
        assert tokenizer.tokenize("gt:1lt:10") == {Operator.GT: ["1"], Operator.LT: ["10"]}

    def test_text_after_operator_rescanned(self, tokenizer):
        """An operator token directly after another starts a new segment."""
        assert tokenizer.tokenize("eq:in:3") == {Operator.EQ: [], Operator.IN: ["3"]}

    def test_timestamp_after_operator(self, tokenizer):
        """Colons not preceded by an operator word stay in the value."""
        assert tokenizer.tokenize("gte:2021-01-01T15:00:00Z") == {
            Operator.GTE: ["2021-01-01T15:00:00Z"],
        }
        assert tokenizer.tokenize("2021-01-01T15:00:00Z") == {
            Operator.EQ: ["2021-01-01T15:00:00Z"],
        }

    def test_separator_before_operator_dropped(self, tokenizer):
        """Only the empty fragment ending each segment is discarded."""
        assert tokenizer.tokenize("a,,gt:1,") == {Operator.EQ: ["a", ""], Operator.GT: ["1"]}

    def test_whitespace_preserved(self, tokenizer):
        """Whitespace is part of the values."""
        assert tokenizer.tokenize("like:Hello, world") == {
            Operator.LIKE: ["Hello", " world"],
        }

    def test_operators_are_case_sensitive(self, tokenizer):
        """Only lowercase operator words are recognised."""
        assert tokenizer.tokenize("GT:1") == {Operator.EQ: ["GT:1"]}

    def test_fresh_result_per_call(self, tokenizer):
        """Mutating one result does not affect the next call."""
        first = tokenizer.tokenize("in:1,2")
        first[Operator.IN].append("3")
        assert tokenizer.tokenize("in:1,2") == {Operator.IN: ["1", "2"]}


class TestTokenizeFunction:
    """Tests for the shared tokenize() function."""

    def test_tokenize_convenience(self):
        """Module-level tokenize uses the shared parser."""
        assert tokenize("ne:x") == {Operator.NE: ["x"]}


class TestOperatorVocabulary:
    """Tests for operator metadata and grammar generation."""

    def test_operator_kinds(self):
        """Each operator maps to its coercion kind."""
        assert Operator.GT.kind == OperatorKind.COMPARISON
        assert Operator.IN.kind == OperatorKind.SET
        assert Operator.ALL.kind == OperatorKind.SET
        assert Operator.SLIKE.kind == OperatorKind.SEARCH

    def test_operator_token_and_predicate(self):
        """Token and predicate forms of an operator."""
        assert Operator.GTE.token == "gte:"
        assert Operator.GTE.predicate == "$gte"
        assert Operator.from_token("nin:") is Operator.NIN

    def test_grammar_lists_every_operator(self):
        """Generated grammar covers the whole vocabulary."""
        grammar = get_grammar()
        pattern = operator_pattern()
        assert pattern in grammar
        for op in Operator:
            assert op.value in pattern
        # Longer words precede their prefixes
        assert pattern.index("slike") < pattern.index("|like")
        assert pattern.index("gte") < pattern.index("gt|")
