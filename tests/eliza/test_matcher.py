"""Tests for the core pattern matcher.

Covers literal matching, single-element variables, binding consistency,
failure propagation and case sensitivity.
"""

import pytest

from eliza import ElizaBindings, ElizaMatcher, ElizaList, ElizaNumber, ElizaString, ElizaSymbol, symbols


class TestLiteralMatching:
    """Patterns without variables match only structurally equal input."""

    @pytest.mark.parametrize("pattern,text", [
        ("()", "()"),
        ("(hello)", "(hello)"),
        ("(hello there)", "(hello there)"),
        ("(a (b c) d)", "(a (b c) d)"),
        ('(say "NO" 3)', '(say "NO" 3)'),
    ])
    def test_equal_literals_match_without_bindings(self, matcher, helpers, pattern, text):
        """Test equal literal patterns return the bindings unchanged."""
        helpers.assert_matches(matcher, pattern, text, {})

    @pytest.mark.parametrize("pattern,text", [
        ("(hello)", "(goodbye)"),
        ("(hello there)", "(there hello)"),
        ("(hello)", "(hello there)"),
        ("(hello there)", "(hello)"),
        ("()", "(hello)"),
        ("(hello)", "()"),
        ("(a (b c))", "(a (b d))"),
        ("(Hello)", "(hello)"),
        ('("3")', "(3)"),
    ])
    def test_unequal_literals_fail(self, matcher, helpers, pattern, text):
        """Test any structural difference makes a literal pattern fail."""
        helpers.assert_no_match(matcher, pattern, text)

    def test_success_with_no_bindings_is_distinct_from_failure(self, matcher):
        """Test an empty result is a bindings value, not None."""
        result = matcher.match(symbols("hi"), symbols("hi"))
        assert result is not None
        assert isinstance(result, ElizaBindings)
        assert len(result) == 0

        assert matcher.match(symbols("hi"), symbols("bye")) is None

    def test_atoms_compare_by_value(self, matcher):
        """Test atomic tokens of different kinds do not match each other."""
        assert matcher.match(ElizaNumber(3), ElizaNumber(3)) is not None
        assert matcher.match(ElizaNumber(3), ElizaString("3")) is None
        assert matcher.match(ElizaSymbol("a"), ElizaList((ElizaSymbol("a"),))) is None


class TestVariableMatching:
    """Single-element variables bind exactly one element."""

    def test_single_variable_binds_one_token(self, matcher, helpers):
        """Test (?v) against (x) binds ?v to x."""
        helpers.assert_matches(matcher, "(?v)", "(x)", {"?v": "x"})

    def test_single_variable_rejects_two_tokens(self, matcher, helpers):
        """Test (?v) against (x y) fails."""
        helpers.assert_no_match(matcher, "(?v)", "(x y)")

    def test_single_variable_rejects_empty_input(self, matcher, helpers):
        """Test (?v) against () fails."""
        helpers.assert_no_match(matcher, "(?v)", "()")

    def test_bare_variable_binds_whole_input(self, matcher, read):
        """Test a bare variable at top level binds the entire input."""
        result = matcher.match(ElizaSymbol("?all"), read("(a b c)"))
        assert result is not None
        assert result["?all"] == read("(a b c)")

    def test_variables_among_literals(self, matcher, helpers):
        """Test variables bind the elements at their positions."""
        helpers.assert_matches(matcher, "(?x is ?y)", "(sky is blue)", {"?x": "sky", "?y": "blue"})
        helpers.assert_no_match(matcher, "(?x is ?y)", "(sky was blue)")

    def test_variable_binds_nested_list_element(self, matcher, helpers):
        """Test a variable binds a whole nested element."""
        helpers.assert_matches(matcher, "(a ?x)", "(a (b c))", {"?x": ["b", "c"]})

    def test_variable_inside_nested_pattern(self, matcher, helpers):
        """Test variables inside nested pattern lists bind inside nested input."""
        helpers.assert_matches(matcher, "(a (?x c) ?y)", "(a (b c) d)", {"?x": "b", "?y": "d"})

    def test_question_mark_alone_is_literal(self, matcher, helpers):
        """Test a lone ? is an ordinary symbol, not a variable."""
        helpers.assert_matches(matcher, "(why ?)", "(why ?)", {})
        helpers.assert_no_match(matcher, "(why ?)", "(why not)")

    def test_variable_matches_numbers_and_strings(self, matcher, helpers):
        """Test variables bind any kind of token."""
        helpers.assert_matches(matcher, '(?n ?s)', '(42 "hi")', {"?n": 42, "?s": "hi"})


class TestBindingConsistency:
    """A variable seen twice must bind equal values."""

    def test_repeated_variable_with_equal_values(self, matcher, helpers):
        """Test (?v ?v) against (a a) binds ?v once."""
        helpers.assert_matches(matcher, "(?v ?v)", "(a a)", {"?v": "a"})

    def test_repeated_variable_with_different_values(self, matcher, helpers):
        """Test (?v ?v) against (a b) fails."""
        helpers.assert_no_match(matcher, "(?v ?v)", "(a b)")

    def test_existing_bindings_constrain_match(self, matcher):
        """Test bindings passed in are honoured."""
        bindings = ElizaBindings().bind("?v", ElizaSymbol("a"))
        assert matcher.match(symbols("?v"), symbols("a"), bindings) is bindings
        assert matcher.match(symbols("?v"), symbols("b"), bindings) is None

    def test_failed_bindings_propagate(self, matcher):
        """Test matching under failed bindings fails without further work."""
        assert matcher.match(symbols("a"), symbols("a"), None) is None
        assert matcher.match(ElizaSymbol("?x"), symbols("a"), None) is None

    def test_match_does_not_mutate_input_bindings(self, matcher):
        """Test the bindings passed in are never changed."""
        bindings = ElizaBindings().bind("?a", ElizaSymbol("one"))
        result = matcher.match(symbols("?b"), symbols("two"), bindings)

        assert result is not None
        assert bindings.names() == ["?a"]
        assert result.names() == ["?a", "?b"]


class TestRepeatability:
    """Matching is deterministic and keeps no hidden state."""

    def test_fresh_empty_bindings_behave_identically(self, matcher, read):
        """Test constructing empty bindings several times gives the same result."""
        pattern = read("((?* ?x) I want (?* ?y))")
        value = read("(well I want a dog)")

        results = [matcher.match(pattern, value, ElizaBindings()) for _ in range(3)]
        results.append(matcher.match(pattern, value))

        assert all(result == results[0] for result in results)
        assert results[0] is not None

    def test_default_bindings_are_new_each_call(self, matcher):
        """Test calls without bindings never share a starting store."""
        first = matcher.match(symbols("hi"), symbols("hi"))
        second = matcher.match(symbols("hi"), symbols("hi"))

        assert first == ElizaBindings()
        assert first is not second

    def test_changing_a_result_does_not_affect_later_calls(self, matcher):
        """Test altering one result's dictionary leaves later default matches alone."""
        first = matcher.match(symbols("hi"), symbols("hi"))
        assert first is not None
        first.bindings["?x"] = ElizaSymbol("a")

        result = matcher.match(ElizaSymbol("?x"), ElizaSymbol("b"))
        assert result is not None
        assert result.to_python() == {"?x": "b"}

    def test_separate_matchers_agree(self, read):
        """Test two matchers give identical answers."""
        pattern = read("((?* ?x) b (?* ?y))")
        value = read("(a b c b)")
        assert ElizaMatcher().match(pattern, value) == ElizaMatcher().match(pattern, value)


class TestCaseSensitivity:
    """Case handling is a matcher option."""

    def test_case_sensitive_by_default(self, matcher, helpers):
        """Test the default matcher distinguishes case."""
        helpers.assert_no_match(matcher, "(HELLO)", "(hello)")

    def test_case_insensitive_literals(self, helpers):
        """Test a case-insensitive matcher ignores symbol case."""
        helpers.assert_matches(ElizaMatcher(case_sensitive=False), "(HELLO there)", "(hello THERE)", {})

    def test_case_insensitive_anchor_search(self, helpers):
        """Test segment anchors are found ignoring case."""
        helpers.assert_matches(
            ElizaMatcher(case_sensitive=False),
            "((?* ?x) i want (?* ?y))",
            "(I WANT cake)",
            {"?x": [], "?y": ["cake"]}
        )

    def test_case_insensitive_binding_consistency(self, helpers):
        """Test repeated variables accept values differing only in case."""
        helpers.assert_matches(ElizaMatcher(case_sensitive=False), "(?v ?v)", "(Yes yes)", {"?v": "Yes"})

    def test_strings_stay_case_sensitive(self, helpers):
        """Test only symbols are folded, strings compare exactly."""
        helpers.assert_no_match(ElizaMatcher(case_sensitive=False), '("NO")', '("no")')

    def test_values_equal(self):
        """Test values_equal on nested lists."""
        insensitive = ElizaMatcher(case_sensitive=False)
        assert insensitive.values_equal(symbols("A", "b"), symbols("a", "B"))
        assert not insensitive.values_equal(symbols("a"), symbols("a", "b"))
        assert not ElizaMatcher().values_equal(symbols("A"), symbols("a"))
