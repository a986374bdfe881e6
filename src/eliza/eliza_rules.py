"""Rule tables and first-match rule selection."""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import List, Tuple

from eliza.eliza_bindings import ElizaBindings
from eliza.eliza_classifier import SEGMENT_TAG, is_variable, pattern_variables
from eliza.eliza_error import ElizaRuleError, ErrorMessageBuilder
from eliza.eliza_matcher import ElizaMatcher
from eliza.eliza_parser import ElizaParser
from eliza.eliza_printer import ElizaPrinter
from eliza.eliza_tokenizer import ElizaTokenizer
from eliza.eliza_value import ElizaValue, ElizaSymbol, ElizaList


@dataclass(frozen=True)
class ElizaRule:
    """A pattern with one or more alternative response templates."""
    pattern: ElizaList
    responses: Tuple[ElizaList, ...]


@dataclass(frozen=True)
class ElizaRuleMatch:
    """The first rule that matched an input, with its bindings."""
    rule: ElizaRule
    bindings: ElizaBindings
    index: int


@dataclass(frozen=True)
class ElizaRuleTable:
    """
    Ordered, immutable collection of rules.

    Order is priority: earlier rules are tried first.
    """
    rules: Tuple[ElizaRule, ...] = ()

    @classmethod
    def from_forms(cls, forms: List[ElizaValue]) -> "ElizaRuleTable":
        """
        Build a rule table from parsed (pattern response...) forms.

        Args:
            forms: Parsed rule forms

        Returns:
            Validated rule table

        Raises:
            ElizaRuleError: If any rule is malformed
        """
        validator = ElizaRuleValidator()
        rules = tuple(validator.validate_rule(form, number) for number, form in enumerate(forms, 1))
        logging.getLogger("ElizaRuleTable").debug("Loaded %d rules", len(rules))
        return cls(rules)

    @classmethod
    def from_source(cls, source: str) -> "ElizaRuleTable":
        """
        Parse a rule table from S-expression source.

        Args:
            source: Source text holding any number of (pattern response...) forms

        Returns:
            Validated rule table

        Raises:
            ElizaTokenError: If the source cannot be tokenized
            ElizaParseError: If the source cannot be parsed
            ElizaRuleError: If any rule is malformed
        """
        tokens = ElizaTokenizer().tokenize(source)
        forms = ElizaParser(tokens, source).parse_all()
        return cls.from_forms(forms)

    @classmethod
    def from_file(cls, path: str | Path) -> "ElizaRuleTable":
        """
        Load a rule table from a UTF-8 source file.

        Args:
            path: Path to the rule file

        Returns:
            Validated rule table

        Raises:
            OSError: If the file cannot be read
            ElizaTokenError: If the source cannot be tokenized
            ElizaParseError: If the source cannot be parsed
            ElizaRuleError: If any rule is malformed
        """
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()

        return cls.from_source(source)

    def __len__(self) -> int:
        return len(self.rules)


class ElizaRuleValidator:
    """Checks rule forms up front so that the matcher only sees well-formed patterns."""

    def __init__(self) -> None:
        self._printer = ElizaPrinter()

    def validate_rule(self, form: ElizaValue, number: int) -> ElizaRule:
        """
        Validate a (pattern response...) form and build a rule from it.

        Args:
            form: Parsed rule form
            number: 1-based rule number for error messages

        Returns:
            The validated rule

        Raises:
            ElizaRuleError: If the form is malformed
        """
        if not isinstance(form, ElizaList) or form.is_empty():
            raise ElizaRuleError(
                message=f"Rule {number} must be a non-empty list",
                received=f"Rule {number}: {self._printer.format(form)} ({form.type_name()})",
                expected="List with a pattern and responses: (pattern response1 ...)",
                example="(((?* ?x) hello (?* ?y)) (How do you do.))",
                suggestion=ErrorMessageBuilder.get_common_mistakes_suggestion("rule_shape")
            )

        pattern = form.first()
        if not isinstance(pattern, ElizaList):
            raise ElizaRuleError(
                message=f"Rule {number} pattern must be a list",
                received=f"Pattern: {self._printer.format(pattern)} ({pattern.type_name()})",
                expected="Pattern list such as ((?* ?x) hello (?* ?y))",
                suggestion=ErrorMessageBuilder.get_common_mistakes_suggestion("list_syntax")
            )

        if form.length() < 2:
            raise ElizaRuleError(
                message=f"Rule {number} has no response templates",
                received=f"Rule {number}: {self._printer.format(form)}",
                expected="At least one response after the pattern",
                example="(((?* ?x) hello (?* ?y)) (How do you do.))",
                suggestion=ErrorMessageBuilder.get_common_mistakes_suggestion("rule_responses")
            )

        self._validate_pattern(pattern, number)
        bound_names = pattern_variables(pattern)

        responses = []
        for i, response in enumerate(form.rest().elements, 1):
            if not isinstance(response, ElizaList):
                raise ElizaRuleError(
                    message=f"Rule {number} response {i} must be a list",
                    received=f"Response {i}: {self._printer.format(response)} ({response.type_name()})",
                    expected="Response template list such as (Why do you want ?y)",
                    suggestion=ErrorMessageBuilder.get_common_mistakes_suggestion("list_syntax")
                )

            self._validate_response_variables(response, bound_names, number, i)
            responses.append(response)

        return ElizaRule(pattern, tuple(responses))

    def _validate_response_variables(
        self,
        response: ElizaList,
        bound_names: List[str],
        number: int,
        index: int
    ) -> None:
        """Check that a response template only uses variables its pattern binds."""
        for name in pattern_variables(response):
            if name in bound_names:
                continue

            similar = ErrorMessageBuilder.suggest_similar_names(name, bound_names)
            raise ElizaRuleError(
                message=f"Rule {number} response {index} uses unbound variable {name}",
                received=f"Response {index}: {self._printer.format(response)}",
                expected=f"One of: {', '.join(bound_names)}" if bound_names else "No variables (the pattern binds none)",
                suggestion=f"Did you mean {similar[0]}?" if similar else None
            )

    def _validate_pattern(self, pattern: ElizaValue, number: int) -> None:
        """Recursively check every segment marker in a pattern."""
        if not isinstance(pattern, ElizaList):
            return

        if not pattern.is_empty():
            tag = pattern.first()
            if isinstance(tag, ElizaSymbol) and tag.name == SEGMENT_TAG:
                if pattern.length() != 2 or not is_variable(pattern.get(1)):
                    raise ElizaRuleError(
                        message=f"Invalid segment marker in rule {number}",
                        received=f"Segment marker: {self._printer.format(pattern)}",
                        expected="Segment tag followed by exactly one variable: (?* ?var)",
                        example="((?* ?x) I want (?* ?y))",
                        suggestion=ErrorMessageBuilder.get_common_mistakes_suggestion("segment_marker")
                    )

                return

        for element in pattern.elements:
            self._validate_pattern(element, number)


class ElizaRuleSelector:
    """Finds the first rule in a table whose pattern matches an input."""

    def __init__(self, rules: ElizaRuleTable, matcher: ElizaMatcher | None = None):
        """
        Initialize rule selector.

        Args:
            rules: Rule table to scan, in priority order
            matcher: Matcher to use (a case-sensitive matcher by default)
        """
        self.rules = rules
        self.matcher = matcher if matcher is not None else ElizaMatcher()
        self._logger = logging.getLogger("ElizaRuleSelector")

    def select(self, value: ElizaValue) -> ElizaRuleMatch | None:
        """
        Return the first rule that matches value.

        Args:
            value: Input sequence

        Returns:
            The matching rule with its bindings, or None if no rule matches
        """
        for index, rule in enumerate(self.rules.rules):
            bindings = self.matcher.match(rule.pattern, value, ElizaBindings())
            if bindings is not None:
                self._logger.debug("Rule %d matched with bindings %r", index, bindings)
                return ElizaRuleMatch(rule, bindings, index)

        self._logger.debug("No match after trying %d rules", len(self.rules))
        return None
