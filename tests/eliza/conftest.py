"""Shared fixtures and utilities for ELIZA tests."""

import random

import pytest

from eliza import Eliza, ElizaMatcher, ElizaParser, ElizaTokenizer, ElizaValue


@pytest.fixture
def eliza():
    """Create a fresh Eliza instance with a seeded random generator for each test."""
    return Eliza(rng=random.Random(1234))


@pytest.fixture
def matcher():
    """Create a case-sensitive matcher."""
    return ElizaMatcher()


@pytest.fixture
def read():
    """Read a single S-expression from text."""
    def _read(text: str) -> ElizaValue:
        tokens = ElizaTokenizer().tokenize(text)
        return ElizaParser(tokens, text).parse()
    return _read


class ElizaTestHelpers:
    """Helper utilities for ELIZA testing."""

    @staticmethod
    def read(text: str) -> ElizaValue:
        """Read a single S-expression from text."""
        tokens = ElizaTokenizer().tokenize(text)
        return ElizaParser(tokens, text).parse()

    @staticmethod
    def match(matcher: ElizaMatcher, pattern: str, text: str):
        """Match pattern text against input text, returning Python bindings or None."""
        bindings = matcher.match(ElizaTestHelpers.read(pattern), ElizaTestHelpers.read(text))
        if bindings is None:
            return None

        return bindings.to_python()

    @staticmethod
    def assert_matches(matcher: ElizaMatcher, pattern: str, text: str, expected: dict) -> None:
        """Assert that pattern matches text with exactly the expected bindings."""
        result = ElizaTestHelpers.match(matcher, pattern, text)
        assert result == expected, f"Expected {pattern} on {text} to bind {expected!r}, got {result!r}"

    @staticmethod
    def assert_no_match(matcher: ElizaMatcher, pattern: str, text: str) -> None:
        """Assert that pattern does not match text."""
        result = ElizaTestHelpers.match(matcher, pattern, text)
        assert result is None, f"Expected {pattern} not to match {text}, got {result!r}"


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return ElizaTestHelpers
