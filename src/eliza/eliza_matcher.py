"""Pattern matcher with backtracking segment search.

Patterns are lists of literal tokens, single-element variables (?x) and
segment markers ((?* ?x) ...) that bind zero or more contiguous elements.
A match returns an ElizaBindings value; a failed match returns None.
"""

from enum import Enum

from eliza.eliza_bindings import ElizaBindings
from eliza.eliza_classifier import contains_variables, is_segment_pattern, is_variable, segment_variable
from eliza.eliza_value import ElizaValue, ElizaSymbol, ElizaList


# Default for ElizaMatcher.match: start from new empty bindings on every call
_FRESH_BINDINGS = object()


class ElizaSearchState(Enum):
    """States of a segment search."""
    SEARCHING = "searching"
    MATCHED = "matched"
    EXHAUSTED = "exhausted"


class ElizaMatcher:
    """Matches patterns against input sequences, producing variable bindings."""

    def __init__(self, case_sensitive: bool = True):
        """
        Initialize matcher.

        Args:
            case_sensitive: If False, symbols compare equal ignoring case
        """
        self.case_sensitive = case_sensitive

    def match(
        self,
        pattern: ElizaValue,
        value: ElizaValue,
        bindings: ElizaBindings | None | object = _FRESH_BINDINGS
    ) -> ElizaBindings | None:
        """
        Match a pattern against an input value.

        Args:
            pattern: Pattern to match
            value: Input to match against
            bindings: Bindings established so far (empty by default, None for a failed match)

        Returns:
            Possibly extended bindings if the pattern matches, None if it does not
        """
        if bindings is _FRESH_BINDINGS:
            return self._match(pattern, value, ElizaBindings())

        assert bindings is None or isinstance(bindings, ElizaBindings)
        return self._match(pattern, value, bindings)

    def values_equal(self, a: ElizaValue, b: ElizaValue) -> bool:
        """
        Compare two values structurally, honouring the case sensitivity setting.

        Args:
            a: First value
            b: Second value

        Returns:
            True if the values are equal
        """
        if self.case_sensitive:
            return a == b

        if isinstance(a, ElizaSymbol) and isinstance(b, ElizaSymbol):
            return a.name.casefold() == b.name.casefold()

        if isinstance(a, ElizaList) and isinstance(b, ElizaList):
            if a.length() != b.length():
                return False

            return all(self.values_equal(x, y) for x, y in zip(a.elements, b.elements))

        return a == b

    def _match(
        self,
        pattern: ElizaValue,
        value: ElizaValue,
        bindings: ElizaBindings | None
    ) -> ElizaBindings | None:
        """Dispatch on the shape of the pattern."""
        if bindings is None:
            return None

        if is_variable(pattern):
            assert isinstance(pattern, ElizaSymbol)
            return bindings.bind(pattern, value, self.values_equal)

        if self.values_equal(pattern, value):
            return bindings

        if is_segment_pattern(pattern):
            assert isinstance(pattern, ElizaList)
            return ElizaSegmentSearch(self, pattern, value, bindings).run()

        if (
            isinstance(pattern, ElizaList) and isinstance(value, ElizaList)
            and not pattern.is_empty() and not value.is_empty()
        ):
            head_bindings = self._match(pattern.first(), value.first(), bindings)
            return self._match(pattern.rest(), value.rest(), head_bindings)

        return None


class ElizaSegmentSearch:
    """
    Backtracking search for the extent of a segment variable.

    Resolves a pattern of the form ((?* ?var) rest-of-pattern...) against an
    input by trying split points in increasing order.  The segment variable is
    bound to the input before the split and the rest of the pattern is matched
    against the input after it.  The first split that succeeds wins, so
    segments bind as few elements as possible.

    When the rest of the pattern starts with a literal, only split points where
    the input holds that literal are tried.  Otherwise every split point from 0
    to the length of the input is tried.
    """

    def __init__(self, matcher: ElizaMatcher, pattern: ElizaList, value: ElizaValue, bindings: ElizaBindings):
        """
        Initialize a segment search.

        Args:
            matcher: Matcher used for the rest of the pattern
            pattern: Pattern whose first element is a segment marker
            value: Input to match against
            bindings: Bindings established so far
        """
        self._matcher = matcher
        self._variable = segment_variable(pattern)
        self._rest = pattern.rest()
        self._value = value
        self._bindings = bindings
        self._next_pos = 0

        self._anchor: ElizaValue | None = None
        if not self._rest.is_empty() and not contains_variables(self._rest.first()):
            self._anchor = self._rest.first()

        self.state = ElizaSearchState.SEARCHING
        self.result: ElizaBindings | None = None

    def run(self) -> ElizaBindings | None:
        """
        Search until a split matches or the candidates are exhausted.

        Returns:
            Bindings for the first successful split, or None
        """
        while self.state is ElizaSearchState.SEARCHING:
            self.step()

        return self.result

    def step(self) -> ElizaSearchState:
        """
        Try the next candidate split point.

        Returns:
            The search state after this step
        """
        if self.state is not ElizaSearchState.SEARCHING:
            return self.state

        # A trailing segment absorbs everything that is left
        if self._rest.is_empty():
            self._finish(self._bindings.bind(self._variable, self._value, self._matcher.values_equal))
            return self.state

        pos = self._next_candidate()
        if pos is None:
            self.state = ElizaSearchState.EXHAUSTED
            return self.state

        assert isinstance(self._value, ElizaList)
        self._next_pos = pos + 1

        segment_bindings = self._bindings.bind(self._variable, self._value.take(pos), self._matcher.values_equal)
        result = self._matcher.match(self._rest, self._value.drop(pos), segment_bindings)
        if result is not None:
            self._finish(result)

        return self.state

    def _finish(self, result: ElizaBindings | None) -> None:
        """Record the final outcome of the search."""
        self.result = result
        self.state = ElizaSearchState.EXHAUSTED if result is None else ElizaSearchState.MATCHED

    def _next_candidate(self) -> int | None:
        """Return the next split point to try, or None when there are none left."""
        if not isinstance(self._value, ElizaList):
            return None

        if self._anchor is None:
            if self._next_pos <= self._value.length():
                return self._next_pos

            return None

        for pos in range(self._next_pos, self._value.length()):
            if self._matcher.values_equal(self._value.get(pos), self._anchor):
                return pos

        return None
