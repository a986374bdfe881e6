"""Exception classes for the ELIZA engine with detailed context."""

from typing import Optional
import difflib


class ElizaError(Exception):
    """Base exception for ELIZA errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None,
        position: Optional[int] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
            position: Character position where error occurred
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example
        self.position = position

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)


class ElizaTokenError(ElizaError):
    """Tokenization errors with detailed context."""


class ElizaParseError(ElizaError):
    """Parsing errors with detailed context."""


class ElizaRuleError(ElizaError):
    """Rule table authoring errors with detailed context."""


class ElizaSettingsError(ElizaError):
    """Settings loading errors with detailed context."""


class ErrorMessageBuilder:
    """Helper class for building detailed error messages."""

    @staticmethod
    def suggest_similar_names(target: str, available_names: list[str], max_suggestions: int = 3) -> list[str]:
        """Suggest similar names using fuzzy matching."""
        if not target or not available_names:
            return []

        return difflib.get_close_matches(target, available_names, n=max_suggestions, cutoff=0.6)

    @staticmethod
    def get_common_mistakes_suggestion(error_type: str) -> Optional[str]:
        """Get suggestions for common rule authoring mistakes."""
        suggestions = {
            "segment_marker": "Segment markers take exactly one variable: (?* ?x)",
            "segment_variable": "Variables start with '?', for example ?x or ?rest",
            "rule_shape": "Each rule is a list: (pattern response1 response2 ...)",
            "rule_responses": "Give every rule at least one response template",
            "list_syntax": "Patterns and responses are lists: (hello (?* ?x))",
        }

        return suggestions.get(error_type)
