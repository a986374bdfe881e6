"""Parser for ELIZA S-expressions with detailed error messages."""

from typing import List
from dataclasses import dataclass

from eliza.eliza_error import ElizaParseError
from eliza.eliza_token import ElizaToken, ElizaTokenType
from eliza.eliza_value import ElizaValue, ElizaNumber, ElizaString, ElizaSymbol, ElizaList


@dataclass
class ParenStackFrame:
    """Represents an unclosed opening parenthesis with context."""
    position: int
    expression_type: str
    context_snippet: str


class ElizaParser:
    """Parses tokens into ELIZA values using pure list representation with detailed error messages."""

    def __init__(self, tokens: List[ElizaToken], expression: str = ""):
        """
        Initialize parser with tokens and original expression.

        Args:
            tokens: List of tokens to parse
            expression: Original expression string for error context
        """
        self.tokens = tokens
        self.pos = 0
        self.current_token: ElizaToken | None = tokens[0] if tokens else None
        self.expression = expression

        # Paren stack for tracking unclosed expressions
        self.paren_stack: List[ParenStackFrame] = []

    def parse(self) -> ElizaValue:
        """
        Parse tokens into a single value with detailed error reporting.

        Returns:
            Parsed expression

        Raises:
            ElizaParseError: If parsing fails with detailed context
        """
        if self.current_token is None:
            raise ElizaParseError(
                message="Empty expression",
                expected="A list, symbol, number or string",
                example="(hello there) or hello",
                suggestion="Provide a complete expression",
                context="Expression cannot be empty or contain only whitespace"
            )

        expr = self._parse_expression()

        if self.current_token is not None:
            raise ElizaParseError(
                message="Unexpected token after complete expression",
                position=self.current_token.position,
                received=f"Found: {self.current_token.value}",
                expected="End of expression",
                example="Correct: (I want a dog)\\nIncorrect: (I want) a dog",
                suggestion="Remove extra tokens or combine them into a single list",
                context="Only one complete expression is allowed here"
            )

        return expr

    def parse_all(self) -> List[ElizaValue]:
        """
        Parse every top-level expression in the token stream.

        Returns:
            Parsed expressions in source order (empty if there are no tokens)

        Raises:
            ElizaParseError: If parsing fails with detailed context
        """
        expressions = []
        while self.current_token is not None:
            expressions.append(self._parse_expression())

        return expressions

    def _parse_expression(self) -> ElizaValue:
        """Parse a single expression with detailed error reporting."""
        assert self.current_token is not None, "Current token must not be None here"
        start_pos = self.current_token.position
        token = self.current_token

        if token.type == ElizaTokenType.LPAREN:
            return self._parse_list(start_pos)

        if token.type == ElizaTokenType.SYMBOL:
            self._advance()
            return ElizaSymbol(token.value, token.position)

        if token.type == ElizaTokenType.NUMBER:
            self._advance()
            return ElizaNumber(token.value)

        if token.type == ElizaTokenType.STRING:
            self._advance()
            return ElizaString(token.value)

        assert token.type == ElizaTokenType.RPAREN, f"Unexpected token type ({token.type}) encountered"
        raise ElizaParseError(
            message="Unexpected token: )",
            position=start_pos,
            received="Token: ) (type: RPAREN)",
            expected="Number, string, symbol, or '('",
            example="Correct: (hello)\\nIncorrect: hello)",
            suggestion="Remove the extra ')' or add a matching '('",
            context="A closing parenthesis cannot start an expression"
        )

    def _push_paren_frame(self, position: int) -> None:
        """
        Push a new opening paren onto the tracking stack.

        Args:
            position: Character position of the opening paren
        """
        frame = ParenStackFrame(
            position=position,
            expression_type=self._detect_expression_type(position),
            context_snippet=self._get_context_snippet(position, length=30)
        )

        self.paren_stack.append(frame)

    def _pop_paren_frame(self) -> None:
        """Pop an opening paren from the stack when it's successfully closed."""
        assert self.paren_stack, "Paren stack underflow - trying to pop from empty stack"
        self.paren_stack.pop()

    def _detect_expression_type(self, position: int) -> str:
        """
        Detect what kind of list starts at this position.

        Args:
            position: Character position of the opening paren

        Returns:
            Human-readable expression type string
        """
        i = position + 1
        while i < len(self.expression) and self.expression[i].isspace():
            i += 1

        if self.expression.startswith('?*', i):
            return 'segment marker'

        if self.expression.startswith('(', i):
            return 'nested list'

        return 'list'

    def _get_context_snippet(self, position: int, length: int = 30) -> str:
        """
        Get a snippet of source starting at position for error display.

        Args:
            position: Starting character position
            length: Maximum length of snippet

        Returns:
            Formatted context snippet with ellipsis if truncated
        """
        end = min(position + length, len(self.expression))
        snippet = ' '.join(self.expression[position:end].split())

        if end < len(self.expression):
            snippet += "..."

        return snippet

    def _create_unterminated_error(self, start_pos: int) -> ElizaParseError:
        """
        Create an error message with paren stack information.

        Args:
            start_pos: Position where the unterminated list started

        Returns:
            ElizaParseError with detailed stack trace
        """
        depth = len(self.paren_stack)

        stack_lines = []
        for i, frame in enumerate(self.paren_stack, 1):
            stack_lines.append(
                f"  {i}. {frame.expression_type} at position {frame.position}: "
                f"{frame.context_snippet}"
            )

        stack_trace = "\n".join(stack_lines) if stack_lines else "  (no unclosed expressions)"
        closing_parens = (" ) " * depth).strip() if depth > 1 else ")"
        paren_word = "parenthesis" if depth == 1 else "parentheses"

        return ElizaParseError(
            message=f"Unterminated list - missing {depth} closing {paren_word}",
            position=start_pos,
            expected=f'Add "{closing_parens}" to close all expressions',
            example="Correct: ((?* ?x) hello)\nIncorrect: ((?* ?x) hello",
            suggestion=f"Add {depth} closing {paren_word}: {closing_parens}",
            context=f"Reached end of input at depth {depth}.\n\nUnclosed expressions:\n{stack_trace}"
        )

    def _parse_list(self, start_pos: int) -> ElizaList:
        """Parse (element1 element2 ...) with error tracking."""
        self._push_paren_frame(start_pos)

        self._advance()  # consume '('

        elements = []
        while self.current_token is not None and self.current_token.type != ElizaTokenType.RPAREN:
            elements.append(self._parse_expression())

        if self.current_token is None:
            raise self._create_unterminated_error(start_pos)

        self._pop_paren_frame()

        self._advance()  # consume ')'

        return ElizaList(tuple(elements))

    def _advance(self) -> None:
        """Move to the next token."""
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]

        else:
            self.current_token = None
