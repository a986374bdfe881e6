"""Tokenizer for ELIZA S-expressions with detailed error messages."""

from typing import List, Union

from eliza.eliza_error import ElizaTokenError
from eliza.eliza_token import ElizaToken, ElizaTokenType


class ElizaTokenizer:
    """Tokenizes ELIZA S-expressions into tokens with detailed error messages."""

    def tokenize(self, expression: str) -> List[ElizaToken]:
        """
        Tokenize an ELIZA S-expression with detailed error reporting.

        Args:
            expression: The expression string to tokenize

        Returns:
            List of tokens

        Raises:
            ElizaTokenError: If tokenization fails with detailed context
        """
        tokens = []
        i = 0

        while i < len(expression):
            # Skip whitespace, commas count as whitespace
            if expression[i].isspace() or expression[i] == ',':
                i += 1
                continue

            # Comments - skip from ';' to end of line
            if expression[i] == ';':
                while i < len(expression) and expression[i] != '\n':
                    i += 1

                continue

            if expression[i] == '(':
                tokens.append(ElizaToken(ElizaTokenType.LPAREN, '(', i))
                i += 1
                continue

            if expression[i] == ')':
                tokens.append(ElizaToken(ElizaTokenType.RPAREN, ')', i))
                i += 1
                continue

            if expression[i] == '"':
                try:
                    string_value, length = self._read_string(expression, i)
                    tokens.append(ElizaToken(ElizaTokenType.STRING, string_value, i, length))
                    i += length
                    continue

                except ElizaTokenError as e:
                    if "Unterminated string" in str(e):
                        raise ElizaTokenError(
                            message="Unterminated string literal",
                            position=i,
                            received=f"String starting with: {expression[i:i+10]}...",
                            expected="Closing quote \" at end of string",
                            example='Correct: "NO"\\nIncorrect: "NO',
                            suggestion="Add closing quote \" at the end of the string",
                            context="String literals must be enclosed in double quotes"
                        ) from e

                    if "Invalid escape sequence" in str(e):
                        escape_pos = i + 1
                        while escape_pos < len(expression) and expression[escape_pos] != '\\':
                            escape_pos += 1

                        bad_escape = expression[escape_pos:escape_pos+2]
                        raise ElizaTokenError(
                            message=f"Invalid escape sequence: {bad_escape}",
                            position=escape_pos,
                            received=f"Escape sequence: {bad_escape}",
                            expected="Valid escape: \\n, \\t, \\r, \\\", \\\\, or \\uXXXX",
                            example='Valid: "line1\\nline2"\\nInvalid: "bad\\qsequence"',
                            suggestion="Use valid escape sequences or remove backslash",
                            context="Only specific escape sequences are supported in strings"
                        ) from e

                    raise

            char = expression[i]
            char_code = ord(char)

            if char_code < 32:
                char_display = f"\\u{char_code:04x}"
                raise ElizaTokenError(
                    message=f"Invalid control character in source: {char_display}",
                    position=i,
                    received=f"Control character: {char_display} (code {char_code})",
                    expected="Printable characters, or escape sequences in strings",
                    suggestion="Remove the control character or use escape sequences like \\n in strings",
                    context="Control characters are not allowed outside string literals"
                )

            suggestions = {
                '[': "Use parentheses ( ) for lists, not brackets [ ]",
                ']': "Use parentheses ( ) for lists, not brackets [ ]",
                '{': "Use parentheses ( ) for all grouping, not braces { }",
                '}': "Use parentheses ( ) for all grouping, not braces { }",
            }

            if char in suggestions:
                raise ElizaTokenError(
                    message=f"Invalid character: {char}",
                    position=i,
                    received=f"Character: {char} (code {char_code})",
                    expected="Words, numbers, strings or parentheses",
                    example="Valid: ((?* ?x) I want (?* ?y))\\nInvalid: [I want ?y]",
                    suggestion=suggestions[char],
                    context="Only parentheses group elements"
                )

            # Numbers are checked before symbols so that -5 and .5 read as numbers
            if self._is_number_start(expression, i):
                complete_token = self._read_complete_token(expression, i)
                if self._is_valid_number(complete_token):
                    number = self._parse_number_value(complete_token)
                    tokens.append(ElizaToken(ElizaTokenType.NUMBER, number, i, len(complete_token)))
                    i += len(complete_token)
                    continue

            # Anything else up to the next delimiter is a symbol (words, ?x, ?*, do., Really--)
            symbol = self._read_complete_token(expression, i)
            tokens.append(ElizaToken(ElizaTokenType.SYMBOL, symbol, i, len(symbol)))
            i += len(symbol)

        return tokens

    def _read_string(self, expression: str, start: int) -> tuple[str, int]:
        """
        Read a string literal from the expression.

        Returns:
            Tuple of (string_value, length_consumed)

        Raises:
            ElizaTokenError: If string is malformed
        """
        i = start + 1  # Skip opening quote
        result: list[str] = []

        while i < len(expression):
            char = expression[i]

            if char == '"':
                i += 1  # Skip closing quote
                return ''.join(result), i - start

            if char == '\\':
                if i + 1 >= len(expression):
                    raise ElizaTokenError(f"Unterminated string literal starting at position {start}")

                next_char = expression[i + 1]

                if next_char == '"':
                    result.append('"')

                elif next_char == '\\':
                    result.append('\\')

                elif next_char == 'n':
                    result.append('\n')

                elif next_char == 't':
                    result.append('\t')

                elif next_char == 'r':
                    result.append('\r')

                elif next_char == 'u':
                    # Unicode escape sequence \uXXXX
                    if i + 5 >= len(expression):
                        raise ElizaTokenError(f"Invalid escape sequence at position {i}: incomplete \\u")

                    hex_digits = expression[i + 2:i + 6]
                    if not all(c in '0123456789abcdefABCDEF' for c in hex_digits):
                        raise ElizaTokenError(f"Invalid escape sequence at position {i}: \\u{hex_digits}")

                    result.append(chr(int(hex_digits, 16)))
                    i += 4  # Skip the extra 4 characters (uXXXX)

                else:
                    raise ElizaTokenError(f"Invalid escape sequence at position {i}: \\{next_char}")

                i += 2
                continue

            result.append(char)
            i += 1

        raise ElizaTokenError(f"Unterminated string literal starting at position {start}")

    def _is_number_start(self, expression: str, pos: int) -> bool:
        """Check if position starts a number literal."""
        char = expression[pos]

        if char.isdigit():
            return True

        # Decimal starting with dot (.5)
        if char == '.' and pos + 1 < len(expression) and expression[pos + 1].isdigit():
            return True

        if char == '-' and pos + 1 < len(expression):
            next_char = expression[pos + 1]
            if next_char.isdigit() or (next_char == '.' and pos + 2 < len(expression) and expression[pos + 2].isdigit()):
                return True

        return False

    def _is_delimiter(self, char: str) -> bool:
        """Check if character is a token delimiter."""
        return char.isspace() or char in '()";,'

    def _read_complete_token(self, expression: str, start: int) -> str:
        """
        Read a complete token until delimiter.

        Returns:
            The complete token string

        Raises:
            ElizaTokenError: If a control character is encountered
        """
        i = start

        while i < len(expression):
            char = expression[i]

            if self._is_delimiter(char):
                break

            if ord(char) < 32:
                char_display = f"\\u{ord(char):04x}"
                raise ElizaTokenError(
                    message=f"Invalid control character in source: {char_display}",
                    position=i,
                    received=f"Control character: {char_display} (code {ord(char)})",
                    expected="Printable characters, or escape sequences in strings",
                    suggestion="Remove the control character",
                    context="Control characters are not allowed inside symbols"
                )

            if char in '[]{}':
                break

            i += 1

        return expression[start:i]

    def _is_valid_number(self, token: str) -> bool:
        """
        Check if a complete token is a valid decimal number.

        Args:
            token: The complete token string to validate

        Returns:
            True if the token represents a valid number
        """
        check_token = token[1:] if token.startswith('-') else token
        if not check_token or not all(c.isdigit() or c in '.eE+-' for c in check_token):
            return False

        try:
            float(check_token)
            return True

        except ValueError:
            return False

    def _parse_number_value(self, token: str) -> Union[int, float]:
        """
        Parse a valid number token into its numeric value.

        Args:
            token: The complete valid number token

        Returns:
            The numeric value
        """
        if '.' in token or 'e' in token.lower():
            return float(token)

        return int(token)
