"""Formats ELIZA values back into S-expression text."""

from eliza.eliza_value import ElizaValue, ElizaNumber, ElizaString, ElizaList


class ElizaPrinter:
    """Formats values using LISP conventions for lists and strings."""

    def format(self, value: ElizaValue) -> str:
        """
        Format a value for display.

        Args:
            value: The value to format

        Returns:
            String representation of the value
        """
        if isinstance(value, ElizaString):
            return f'"{self._escape_string(value.value)}"'

        if isinstance(value, ElizaNumber):
            return str(value.value)

        if isinstance(value, ElizaList):
            return f"({' '.join(self.format(element) for element in value.elements)})"

        return str(value)

    def format_text(self, value: ElizaValue) -> str:
        """
        Format a value for reading by a person.

        Lists keep their parentheses but strings are shown without quotes or escapes.
        """
        if isinstance(value, ElizaList):
            return f"({' '.join(self.format_text(element) for element in value.elements)})"

        if isinstance(value, ElizaString):
            return value.value

        return self.format(value)

    def _escape_string(self, s: str) -> str:
        """Escape a string for LISP display format."""
        result = []
        for char in s:
            if char == '"':
                result.append('\\"')

            elif char == '\\':
                result.append('\\\\')

            elif char == '\n':
                result.append('\\n')

            elif char == '\t':
                result.append('\\t')

            elif char == '\r':
                result.append('\\r')

            elif ord(char) < 32:
                result.append(f'\\u{ord(char):04x}')

            else:
                result.append(char)

        return ''.join(result)
