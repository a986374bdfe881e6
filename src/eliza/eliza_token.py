"""Token types and token representation for ELIZA S-expressions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ElizaTokenType(Enum):
    """Token types for ELIZA S-expressions."""
    LPAREN = "("
    RPAREN = ")"
    SYMBOL = "SYMBOL"
    NUMBER = "NUMBER"
    STRING = "STRING"


@dataclass
class ElizaToken:
    """Represents a single token in an ELIZA S-expression."""
    type: ElizaTokenType
    value: Any
    position: int
    length: int = 1

    def __repr__(self) -> str:
        return f"ElizaToken({self.type.name}, {self.value!r}, pos={self.position})"
