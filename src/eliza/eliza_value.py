"""ELIZA value hierarchy - immutable symbolic values for patterns and input."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Tuple, Union


class ElizaValue(ABC):
    """
    Abstract base class for all ELIZA values.

    All ELIZA values are immutable.
    """

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python value."""

    @abstractmethod
    def type_name(self) -> str:
        """Return type name for error messages."""


@dataclass(frozen=True)
class ElizaNumber(ElizaValue):
    """Represents numeric tokens: integers and floats."""
    value: Union[int, float]

    def to_python(self) -> Union[int, float]:
        return self.value

    def type_name(self) -> str:
        if isinstance(self.value, int):
            return "integer"

        return "float"


@dataclass(frozen=True)
class ElizaString(ElizaValue):
    """Represents string tokens."""
    value: str

    def to_python(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "string"


@dataclass(frozen=True)
class ElizaSymbol(ElizaValue):
    """Represents symbols: words, pattern variables and the segment tag."""
    name: str
    position: int = field(default=0, compare=False)

    def to_python(self) -> str:
        """Symbols convert to their name string."""
        return self.name

    def type_name(self) -> str:
        return "symbol"

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'ElizaSymbol({self.name!r})'


@dataclass(frozen=True)
class ElizaList(ElizaValue):
    """Represents sequences of ELIZA values."""
    elements: Tuple[ElizaValue, ...] = ()

    def to_python(self) -> List[Any]:
        """Convert to Python list with Python values."""
        return [elem.to_python() for elem in self.elements]

    def type_name(self) -> str:
        return "list"

    def length(self) -> int:
        """Return the length of the list."""
        return len(self.elements)

    def is_empty(self) -> bool:
        """Check if the list is empty."""
        return len(self.elements) == 0

    def first(self) -> ElizaValue:
        """Get the first element (raises IndexError if empty)."""
        if not self.elements:
            raise IndexError("Cannot get first element of empty list")

        return self.elements[0]

    def rest(self) -> 'ElizaList':
        """Get all elements except the first (raises IndexError if empty)."""
        if not self.elements:
            raise IndexError("Cannot get rest of empty list")

        return ElizaList(self.elements[1:])

    def get(self, index: int) -> ElizaValue:
        """Get element at index (raises IndexError if out of bounds)."""
        return self.elements[index]

    def take(self, n: int) -> 'ElizaList':
        """Take the first n elements."""
        return ElizaList(self.elements[:n])

    def drop(self, n: int) -> 'ElizaList':
        """Drop the first n elements."""
        return ElizaList(self.elements[n:])

    def flatten(self) -> 'ElizaList':
        """Return a list with all nested lists spliced into a single level."""
        flat: List[ElizaValue] = []
        for element in self.elements:
            if isinstance(element, ElizaList):
                flat.extend(element.flatten().elements)
                continue

            flat.append(element)

        return ElizaList(tuple(flat))


def symbols(*names: str) -> ElizaList:
    """Build a list of symbols from plain names."""
    return ElizaList(tuple(ElizaSymbol(name) for name in names))
