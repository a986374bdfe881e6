"""Immutable variable bindings threaded through pattern matching."""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List

from eliza.eliza_value import ElizaValue, ElizaSymbol


ValueEquality = Callable[[ElizaValue, ElizaValue], bool]


def _structural_equality(a: ElizaValue, b: ElizaValue) -> bool:
    return a == b


@dataclass(frozen=True)
class ElizaBindings:
    """
    Immutable mapping from variable name to bound value.

    An empty ElizaBindings means a successful match that bound nothing. Match
    failure is represented by None, never by an ElizaBindings value, so callers
    must test "is None" rather than truthiness.
    """
    bindings: Dict[str, ElizaValue] = field(default_factory=dict)

    def bind(
        self,
        variable: ElizaSymbol | str,
        value: ElizaValue,
        equal: ValueEquality = _structural_equality
    ) -> 'ElizaBindings | None':
        """
        Bind a variable, checking consistency with any existing binding.

        Args:
            variable: Variable symbol or name
            value: Value to bind (a single token or a list for segments)
            equal: Equality used to compare against an existing binding

        Returns:
            New bindings with the variable added, these bindings unchanged if the
            variable is already bound to an equal value, or None if it is bound
            to a different value
        """
        name = variable.name if isinstance(variable, ElizaSymbol) else variable
        if name not in self.bindings:
            return ElizaBindings({**self.bindings, name: value})

        if equal(self.bindings[name], value):
            return self

        return None

    def lookup(self, name: str) -> ElizaValue | None:
        """Return the value bound to name, or None if it is unbound."""
        return self.bindings.get(name)

    def is_bound(self, name: str) -> bool:
        """Check if a variable has a binding."""
        return name in self.bindings

    def names(self) -> List[str]:
        """Return bound variable names in binding order."""
        return list(self.bindings.keys())

    def map_values(self, func: Callable[[ElizaValue], ElizaValue]) -> 'ElizaBindings':
        """Return new bindings with every value transformed by func."""
        return ElizaBindings({name: func(value) for name, value in self.bindings.items()})

    def to_dict(self) -> Dict[str, ElizaValue]:
        """Return a copy of the bindings as a plain dictionary."""
        return self.bindings.copy()

    def to_python(self) -> Dict[str, object]:
        """Return the bindings with values converted to Python types."""
        return {name: value.to_python() for name, value in self.bindings.items()}

    def __getitem__(self, name: str) -> ElizaValue:
        return self.bindings[name]

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.bindings.items(), key=lambda item: item[0])))

    def __repr__(self) -> str:
        items = ", ".join(f"{name}: {value!r}" for name, value in self.bindings.items())
        return f"ElizaBindings({{{items}}})"
