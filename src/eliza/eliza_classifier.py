"""Classification of pattern elements: literals, variables and segment markers."""

from typing import List

from eliza.eliza_value import ElizaValue, ElizaSymbol, ElizaList


VARIABLE_PREFIX = "?"
SEGMENT_TAG = "?*"


def is_variable(value: ElizaValue) -> bool:
    """Return True if value is a symbol naming a single-element variable, such as ?x."""
    return (
        isinstance(value, ElizaSymbol)
        and value.name.startswith(VARIABLE_PREFIX)
        and len(value.name) > 1
        and value.name != SEGMENT_TAG
    )


def is_segment_marker(value: ElizaValue) -> bool:
    """Return True if value is a segment marker of the form (?* ?var)."""
    if not isinstance(value, ElizaList) or value.length() != 2:
        return False

    tag = value.get(0)
    return isinstance(tag, ElizaSymbol) and tag.name == SEGMENT_TAG and is_variable(value.get(1))


def is_segment_pattern(pattern: ElizaValue) -> bool:
    """Return True if pattern is of the form ((?* ?var) rest-of-pattern...)."""
    return isinstance(pattern, ElizaList) and not pattern.is_empty() and is_segment_marker(pattern.first())


def segment_variable(pattern: ElizaList) -> ElizaSymbol:
    """Return the variable of the segment marker that opens pattern."""
    marker = pattern.first()
    assert isinstance(marker, ElizaList), "Segment pattern checked earlier"
    variable = marker.get(1)
    assert isinstance(variable, ElizaSymbol), "Segment pattern checked earlier"
    return variable


def contains_variables(value: ElizaValue) -> bool:
    """Return True if value mentions a variable or the segment tag at any depth."""
    if isinstance(value, ElizaSymbol):
        return is_variable(value) or value.name == SEGMENT_TAG

    if isinstance(value, ElizaList):
        return any(contains_variables(element) for element in value.elements)

    return False


def pattern_variables(pattern: ElizaValue) -> List[str]:
    """Return the variable names used in pattern, in order of first occurrence."""
    names: List[str] = []

    def collect(value: ElizaValue) -> None:
        if is_variable(value):
            assert isinstance(value, ElizaSymbol)
            if value.name not in names:
                names.append(value.name)

            return

        if isinstance(value, ElizaList):
            for element in value.elements:
                collect(element)

    collect(pattern)
    return names
