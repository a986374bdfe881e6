"""Builds responses from the first matching rule."""

import logging
import random
from typing import Dict, Mapping

from eliza.eliza_bindings import ElizaBindings
from eliza.eliza_classifier import is_variable
from eliza.eliza_rules import ElizaRuleSelector
from eliza.eliza_settings import DEFAULT_VIEWPOINT_SWAPS
from eliza.eliza_value import ElizaValue, ElizaSymbol, ElizaList


class ElizaResponder:
    """
    Turns an input sequence into a response sequence.

    The first matching rule is selected, its bindings are switched to the
    responder's point of view (I becomes you and so on), one of the rule's
    response templates is chosen at random, and the bindings are substituted
    into it.
    """

    def __init__(
        self,
        selector: ElizaRuleSelector,
        viewpoint_swaps: Mapping[str, str] | None = None,
        rng: random.Random | None = None
    ):
        """
        Initialize responder.

        Args:
            selector: Rule selector used to find the matching rule
            viewpoint_swaps: Word substitutions applied to bound values
            rng: Random generator used to choose among response templates
        """
        self.selector = selector
        self.viewpoint_swaps: Dict[str, str] = dict(
            viewpoint_swaps if viewpoint_swaps is not None else DEFAULT_VIEWPOINT_SWAPS
        )
        self._case_sensitive = selector.matcher.case_sensitive
        self._folded_swaps = {word.casefold(): swap for word, swap in self.viewpoint_swaps.items()}
        self._rng = rng if rng is not None else random.Random()
        self._logger = logging.getLogger("ElizaResponder")

    def respond(self, value: ElizaValue) -> ElizaList | None:
        """
        Respond to an input sequence.

        Args:
            value: Input sequence

        Returns:
            Flat response sequence, or None if no rule matches
        """
        rule_match = self.selector.select(value)
        if rule_match is None:
            self._logger.debug("No response for input")
            return None

        template = self._rng.choice(rule_match.rule.responses)
        return self.instantiate(template, self.switch_viewpoint(rule_match.bindings))

    def switch_viewpoint(self, bindings: ElizaBindings) -> ElizaBindings:
        """
        Change I to you and vice versa in every bound value.

        Words are looked up ignoring case when the selector's matcher ignores case.

        Args:
            bindings: Bindings produced by the matcher

        Returns:
            New bindings with words substituted
        """
        def substitute(value: ElizaValue) -> ElizaValue:
            if isinstance(value, ElizaList):
                return ElizaList(tuple(substitute(element) for element in value.elements))

            if isinstance(value, ElizaSymbol):
                swap = self._swap_for(value.name)
                if swap is not None:
                    return ElizaSymbol(swap, value.position)

            return value

        return bindings.map_values(substitute)

    def _swap_for(self, word: str) -> str | None:
        """Look up a word in the swap table, ignoring case if the matcher does."""
        if self._case_sensitive:
            return self.viewpoint_swaps.get(word)

        return self._folded_swaps.get(word.casefold())

    def instantiate(self, template: ElizaList, bindings: ElizaBindings) -> ElizaList:
        """
        Substitute bound values into a response template.

        Variables at the top level of the template are replaced by their values;
        the result is then flattened so that segment values are spliced in.

        Args:
            template: Response template
            bindings: Bindings to substitute

        Returns:
            Flat response sequence
        """
        elements = []
        for element in template.elements:
            if is_variable(element):
                assert isinstance(element, ElizaSymbol)
                bound = bindings.lookup(element.name)
                if bound is not None:
                    elements.append(bound)
                    continue

            elements.append(element)

        return ElizaList(tuple(elements)).flatten()
