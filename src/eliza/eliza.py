"""Main ELIZA class: a string-in, string-out pattern/transform responder."""

import logging
import random
from typing import Any, Dict

from eliza.eliza_default_rules import default_rule_table
from eliza.eliza_matcher import ElizaMatcher
from eliza.eliza_parser import ElizaParser
from eliza.eliza_printer import ElizaPrinter
from eliza.eliza_responder import ElizaResponder
from eliza.eliza_rules import ElizaRuleSelector, ElizaRuleTable
from eliza.eliza_settings import ElizaSettings
from eliza.eliza_tokenizer import ElizaTokenizer
from eliza.eliza_value import ElizaList, ElizaValue


class Eliza:
    """
    Rule-based conversational responder.

    Input is written in symbolic list notation, for example "(I want a dog)".
    A bare word sequence such as "I want a dog" is read as if it were wrapped
    in parentheses.
    """

    def __init__(
        self,
        rules: ElizaRuleTable | None = None,
        settings: ElizaSettings | None = None,
        rng: random.Random | None = None
    ):
        """
        Initialize ELIZA.

        Args:
            rules: Rule table to use (the built-in rules by default)
            settings: Matching and response settings (defaults if not given)
            rng: Random generator used to choose among response templates
        """
        self.settings = settings if settings is not None else ElizaSettings.create_default()
        self.rules = rules if rules is not None else default_rule_table()
        self.matcher = ElizaMatcher(case_sensitive=self.settings.case_sensitive)
        self.responder = ElizaResponder(
            ElizaRuleSelector(self.rules, self.matcher),
            viewpoint_swaps=self.settings.viewpoint_swaps,
            rng=rng
        )
        self.printer = ElizaPrinter()
        self._logger = logging.getLogger("Eliza")

    def read(self, text: str) -> ElizaValue:
        """
        Read symbolic input text.

        Args:
            text: Input such as "(I want a dog)" or "I want a dog"

        Returns:
            The value read

        Raises:
            ElizaTokenError: If tokenization fails
            ElizaParseError: If parsing fails
        """
        source = text.strip()
        if not source.startswith('('):
            source = f"({source})"

        tokens = ElizaTokenizer().tokenize(source)
        return ElizaParser(tokens, source).parse()

    def respond_to(self, value: ElizaValue) -> ElizaList | None:
        """
        Respond to an input that has already been read.

        Args:
            value: Input sequence

        Returns:
            Response sequence, or None if no rule matches
        """
        return self.responder.respond(value)

    def respond(self, text: str) -> str | None:
        """
        Respond to symbolic input text.

        Args:
            text: Input such as "(I want a dog)"

        Returns:
            Response in list notation with strings unquoted, such as
            "(Why do you want a dog)", or None if no rule matches

        Raises:
            ElizaTokenError: If tokenization fails
            ElizaParseError: If parsing fails
        """
        response = self.respond_to(self.read(text))
        if response is None:
            self._logger.debug("No rule matched input: %s", text)
            return None

        return self.printer.format_text(response)

    def match(self, pattern: str, text: str) -> Dict[str, Any] | None:
        """
        Match a pattern against input, both given as text.

        Args:
            pattern: Pattern such as "((?* ?x) want ?y)"
            text: Input such as "(I want food)"

        Returns:
            Bindings as a dictionary of Python values, or None if there is no match

        Raises:
            ElizaTokenError: If tokenization fails
            ElizaParseError: If parsing fails
        """
        bindings = self.matcher.match(self.read(pattern), self.read(text))
        if bindings is None:
            return None

        return bindings.to_python()
