"""ELIZA pattern/transform engine: symbolic pattern matching with segment variables."""

# Main API
from eliza.eliza import Eliza

# Exceptions (for error handling)
from eliza.eliza_error import (
    ElizaError, ElizaTokenError, ElizaParseError, ElizaRuleError, ElizaSettingsError
)

# Value types
from eliza.eliza_value import ElizaValue, ElizaNumber, ElizaString, ElizaSymbol, ElizaList, symbols

# Matching
from eliza.eliza_bindings import ElizaBindings
from eliza.eliza_classifier import (
    is_variable, is_segment_marker, is_segment_pattern, contains_variables, pattern_variables
)
from eliza.eliza_matcher import ElizaMatcher, ElizaSegmentSearch, ElizaSearchState

# Rules and responses
from eliza.eliza_rules import ElizaRule, ElizaRuleMatch, ElizaRuleTable, ElizaRuleSelector
from eliza.eliza_default_rules import DEFAULT_RULES_SOURCE, default_rule_table
from eliza.eliza_responder import ElizaResponder
from eliza.eliza_settings import ElizaSettings

# Lower-level components (for advanced usage)
from eliza.eliza_token import ElizaToken, ElizaTokenType
from eliza.eliza_tokenizer import ElizaTokenizer
from eliza.eliza_parser import ElizaParser
from eliza.eliza_printer import ElizaPrinter


__all__ = [
    # Main API
    "Eliza",

    # Exceptions
    "ElizaError", "ElizaTokenError", "ElizaParseError", "ElizaRuleError", "ElizaSettingsError",

    # Value types
    "ElizaValue", "ElizaNumber", "ElizaString", "ElizaSymbol", "ElizaList", "symbols",

    # Matching
    "ElizaBindings", "ElizaMatcher", "ElizaSegmentSearch", "ElizaSearchState",
    "is_variable", "is_segment_marker", "is_segment_pattern", "contains_variables", "pattern_variables",

    # Rules and responses
    "ElizaRule", "ElizaRuleMatch", "ElizaRuleTable", "ElizaRuleSelector",
    "DEFAULT_RULES_SOURCE", "default_rule_table", "ElizaResponder", "ElizaSettings",

    # Lower-level components
    "ElizaToken", "ElizaTokenType", "ElizaTokenizer", "ElizaParser", "ElizaPrinter"
]
