"""The built-in ELIZA rule table."""

from eliza.eliza_rules import ElizaRuleTable


DEFAULT_RULES_SOURCE = """
; Each rule is (pattern response1 response2 ...).  Rules are tried in order.

(((?* ?X) hello (?* ?y))
 (How do you do. Please state your problem.))

(((?* ?X) I want (?* ?y))
 (What would it mean if you got ?y)
 (Why do you want ?y)
 (Suppose you got ?y soon))

(((?* ?X) if (?* ?y))
 (Do you really think its likely that ?y)
 (Do you wish that ?y)
 (What do you think about ?y)
 (Really-- if ?y))

(((?* ?X) no (?* ?y))
 (Why not?)
 (You are being a bit negative)
 (Are you saying "NO" just to be negative?))

(((?* ?X) I was (?* ?y))
 (Were you really?)
 (Perhaps I already knew you were ?y)
 (Why do you tell me you were ?y now?))

(((?* ?X) I feel (?* ?y))
 (Do you often feel ?y ?))

(((?* ?X) I felt (?* ?y))
 (What other feelings do you have?))
"""


def default_rule_table() -> ElizaRuleTable:
    """Parse the built-in rule table."""
    return ElizaRuleTable.from_source(DEFAULT_RULES_SOURCE)
