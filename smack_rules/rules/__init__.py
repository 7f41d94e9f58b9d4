"""
Rule store and rule file codec
"""

from .store import RuleStore, AccessRule
from .codec import (
    read_rules, load_rules, save_rules,
    parse_rule_line, format_rule_line
)

__all__ = [
    "RuleStore",
    "AccessRule",
    "read_rules",
    "load_rules",
    "save_rules",
    "parse_rule_line",
    "format_rule_line",
]
