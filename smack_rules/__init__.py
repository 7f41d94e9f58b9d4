"""
Smack rule library
In-memory Smack access rules with a text rule file codec
"""

__version__ = "0.1.0"

# Core exports
from .config import RulesConfig, get_rules_config, update_rules_config
from .logs import configure_logging

# Access masks
from .access import (
    AccessMask, RuleLayout, NO_ACCESS, ALL_ACCESS,
    parse_access, format_access
)

# Rules
from .rules import (
    RuleStore, AccessRule,
    read_rules, load_rules, save_rules,
    parse_rule_line, format_rule_line
)

# Errors
from .exceptions import (
    SmackRulesError, LabelRangeError, RuleStoreClosedError,
    RuleFormatError, RuleFileError, ValidationError
)

# Utilities
from .utils import is_valid_label, validate_label

__all__ = [
    # Config
    "RulesConfig",
    "get_rules_config",
    "update_rules_config",
    "configure_logging",

    # Access masks
    "AccessMask",
    "RuleLayout",
    "NO_ACCESS",
    "ALL_ACCESS",
    "parse_access",
    "format_access",

    # Rules
    "RuleStore",
    "AccessRule",
    "read_rules",
    "load_rules",
    "save_rules",
    "parse_rule_line",
    "format_rule_line",

    # Errors
    "SmackRulesError",
    "LabelRangeError",
    "RuleStoreClosedError",
    "RuleFormatError",
    "RuleFileError",
    "ValidationError",

    # Utils
    "is_valid_label",
    "validate_label",
]
