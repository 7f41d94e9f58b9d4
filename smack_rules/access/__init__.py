"""
Access mask module
Access bits, textual layouts and the access spec codec
"""

from .mask import (
    AccessMask, RuleLayout, NO_ACCESS, ALL_ACCESS,
    parse_access, format_access
)

__all__ = [
    "AccessMask",
    "RuleLayout",
    "NO_ACCESS",
    "ALL_ACCESS",
    "parse_access",
    "format_access",
]
