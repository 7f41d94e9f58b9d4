"""
Constants for the Smack rule library

Label limits, access-code letters, rule file layout widths
and error codes shared across the package.
"""

from typing import Final, Tuple

# =============================================================================
# LABELS
# =============================================================================

SMACK_LABEL_LEN: Final[int] = 23

# =============================================================================
# ACCESS CODES
# =============================================================================

class AccessCodes:
    """Access letters in the fixed R, W, X, A output order"""
    READ: Final[str] = "r"
    WRITE: Final[str] = "w"
    EXECUTE: Final[str] = "x"
    APPEND: Final[str] = "a"

    ORDER: Final[Tuple[str, ...]] = (READ, WRITE, EXECUTE, APPEND)

    # Placeholder for an unset bit in the kernel layout
    UNSET: Final[str] = "-"

    KERNEL_WIDTH: Final[int] = 4


# =============================================================================
# RULE FILE FORMAT
# =============================================================================

class RuleFileFormat:
    """Textual rule file parameters"""
    FIELD_SEPARATOR: Final[str] = " "
    LINE_TERMINATOR: Final[str] = "\n"
    TOKENS_PER_LINE: Final[int] = 3

    # Kernel layout column widths
    KERNEL_LABEL_WIDTH: Final[int] = SMACK_LABEL_LEN
    KERNEL_ACCESS_WIDTH: Final[int] = AccessCodes.KERNEL_WIDTH

    # Undecodable bytes in a rule file are carried through unchanged
    ENCODING_ERRORS: Final[str] = "surrogateescape"


# =============================================================================
# ERROR CODES
# =============================================================================

class ErrorCodes:
    """Standardized error codes for the rule library"""
    UNKNOWN_ERROR: Final[str] = "UNKNOWN_ERROR"
    VALIDATION_ERROR: Final[str] = "VALIDATION_ERROR"

    LABEL_RANGE: Final[str] = "LABEL_RANGE"
    STORE_CLOSED: Final[str] = "STORE_CLOSED"

    RULE_FORMAT: Final[str] = "RULE_FORMAT"
    RULE_FILE: Final[str] = "RULE_FILE"
