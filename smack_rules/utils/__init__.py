"""
Utility functions for the Smack rule library
"""

from .validators import is_valid_label, validate_label, label_length

__all__ = [
    "is_valid_label",
    "validate_label",
    "label_length",
]
