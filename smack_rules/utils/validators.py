"""
Label validators for the Smack rule library

The rule store only applies its length guard; callers that need
strict labels check them here before adding rules.
"""

from typing import Any

from ..constants import SMACK_LABEL_LEN
from ..exceptions import ValidationError

# =============================================================================
# VALIDATION FUNCTIONS
# =============================================================================

def label_length(label: str, field_name: str = "label") -> int:
    """
    Length of a label in bytes, as the kernel counts it.

    Labels are always measured as UTF-8, whatever encoding the rule
    file uses; bytes carried through with surrogateescape count as one.

    Raises:
        ValidationError: If the label holds a lone surrogate that has
            no byte form
    """
    try:
        return len(label.encode("utf-8", "surrogateescape"))
    except UnicodeEncodeError:
        raise ValidationError(
            f"{field_name} cannot be encoded as bytes",
            field=field_name
        )


def is_valid_label(label: Any) -> bool:
    """
    Check whether a value is a usable Smack label.

    A label is a non-empty string of at most SMACK_LABEL_LEN bytes
    (UTF-8) with no NUL character.
    """
    if not isinstance(label, str) or not label:
        return False

    if "\x00" in label:
        return False

    try:
        return label_length(label) <= SMACK_LABEL_LEN
    except ValidationError:
        return False


def validate_label(
    label: Any,
    field_name: str = "label"
) -> str:
    """
    Validate a Smack label.

    Args:
        label: Label to validate
        field_name: Field name for error messages

    Returns:
        The label, unchanged

    Raises:
        ValidationError: If validation fails
    """
    if label is None or (isinstance(label, str) and not label):
        raise ValidationError(f"{field_name} is required", field=field_name)

    if not isinstance(label, str):
        raise ValidationError(f"{field_name} must be a string", field=field_name)

    if "\x00" in label:
        raise ValidationError(
            f"{field_name} contains a NUL character",
            field=field_name
        )

    length = label_length(label, field_name)
    if length > SMACK_LABEL_LEN:
        raise ValidationError(
            f"{field_name} exceeds maximum length of {SMACK_LABEL_LEN} bytes",
            field=field_name,
            details={"length": length, "max_length": SMACK_LABEL_LEN}
        )

    return label
