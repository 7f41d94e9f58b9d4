"""
Access mask codec
Conversion between textual access specs and access bitmasks
"""

from enum import Enum, IntFlag
from typing import Dict, Tuple, Union

from ..constants import AccessCodes


class AccessMask(IntFlag):
    """Smack access bits, using the kernel's bit values"""
    READ = 1
    WRITE = 2
    EXECUTE = 4
    APPEND = 16


class RuleLayout(str, Enum):
    """Textual layouts for access masks and rule files"""
    KERNEL = "kernel"    # Fixed-column records for the kernel interface
    COMPACT = "compact"  # Set letters only, single-space separated


NO_ACCESS = AccessMask(0)

ALL_ACCESS = AccessMask.READ | AccessMask.WRITE | AccessMask.EXECUTE | AccessMask.APPEND

# Letter/bit pairs in output order
_ACCESS_LETTERS: Tuple[Tuple[str, AccessMask], ...] = tuple(zip(
    AccessCodes.ORDER,
    (AccessMask.READ, AccessMask.WRITE, AccessMask.EXECUTE, AccessMask.APPEND),
))

_LETTER_TO_BIT: Dict[str, AccessMask] = dict(_ACCESS_LETTERS)


def parse_access(spec: str) -> AccessMask:
    """
    Parse an access spec such as ``"rwx"`` into an access mask.

    Letters are matched case-insensitively and may repeat. Any other
    character is ignored, so the parse never fails; ``""`` is no access.
    """
    access = NO_ACCESS
    for char in spec.lower():
        access |= _LETTER_TO_BIT.get(char, NO_ACCESS)
    return access


def format_access(mask: Union[AccessMask, int], layout: RuleLayout) -> str:
    """Format an access mask as a kernel (``"r-x-"``) or compact (``"rx"``) string"""
    mask = AccessMask(int(mask) & int(ALL_ACCESS))

    if layout == RuleLayout.KERNEL:
        return "".join(
            letter if mask & bit else AccessCodes.UNSET
            for letter, bit in _ACCESS_LETTERS
        )

    return "".join(letter for letter, bit in _ACCESS_LETTERS if mask & bit)
