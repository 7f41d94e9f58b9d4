"""
Tests for the access mask codec
"""

import pytest
from smack_rules.access.mask import (
    AccessMask, RuleLayout, NO_ACCESS, ALL_ACCESS, parse_access, format_access
)


class TestParseAccess:
    """Test parsing textual access specs"""

    def test_parse_all_letters(self):
        """Test each letter maps to its bit"""
        assert parse_access("r") == AccessMask.READ
        assert parse_access("w") == AccessMask.WRITE
        assert parse_access("x") == AccessMask.EXECUTE
        assert parse_access("a") == AccessMask.APPEND
        assert parse_access("rwxa") == ALL_ACCESS

    def test_parse_is_case_insensitive(self):
        """Test upper and lower case letters are equivalent"""
        assert parse_access("RwXa") == parse_access("rwxa")

    def test_parse_ignores_unknown_characters(self):
        """Test unknown characters are silently ignored"""
        assert parse_access("0644") == NO_ACCESS
        assert parse_access("rwxat") == ALL_ACCESS
        assert parse_access("r-x-") == AccessMask.READ | AccessMask.EXECUTE

    def test_parse_duplicates_and_empty(self):
        """Test duplicates are idempotent and empty means no access"""
        assert parse_access("rrrr") == AccessMask.READ
        assert parse_access("") == NO_ACCESS
        assert int(parse_access("")) == 0

    def test_kernel_bit_values(self):
        """Test the bits use the kernel's values"""
        assert int(AccessMask.READ) == 1
        assert int(AccessMask.WRITE) == 2
        assert int(AccessMask.EXECUTE) == 4
        assert int(AccessMask.APPEND) == 16


class TestFormatAccess:
    """Test formatting access masks"""

    @pytest.mark.parametrize("spec,kernel,compact", [
        ("", "----", ""),
        ("r", "r---", "r"),
        ("xa", "--xa", "xa"),
        ("awr", "rw-a", "rwa"),
        ("rwxa", "rwxa", "rwxa"),
    ])
    def test_layouts(self, spec, kernel, compact):
        """Test kernel and compact layouts use the fixed R, W, X, A order"""
        mask = parse_access(spec)
        assert format_access(mask, RuleLayout.KERNEL) == kernel
        assert format_access(mask, RuleLayout.COMPACT) == compact

    def test_kernel_layout_is_fixed_width(self):
        """Test kernel layout is always four characters"""
        for value in range(32):
            assert len(format_access(value, RuleLayout.KERNEL)) == 4

    def test_unnamed_bits_are_ignored(self):
        """Test bits outside the four named ones are not formatted"""
        assert format_access(8 | 1, RuleLayout.COMPACT) == "r"
        assert format_access(8, RuleLayout.KERNEL) == "----"
