"""Tests for element and attribute name sanitization."""

import pytest

from xml_structure.structure.naming import sanitize_name


class TestSanitizeName:
    """Test the default substitution table."""

    def test_all_disallowed_characters(self):
        """Test a name containing every substituted character."""
        assert sanitize_name("a-b:c.d") == "a_dash_b_colon_c_dot_d"

    @pytest.mark.parametrize("name, expected", [
        ("plain", "plain"),
        ("data-id", "data_dash_id"),
        ("xsi:type", "xsi_colon_type"),
        ("v1.2", "v1_dot_2"),
        ("--", "_dash__dash_"),
        ("", ""),
    ])
    def test_individual_substitutions(self, name, expected):
        """Test representative names."""
        assert sanitize_name(name) == expected

    def test_result_has_no_disallowed_characters(self):
        """Test that sanitized names never contain substituted characters."""
        result = sanitize_name("ns:my-element.v2:x")
        assert not any(char in result for char in "-:.")


class TestCustomSubstitutions:
    """Test configurable substitution tables."""

    def test_replacement_text_is_not_substituted_again(self):
        """Test single-pass, left-to-right replacement."""
        substitutions = (("a", "b"), ("b", "c"))
        assert sanitize_name("ab", substitutions) == "bc"

    def test_longest_source_wins(self):
        """Test that overlapping sources prefer the longest match."""
        substitutions = (("-", "_"), ("--", "="))
        assert sanitize_name("a--b-c", substitutions) == "a=b_c"

    def test_empty_table_returns_name_unchanged(self):
        """Test that no substitutions leave the name untouched."""
        assert sanitize_name("a-b", ()) == "a-b"
