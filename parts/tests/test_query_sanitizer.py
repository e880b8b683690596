"""
Tests for the query sanitizer used by the parts views

Run with: python -m pytest parts/tests/test_query_sanitizer.py -v
"""

import pytest

from parts.query_sanitizer import MAX_QUERY_LENGTH, sanitize_query, validate_query


class TestSanitizeQuery:

    @pytest.mark.parametrize("raw", [None, "", 42, ["brake pads"]])
    def test_non_strings_become_empty(self, raw):
        assert sanitize_query(raw) == ""

    def test_markup_is_stripped(self):
        assert sanitize_query("<script>x</script>bosch <b>pads</b>") == "xbosch pads"

    def test_entities_are_unescaped(self):
        assert sanitize_query("brake &amp; clutch") == "brake & clutch"

    def test_control_characters_are_removed(self):
        assert sanitize_query("brake\x00 pads\x07") == "brake pads"

    def test_invisible_marks_are_removed(self):
        raw = "\u200bبطارية \u200dتويوتا\ufeff"
        assert sanitize_query(raw) == "بطارية تويوتا"

    def test_whitespace_is_collapsed(self):
        assert sanitize_query("  brake \t\n pads  ") == "brake pads"

    def test_long_queries_are_truncated(self):
        assert len(sanitize_query("a" * (MAX_QUERY_LENGTH + 50))) == MAX_QUERY_LENGTH


class TestValidateQuery:

    @pytest.mark.parametrize("query", ["刹车片", "фильтр", "ブレーキ", "x5", "7"])
    def test_any_script_is_accepted(self, query):
        assert validate_query(query) is None

    def test_empty_query_names_the_parameter(self):
        assert "'query'" in validate_query("", param="query")
        assert "'q'" in validate_query("")

    @pytest.mark.parametrize("query", ["???", "---", "_"])
    def test_punctuation_only_is_rejected(self, query):
        assert "letter or digit" in validate_query(query)

    def test_overlong_unsanitized_query_is_rejected(self):
        assert "at most" in validate_query("a" * (MAX_QUERY_LENGTH + 1))
