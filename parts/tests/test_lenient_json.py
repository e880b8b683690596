"""
Tests for lenient JSON decoding of model output

Run with: python -m pytest parts/tests/test_lenient_json.py -v
"""

import pytest

from parts.services.lenient_json import (
    extract_balanced_object,
    lenient_loads,
    repair_json,
    strip_fences,
)


class TestLenientLoads:

    def test_strict_json(self):
        assert lenient_loads('{"topN": 3}') == {"topN": 3}

    def test_fenced_json(self):
        text = 'Here you go:\n```json\n{"partNumbers": ["RC0009"]}\n```'
        assert lenient_loads(text) == {"partNumbers": ["RC0009"]}

    def test_prose_around_object(self):
        text = 'Sure! The intent is {"vehicleBrand": "TOYOTA", "topN": 5} hope that helps'
        assert lenient_loads(text) == {"vehicleBrand": "TOYOTA", "topN": 5}

    def test_trailing_comma(self):
        assert lenient_loads('{"a": 1, "b": [1, 2,],}') == {"a": 1, "b": [1, 2]}

    def test_truncated_object_is_repaired(self):
        text = '{"searchKeywords": ["brake", "pad'
        assert lenient_loads(text) == {"searchKeywords": ["brake", "pad"]}

    def test_truncated_after_key(self):
        assert lenient_loads('{"topN": 3, "summary"') == {"topN": 3}

    def test_braces_inside_strings(self):
        text = 'x {"summary": "use } carefully", "topN": 2} y'
        assert lenient_loads(text) == {"summary": "use } carefully", "topN": 2}

    @pytest.mark.parametrize("text", [None, "", "no json here", "[1, 2, 3]", "42", '"text"', 123])
    def test_non_objects_yield_none(self, text):
        assert lenient_loads(text) is None


class TestHelpers:

    def test_strip_fences_without_closing_fence(self):
        assert strip_fences('```json\n{"a": 1}') == '{"a": 1}'

    def test_extract_balanced_object_none_when_unclosed(self):
        assert extract_balanced_object('{"a": {"b": 1}') is None

    def test_extract_first_object(self):
        assert extract_balanced_object('{"a": 1} {"b": 2}') == '{"a": 1}'

    def test_repair_closes_nested_brackets(self):
        assert repair_json('{"a": {"b": [1, 2') == '{"a": {"b": [1, 2]}}'
