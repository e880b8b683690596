"""
Tests for the Lexical Normalizer

Run with: python -m pytest parts/tests/test_normalizer.py -v
"""

import pytest

from parts.services.intent import Language
from parts.services.normalizer import (
    NormalizedQuery,
    correct_typos,
    detect_language,
    normalize,
    tokenize,
    translate_terms,
)


class TestLanguageDetection:
    """Unicode blocks first, then Latin-script heuristics."""

    @pytest.mark.parametrize("text,expected", [
        ("刹车片", Language.ZH),
        ("ブレーキパッド", Language.JA),
        ("브레이크 패드", Language.KO),
        ("фильтр масляный", Language.RU),
        ("فحمات الفرامل", Language.AR),
    ])
    def test_script_blocks(self, text, expected):
        assert detect_language(text) == expected

    def test_kana_wins_over_shared_ideographs(self):
        assert detect_language("在庫あり") == Language.JA

    def test_german_by_diacritics_and_stop_words(self):
        assert detect_language("bremsbeläge günstig für golf") == Language.DE

    def test_english_default(self):
        assert detect_language("bosch brake pads under 500") == Language.EN

    def test_empty_is_english(self):
        assert detect_language("") == Language.EN
        assert detect_language("   ") == Language.EN

    def test_numbers_only_is_english(self):
        assert detect_language("06a115561b 12345") == Language.EN


class TestTranslation:
    """Dictionary substitution for non-English queries."""

    def test_chinese_terms_are_spaced_out(self):
        result = translate_terms("在库便宜的刹车片", Language.ZH)
        assert "in stock" in result
        assert "cheap" in result
        assert "brake pads" in result

    def test_russian_phrase(self):
        result = translate_terms("тормозные колодки в наличии", Language.RU)
        assert result == "brake pads in stock"

    def test_english_is_untouched(self):
        assert translate_terms("brake pads", Language.EN) == "brake pads"


class TestTypoCorrection:

    def test_brand_typos(self):
        assert correct_typos("bosh filtr") == "bosch filter"

    def test_vehicle_make_typo(self):
        assert correct_typos("toyta corolla") == "toyota corolla"

    def test_whole_words_only(self):
        # "bosh" inside a longer token is not a typo
        assert correct_typos("boshx") == "boshx"


class TestNormalize:
    """End-to-end normalization."""

    def test_returns_normalized_query(self):
        result = normalize("  Bosch   Brake Pads ")
        assert isinstance(result, NormalizedQuery)
        assert result.canonical == "bosch brake pads"
        assert result.original == "  Bosch   Brake Pads "
        assert result.detected_language == Language.EN

    def test_chinese_query(self):
        result = normalize("在库便宜的刹车片")
        assert result.detected_language == Language.ZH
        assert "in stock" in result.canonical
        assert "cheap" in result.canonical
        assert "brake pads" in result.canonical
        assert result.original == "在库便宜的刹车片"

    def test_full_width_digits_are_folded(self):
        assert normalize("ＲＣ０００９").canonical == "rc0009"

    def test_typos_corrected_for_english(self):
        assert normalize("Bosh filtr").canonical == "bosch filter"

    @pytest.mark.parametrize("raw", [None, "", "   ", 12345, "\x00\x01", "🔧🔧"])
    def test_never_raises(self, raw):
        result = normalize(raw)
        assert isinstance(result.canonical, str)
        assert isinstance(result.detected_language, Language)

    def test_to_dict(self):
        data = normalize("filtr").to_dict()
        assert data == {"canonical": "filter", "original": "filtr", "detectedLanguage": "en"}


class TestTokenize:

    def test_keeps_codes_joined(self):
        assert tokenize("need 06a-115/561b now") == ["need", "06a-115/561b", "now"]

    def test_single_characters(self):
        assert tokenize("a b") == ["a", "b"]
