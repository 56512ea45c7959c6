"""
Tests for the query preprocessor and typo correction.

Run with: python -m pytest assistant/tests/test_query_preprocessor.py -v
"""

import pytest

from assistant.services.lexicon import ENTITY_KEYWORDS, PACKAGE_VOCABULARY, SEMANTIC_MAP, SYNONYMS
from assistant.services.query_preprocessor import EntityFlags, PhraseMatch, QueryPreprocessor


class TestTypoCorrection:

    @pytest.mark.parametrize("token,expected", [
        ("umrohh", "umroh"),
        ("kantorr", "kantor"),
        ("ktor", "kantor"),
        ("pkt", "paket"),
        ("umr", "umroh"),
    ])
    def test_within_two_edits(self, preprocessor, token, expected):
        assert preprocessor.correct_typo(token) == expected

    def test_nearest_canonical_reports_distance(self, preprocessor):
        assert preprocessor.nearest_canonical("ktor") == ("kantor", 2)
        assert preprocessor.nearest_canonical("bandingkan") is None

    def test_tie_goes_to_first_key(self):
        preprocessor = QueryPreprocessor(phonetic_variants={"hari": [], "hati": []}, known_words=())
        assert preprocessor.correct_typo("haxi") == "hari"

    def test_closer_key_wins_over_earlier_key(self):
        preprocessor = QueryPreprocessor(phonetic_variants={"haxiss": [], "haxis": []}, known_words=())
        assert preprocessor.nearest_canonical("haxi") == ("haxis", 1)

    def test_pricing_word_keeps_its_meaning(self, preprocessor):
        result = preprocessor.process("tarif umroh")
        assert result.tokens == ["tarif", "umroh"]
        assert result.entities.is_pricing
        assert result.is_package_related

    @pytest.mark.parametrize("word", sorted(
        set(PACKAGE_VOCABULARY)
        | set(SEMANTIC_MAP)
        | {w for related in SEMANTIC_MAP.values() for w in related}
        | {w for keywords in ENTITY_KEYWORDS.values() for w in keywords}
    ))
    def test_lexicon_words_keep_their_meaning(self, preprocessor, word):
        assert preprocessor.normalize_token(word) == SYNONYMS.get(word, word)

    @pytest.mark.parametrize("word", ["kota", "lama", "hp", "rp", "biasa", "total"])
    def test_known_words_left_alone(self, preprocessor, word):
        assert preprocessor.correct_typo(word) == word


class TestQueryPreprocessor:

    # ==========================================================================
    # Tokenization
    # ==========================================================================

    def test_tokenize_strips_punctuation_and_short_tokens(self, preprocessor):
        assert preprocessor.tokenize("Berapa HARGA paket, a VIP?!") == ["berapa", "harga", "paket", "vip"]

    def test_tokenize_empty(self, preprocessor):
        assert preprocessor.tokenize("") == []
        assert preprocessor.tokenize("?! ...") == []

    def test_stop_words_removed_in_order(self, preprocessor):
        result = preprocessor.process("Berapa harga paket VIP?")
        assert result.tokens == ["harga", "paket", "vip"]

    # ==========================================================================
    # Normalization
    # ==========================================================================

    def test_synonyms(self, preprocessor):
        result = preprocessor.process("pengen daftar umrah")
        assert result.tokens == ["mau", "daftar", "umroh"]

    def test_phonetic_variant(self, preprocessor):
        assert preprocessor.process("umro").tokens == ["umroh"]
        assert preprocessor.process("manasek").tokens == ["manasik"]

    def test_edit_distance_correction(self, preprocessor):
        assert preprocessor.correct_typo("umrohh") == "umroh"
        assert preprocessor.correct_typo("kantorr") == "kantor"

    def test_unknown_token_unchanged(self, preprocessor):
        assert preprocessor.correct_typo("bandingkan") == "bandingkan"

    def test_stop_words_never_corrected(self, preprocessor):
        # "harus" is two edits from "harga"
        assert preprocessor.correct_typo("harus") == "harus"
        assert preprocessor.process("syarat yang harus dibawa").tokens == ["syarat", "dibawa"]

    def test_greeting_not_corrected_to_content_word(self, preprocessor):
        assert preprocessor.process("hai").tokens == ["halo"]

    # ==========================================================================
    # Expansion, entities, phrases
    # ==========================================================================

    def test_semantic_expansion(self, preprocessor):
        result = preprocessor.process("biaya umroh")
        assert result.expanded[:2] == ["biaya", "umroh"]
        assert "tarif" in result.expanded
        assert len(result.expanded) == len(set(result.expanded))
        # expansion never leaks into the positional tokens
        assert result.tokens == ["biaya", "umroh"]

    def test_entities(self, preprocessor):
        result = preprocessor.process("harga paket vip")
        assert result.entities.is_vip
        assert result.entities.is_pricing
        assert not result.entities.is_contact
        assert result.entities.active() == frozenset({"is_vip", "is_pricing"})

    def test_comparison_entity(self, preprocessor):
        assert preprocessor.process("bandingkan paket reguler vs vip").entities.is_comparison

    def test_phrases(self, preprocessor):
        result = preprocessor.process("harga paket vip")
        assert result.phrases == [
            PhraseMatch(pattern=("harga", "paket"), intent="pricing", boost=20),
            PhraseMatch(pattern=("paket", "vip"), intent="premium_package", boost=25),
        ]

    def test_phrase_needs_adjacent_tokens(self, preprocessor):
        result = preprocessor.process("mau daftar umroh")
        assert [p.intent for p in result.phrases] == ["registration"]

    @pytest.mark.parametrize("query,expected", [
        ("harga paket", True),
        ("booking seat", True),
        ("alamat kantor", False),
        ("halo", False),
    ])
    def test_package_relatedness(self, preprocessor, query, expected):
        assert preprocessor.process(query).is_package_related is expected

    def test_entities_accumulate_in_session(self, preprocessor, session):
        preprocessor.process("kantor dimana", session=session)
        assert session.detected_entities == {"is_location"}

        preprocessor.process("paket vip", session=session)
        preprocessor.process("kantor dimana", session=session)
        assert session.detected_entities == {"is_location", "is_vip"}

    def test_to_dict(self, preprocessor):
        data = preprocessor.process("nomor wa").to_dict()
        assert data["tokens"] == ["nomor", "wa"]
        assert data["entities"]["is_contact"] is True
        assert data["phrases"] == [{"intent": "contact", "boost": 25}]

    def test_entity_flags_default_to_false(self):
        assert EntityFlags().active() == frozenset()
