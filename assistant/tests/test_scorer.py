"""
Tests for intent classification and the composite scorer.

Run with: python -m pytest assistant/tests/test_scorer.py -v
"""

import pytest

from assistant.services.catalog import CatalogItem
from assistant.services.intent_classifier import classify_intent
from assistant.services.scorer import (
    CompositeScorer,
    PHRASE_CATEGORY_COMPATIBILITY,
    INTENT_CATEGORY_BONUS,
)

VIP = CatalogItem(
    title="Paket VIP 12 Hari",
    description="Hotel bintang 4 dekat masjid",
    url="/services#vip",
    category="Paket",
    keywords=("vip", "premium"),
)
WHATSAPP = CatalogItem(
    title="Admin WA",
    description="Hubungi admin lewat wa",
    url="/contact",
    category="Kontak",
    keywords=("wa", "kontak"),
)
INFO = CatalogItem(
    title="Info",
    description="paket hemat tersedia",
    url="/",
    category="Informasi",
)


def _manasik(i):
    return CatalogItem(
        title=f"Manasik Gratis {i}",
        description="Bimbingan manasik sebelum berangkat",
        url="/services#manasik",
        category="Manasik",
        keywords=("manasik",),
    )


class TestIntentClassifier:

    @pytest.mark.parametrize("query,intent", [
        ("nomor wa admin", "kontak"),
        ("hubungi", "kontak"),
        ("jadwal manasik", "manasik"),
        ("booking seat", "booking"),
        ("paket vip", "paket_vip"),
        ("paket murah", "paket_reguler"),
        ("alamat kantor", "alamat"),
        ("harga paket", "paket_umum"),
        ("fasilitas hotel", "layanan"),
        ("halo", "fuzzy"),
        ("", "fuzzy"),
    ])
    def test_rules(self, preprocessor, query, intent):
        assert classify_intent(preprocessor.process(query)) == intent

    def test_contact_beats_vip(self, preprocessor):
        assert classify_intent(preprocessor.process("hubungi admin paket vip")) == "kontak"

    def test_manasik_beats_booking(self, preprocessor):
        assert classify_intent(preprocessor.process("daftar manasik")) == "manasik"


class TestLookupTables:

    def test_phrase_compatibility(self):
        assert PHRASE_CATEGORY_COMPATIBILITY["pricing"] == {"Paket"}
        assert PHRASE_CATEGORY_COMPATIBILITY["location"] == {"Kontak"}
        assert "Pembayaran" in PHRASE_CATEGORY_COMPATIBILITY["registration"]

    def test_contact_intent_bonus_is_largest(self):
        bonuses = {intent: bonus for intent, (_, bonus) in INTENT_CATEGORY_BONUS.items()}
        assert max(bonuses, key=bonuses.get) == "kontak"


class TestCompositeScorer:

    @pytest.fixture
    def scorer(self):
        return CompositeScorer(min_composite_score=10, max_results=5)

    def test_contact_item_scores(self, scorer, preprocessor, session):
        processed = preprocessor.process("nomor wa vip")
        # overlap 10 + contact phrase 25 + intent 60 + title 20 + keyword 15
        assert scorer.score(WHATSAPP, processed, session) == 130
        # overlap 10 + VIP entity 15 + title 20 + keyword 15
        assert scorer.score(VIP, processed, session) == 60

    def test_bigram_continuity(self, scorer, preprocessor, session):
        processed = preprocessor.process("paket hemat")
        assert scorer.score(INFO, processed, session) == 25

    def test_session_continuity(self, scorer, preprocessor, session):
        processed = preprocessor.process("nomor wa vip")
        fresh = scorer.score(WHATSAPP, processed, session)
        session.last_category = "Kontak"
        assert scorer.score(WHATSAPP, processed, session) == fresh + 10

    def test_persisted_entity(self, scorer, preprocessor, session):
        processed = preprocessor.process("hotel")
        assert scorer.score(VIP, processed, session) == 10
        session.detected_entities.add("is_vip")
        assert scorer.score(VIP, processed, session) == 20

    def test_rank_orders_by_final_score(self, scorer, preprocessor, session):
        processed = preprocessor.process("nomor wa vip")
        ranked = scorer.rank([(VIP, 0.0), (WHATSAPP, 0.2)], processed, session)
        assert [c.item for c in ranked] == [WHATSAPP, VIP]
        assert ranked[0].final == pytest.approx(138.0)
        assert session.last_category == "Kontak"
        assert session.token_history == [["nomor", "wa", "vip"]]

    def test_rank_drops_composite_at_threshold(self, scorer, preprocessor, session):
        processed = preprocessor.process("hotel")
        assert scorer.rank([(VIP, 0.0)], processed, session) == []
        # history is logged, category untouched
        assert session.last_category is None
        assert session.token_history == [["hotel"]]

    def test_rank_keeps_top_five_in_retrieval_order(self, scorer, preprocessor, session):
        items = [_manasik(i) for i in range(7)]
        processed = preprocessor.process("manasik")
        ranked = scorer.rank([(item, 0.1) for item in items], processed, session)
        assert [c.item for c in ranked] == items[:5]

    def test_rank_without_candidates(self, scorer, preprocessor, session):
        processed = preprocessor.process("zzz")
        assert scorer.rank([], processed, session) == []
        assert session.token_history == [["zzz"]]
