"""
End-to-end tests for the search engine over the bundled catalog.

Run with: python -m pytest assistant/tests/test_engine.py -v
"""

import pytest

from albait.config import AssistantConfig

from assistant.services.catalog import CatalogItem
from assistant.services.engine import SearchEngine, compute_confidence
from assistant.services.retriever import CandidateIndex


class _EverythingIndex(CandidateIndex):
    """Returns every item at a fixed dissimilarity."""

    def __init__(self, items, dissimilarity=0.5):
        self.items = list(items)
        self.dissimilarity = dissimilarity
        self.queries = []

    def __len__(self):
        return len(self.items)

    def query(self, terms):
        self.queries.append(list(terms))
        return [(item, self.dissimilarity) for item in self.items]


class TestConfidence:

    def test_no_survivors(self):
        assert compute_confidence(None) == 0

    def test_doubled_and_capped(self):
        assert compute_confidence(12.4) == 25
        assert compute_confidence(80) == 100


class TestSearchEngine:

    # ==========================================================================
    # Ranking
    # ==========================================================================

    @pytest.mark.parametrize("query,title", [
        ("Paket Eksklusif 9 Hari", "Paket Eksklusif 9 Hari"),
        ("Manasik Umroh Gratis", "Manasik Umroh Gratis"),
        ("Alamat Kantor Cirebon", "Alamat Kantor Cirebon"),
    ])
    def test_exact_title_ranks_first(self, engine, query, title):
        result = engine.search(query)
        assert result.results[0].title == title

    def test_typo_tolerance(self, engine):
        result = engine.search("manasek umro")
        assert result.intent == "manasik"
        assert result.results[0].title == "Manasik Umroh Gratis"

    def test_contact_intent_wins_over_vip(self, engine):
        result = engine.search("nomor wa vip")
        assert result.intent == "kontak"
        assert result.results[0].category == "Kontak"

    def test_at_most_five_results(self, engine):
        assert len(engine.search("paket umroh harga biaya hotel").results) <= 5

    def test_expanded_terms_sent_to_index(self, catalog, assistant_settings):
        index = _EverythingIndex(catalog)
        engine = SearchEngine(catalog=catalog, index=index, settings=assistant_settings)
        engine.search("biaya umroh")
        assert index.queries[0][:2] == ["biaya", "umroh"]
        assert "tarif" in index.queries[0]

    # ==========================================================================
    # Session
    # ==========================================================================

    def test_entities_only_accumulate(self, engine):
        engine.search("paket vip")
        first = set(engine.session.detected_entities)
        engine.search("alamat kantor cirebon")
        engine.search("paket vip")
        assert first <= engine.session.detected_entities
        assert "is_location" in engine.session.detected_entities

    def test_sessions_are_independent(self, catalog, assistant_settings):
        a = SearchEngine(catalog=catalog, settings=assistant_settings)
        b = SearchEngine(catalog=catalog, index=a.index, settings=assistant_settings)
        a.search("paket vip")
        assert b.session.query_count == 0
        assert b.session.detected_entities == set()

    def test_last_category_follows_top_result(self, engine):
        engine.search("alamat kantor")
        assert engine.session.last_category == "Kontak"

    # ==========================================================================
    # Fallback
    # ==========================================================================

    def test_fallback_with_empty_catalog(self, assistant_settings):
        engine = SearchEngine(catalog=[], settings=assistant_settings)
        result = engine.search("alamat kantor")
        assert result.fallback_used
        assert result.results
        assert all(item.source == "page" for item in result.results)
        assert result.results[0].category == "Kontak"
        assert result.confidence >= 50

    def test_fallback_items_prepended(self, assistant_settings):
        item = CatalogItem(title="Ziarah Madinah", description="ziarah", url="/", category="Informasi", keywords=("ziarah",))
        engine = SearchEngine(catalog=[item], settings=assistant_settings)
        result = engine.search("ziarah")
        assert result.fallback_used
        assert result.results[0].source == "page"
        assert result.results[-1] == item

    def test_at_most_two_fallback_items(self, assistant_settings):
        engine = SearchEngine(catalog=[], settings=assistant_settings)
        result = engine.search("umroh")
        assert len(result.results) == 2

    def test_fallback_respects_result_cap(self):
        settings = AssistantConfig(catalog_path=None, max_results=1)
        item = CatalogItem(title="Ziarah Madinah", description="ziarah", url="/", category="Informasi", keywords=("ziarah",))
        engine = SearchEngine(catalog=[item], settings=settings)
        result = engine.search("ziarah")
        assert len(result.results) == 1
        assert result.results[0].source == "page"

    def test_nothing_found(self, assistant_settings):
        engine = SearchEngine(catalog=[], settings=assistant_settings)
        result = engine.search("zzzz qqqq")
        assert result.results == ()
        assert result.confidence == 0
        assert not result.fallback_used

    def test_empty_query(self, engine):
        result = engine.search("")
        assert result.results == ()
        assert result.confidence == 0
        assert result.intent == "fuzzy"
        assert result.query_count == 1

    # ==========================================================================
    # Sales intelligence and comparison
    # ==========================================================================

    def test_call_to_action_on_third_query(self, engine):
        flags = [engine.search(q).should_show_whatsapp for q in ["halo", "jadwal keberangkatan", "legalitas"]]
        assert flags == [False, False, True]

    def test_call_to_action_on_second_package_query(self, engine):
        assert not engine.search("harga paket").should_show_whatsapp
        result = engine.search("paket vip")
        assert result.should_show_whatsapp
        assert result.package_query_count == 2
        assert result.query_count == 2
        assert result.package_interest == "vip"
        assert result.whatsapp_message

    def test_comparison_table(self, engine):
        result = engine.search("bandingkan paket")
        assert result.entities.is_comparison
        assert [p.price for p in result.comparison.packages] == ["Rp 28.5 Juta", "Rp 35.5 Juta", "Rp 42.5 Juta"]
        assert [p.name for p in result.comparison.packages] == [
            "Paket Reguler 9 Hari",
            "Paket VIP 12 Hari",
            "Paket Eksklusif 9 Hari",
        ]
        assert result.comparison.packages[1].is_recommended

    def test_no_comparison_without_comparison_entity(self, engine):
        assert engine.search("paket vip").comparison is None

    def test_to_dict(self, engine):
        data = engine.search("bandingkan paket").to_dict()
        assert set(data) >= {"results", "intent", "entities", "confidence", "should_show_whatsapp", "comparison"}
        assert isinstance(data["results"][0]["keywords"], list)
        assert data["comparison"]["packages"][0]["price"] == "Rp 28.5 Juta"
