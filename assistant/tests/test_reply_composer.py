"""
Tests for the reply composer and its WhatsApp link helpers.

Run with: python -m pytest assistant/tests/test_reply_composer.py -v
"""

from assistant.services.catalog import CatalogItem, CATEGORY_MANASIK, CATEGORY_SAPAAN
from assistant.services.engine import SearchResult
from assistant.services.query_preprocessor import EntityFlags
from assistant.services.reply_composer import (
    INTENT_LEADS,
    UNCERTAIN_PREFACE,
    ReplyComposer,
    price_label,
    whatsapp_url,
)

NUMBER = "6281222442100"


def make_result(items=(), intent="fuzzy", confidence=80, should_show_whatsapp=False):
    return SearchResult(
        results=tuple(items),
        intent=intent,
        entities=EntityFlags(),
        confidence=confidence,
        should_show_whatsapp=should_show_whatsapp,
    )


GREETING = CatalogItem(
    title="Salam dan Sapaan",
    description="Sapaan pembuka.",
    url="/",
    category=CATEGORY_SAPAAN,
    answer="Wa'alaikumussalam!",
)

MANASIK = CatalogItem(
    title="Manasik Umroh Gratis",
    description="Bimbingan manasik untuk semua jamaah.",
    url="/services",
    category=CATEGORY_MANASIK,
    answer="Manasik diadakan setiap hari Sabtu.",
)

PLAIN = CatalogItem(
    title="Jadwal Keberangkatan",
    description="Keberangkatan setiap bulan dari Kertajati.",
    url="/services",
    category="Informasi",
)


class TestHelpers:

    def test_whatsapp_url_is_encoded(self):
        url = whatsapp_url(NUMBER, "paket vip?")
        assert url.startswith(f"https://wa.me/{NUMBER}?text=")
        assert "paket%20vip%3F" in url
        assert " " not in url

    def test_price_label(self):
        assert price_label(35500000) == "Rp 35.5Jt-an"

    def test_price_label_missing(self):
        assert price_label(None) is None
        assert price_label(0) is None


class TestReplyComposer:

    def setup_method(self):
        self.composer = ReplyComposer(NUMBER)

    def test_no_results_hands_off(self):
        reply = self.composer.compose("visa turis", make_result(confidence=0))
        assert '"visa turis"' in reply.text
        assert reply.contact_url.startswith(f"https://wa.me/{NUMBER}?text=")
        assert reply.highlight is None

    def test_greeting_answers_directly(self):
        reply = self.composer.compose("halo", make_result([GREETING]))
        assert reply.text == "Wa'alaikumussalam!"
        assert reply.highlight is None

    def test_intent_lead_with_highlight(self):
        reply = self.composer.compose("manasik", make_result([MANASIK], intent="manasik", confidence=100))
        assert reply.text == INTENT_LEADS["manasik"]
        assert reply.highlight == "Manasik diadakan setiap hari Sabtu."

    def test_generic_lead_appends_description(self):
        reply = self.composer.compose("jadwal", make_result([PLAIN]))
        assert "Jadwal Keberangkatan" in reply.text
        assert reply.text.endswith("Keberangkatan setiap bulan dari Kertajati.")
        assert not reply.text.startswith(UNCERTAIN_PREFACE)

    def test_low_confidence_preface(self):
        reply = self.composer.compose("jadwal", make_result([PLAIN], confidence=20))
        assert reply.text.startswith(UNCERTAIN_PREFACE)

    def test_contact_url_only_when_triggered(self):
        quiet = self.composer.compose("jadwal", make_result([PLAIN]))
        warm = self.composer.compose("jadwal", make_result([PLAIN], should_show_whatsapp=True))
        assert quiet.contact_url is None
        assert warm.contact_url == whatsapp_url(NUMBER, "jadwal")

    def test_to_dict(self):
        data = self.composer.compose("halo", make_result([GREETING])).to_dict()
        assert set(data) == {"text", "highlight", "contact_url"}
