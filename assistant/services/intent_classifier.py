"""
Intent Classifier

Derives one discrete intent label from a processed query. Rules are checked
in priority order and the first match wins, so a message that mentions both
the admin's number and the VIP package is a contact request.
"""

from typing import Callable, List, Tuple

from .query_preprocessor import ProcessedQuery

INTENT_KONTAK = "kontak"
INTENT_MANASIK = "manasik"
INTENT_BOOKING = "booking"
INTENT_PAKET_VIP = "paket_vip"
INTENT_PAKET_REGULER = "paket_reguler"
INTENT_ALAMAT = "alamat"
INTENT_PAKET_UMUM = "paket_umum"
INTENT_LAYANAN = "layanan"
INTENT_FUZZY = "fuzzy"


def _mentions(processed: ProcessedQuery, *words: str) -> bool:
    return any(w in processed.tokens for w in words)


# (intent, rule) in priority order
INTENT_RULES: List[Tuple[str, Callable[[ProcessedQuery], bool]]] = [
    (INTENT_KONTAK, lambda q: q.entities.is_contact or _mentions(q, "kontak", "hubungi")),
    (INTENT_MANASIK, lambda q: q.entities.is_manasik or _mentions(q, "manasik", "bimbingan")),
    (INTENT_BOOKING, lambda q: q.entities.is_urgent or _mentions(q, "booking", "daftar", "pesan")),
    (INTENT_PAKET_VIP, lambda q: q.entities.is_vip),
    (INTENT_PAKET_REGULER, lambda q: q.entities.is_reguler),
    (INTENT_ALAMAT, lambda q: q.entities.is_location or _mentions(q, "kantor", "alamat")),
    (INTENT_PAKET_UMUM, lambda q: _mentions(q, "paket", "harga", "biaya")),
    (INTENT_LAYANAN, lambda q: _mentions(q, "layanan", "fasilitas")),
]


def classify_intent(processed: ProcessedQuery) -> str:
    """Return the intent of the first matching rule, or "fuzzy" when none fires."""
    for intent, rule in INTENT_RULES:
        if rule(processed):
            return intent
    return INTENT_FUZZY
