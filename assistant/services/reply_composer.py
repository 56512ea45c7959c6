"""
Reply Composer

Turns a SearchResult into the conversational text the chat widget shows, and
builds the WhatsApp hand-off link. Text only; rendering stays in the widget.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from .catalog import CATEGORY_SAPAAN
from .engine import SearchResult

LOW_CONFIDENCE = 30

UNCERTAIN_PREFACE = "Saya kurang yakin, tapi mungkin ini yang Anda cari:"

INTENT_LEADS = {
    "paket_vip": "Berikut adalah pilihan Paket VIP & Eksklusif kami untuk kenyamanan maksimal ibadah Anda:",
    "paket_reguler": "Kami memiliki paket Hemat & Reguler yang sangat terjangkau namun tetap berkualitas:",
    "alamat": "Kantor Al-Bait Tour & Travel berlokasi di Cirebon. Berikut detail alamatnya:",
    "kontak": "Silakan hubungi tim kami untuk konsultasi gratis mengenai rencana umroh Anda:",
    "manasik": "Kami memberikan bimbingan manasik gratis untuk semua jamaah:",
    "booking": "Berikut informasi pendaftaran dan booking seat umroh:",
}

GENERIC_LEAD = "Saya menemukan informasi paling relevan tentang {title}:"

NO_ANSWER = (
    "Mohon maaf, saya belum menemukan jawaban yang pas untuk \"{query}\". "
    "Silakan hubungi WhatsApp Admin kami, tim kami siap membantu."
)

WHATSAPP_GREETING = "Assalamu'alaikum CS Al-Bait, saya ingin bertanya tentang: "


@dataclass(frozen=True)
class Reply:
    text: str
    highlight: Optional[str] = None
    contact_url: Optional[str] = None

    def to_dict(self):
        return {"text": self.text, "highlight": self.highlight, "contact_url": self.contact_url}


def whatsapp_url(number: str, query: str) -> str:
    """wa.me deep link pre-filled with the user's question."""
    return f"https://wa.me/{number}?text={quote(WHATSAPP_GREETING + query, safe='')}"


def price_label(price: Optional[int]) -> Optional[str]:
    """
    Short price for result chips.

    Examples:
        >>> price_label(35500000)
        "Rp 35.5Jt-an"
    """
    if not price or price <= 0:
        return None
    return f"Rp {price / 1_000_000:.1f}Jt-an"


class ReplyComposer:

    def __init__(self, whatsapp_number: str):
        self.whatsapp_number = whatsapp_number

    def compose(self, query: str, result: SearchResult) -> Reply:
        if not result.results:
            return Reply(
                text=NO_ANSWER.format(query=query),
                contact_url=whatsapp_url(self.whatsapp_number, query),
            )

        top = result.results[0]
        contact_url = whatsapp_url(self.whatsapp_number, query) if result.should_show_whatsapp else None

        # Greetings answer directly, without preface or lead
        if result.intent not in INTENT_LEADS and top.category == CATEGORY_SAPAAN:
            return Reply(text=top.answer or top.description, contact_url=contact_url)

        parts = []
        if result.confidence < LOW_CONFIDENCE:
            parts.append(UNCERTAIN_PREFACE)
        parts.append(INTENT_LEADS.get(result.intent) or GENERIC_LEAD.format(title=top.title))

        if top.answer and top.category != CATEGORY_SAPAAN:
            return Reply(text=" ".join(parts), highlight=top.answer, contact_url=contact_url)

        parts.append(top.description)
        return Reply(text=" ".join(parts), contact_url=contact_url)
