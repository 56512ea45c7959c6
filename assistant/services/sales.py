"""
Sales Intelligence

Decides when the conversation is warm enough to suggest talking to a human
agent. The engine only raises the flag and the message; the caller decides
how to surface the contact channel.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .session import SessionContext

logger = logging.getLogger(__name__)

TIER_DISPLAY_NAMES = {
    "reguler": "Paket Reguler",
    "vip": "Paket VIP",
    "eksklusif": "Paket Eksklusif",
}

DEFAULT_MESSAGE = (
    "Sepertinya Anda sedang merencanakan umroh. Yuk konsultasi gratis dengan "
    "tim kami via WhatsApp untuk cek jadwal keberangkatan dan sisa kuota!"
)
INTEREST_MESSAGE = (
    "Sepertinya Anda tertarik dengan {package}. Yuk konsultasi gratis dengan "
    "tim kami via WhatsApp untuk cek jadwal keberangkatan dan sisa kuota!"
)


@dataclass(frozen=True)
class CallToAction:
    triggered: bool = False
    message: Optional[str] = None


class SalesIntelligence:
    """Call-to-action trigger over the session counters."""

    def __init__(self, package_query_threshold: int = 2, total_query_threshold: int = 3):
        self.package_query_threshold = package_query_threshold
        self.total_query_threshold = total_query_threshold

    def should_trigger(self, session: SessionContext) -> bool:
        return (
            session.package_query_count >= self.package_query_threshold
            or session.query_count >= self.total_query_threshold
        )

    def compose_message(self, session: SessionContext) -> str:
        tier = session.top_package_interest
        if tier in TIER_DISPLAY_NAMES:
            return INTEREST_MESSAGE.format(package=TIER_DISPLAY_NAMES[tier])
        return DEFAULT_MESSAGE

    def evaluate(self, session: SessionContext) -> CallToAction:
        if not self.should_trigger(session):
            return CallToAction()

        logger.info(
            f"Call-to-action raised after {session.query_count} queries "
            f"({session.package_query_count} package-related, interest={session.top_package_interest})"
        )
        return CallToAction(triggered=True, message=self.compose_message(session))
