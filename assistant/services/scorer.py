"""
Composite Scorer

Re-ranks retrieval candidates with hand-tuned, purely additive signals:

| Signal              | Points                                              |
|---------------------|-----------------------------------------------------|
| Token overlap       | +10 per token in item text, +5 if bigram continues  |
| Full phrase         | +20 if all tokens (>=2) appear verbatim in title    |
| Phrase pattern      | pattern boost when the category is compatible       |
| Entity              | +15 VIP/Reguler/location/manasik, +10 urgency/price |
| Session continuity  | +10 if category == last matched category            |
| Intent              | +30..+60 when the category fits the intent          |
| Persisted entity    | +10 per accumulated entity still matching           |
| Direct field        | +20 title, +25 category, +15 exact keyword          |

Final ranking score = composite + (1 - dissimilarity) * 10, so retrieval
similarity always counts but never outweighs the signals above.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence, Tuple

from .catalog import (
    CatalogItem,
    CATEGORY_PAKET,
    CATEGORY_KONTAK,
    CATEGORY_LAYANAN,
    CATEGORY_MANASIK,
    CATEGORY_PEMBAYARAN,
    CATEGORY_INFORMASI,
)
from .intent_classifier import classify_intent
from .query_preprocessor import ProcessedQuery
from .session import SessionContext

logger = logging.getLogger(__name__)


# =============================================================================
# LOOKUP TABLES
# =============================================================================

# phrase-pattern intent -> categories that receive the pattern's boost
PHRASE_CATEGORY_COMPATIBILITY: Dict[str, FrozenSet[str]] = {
    "pricing": frozenset({CATEGORY_PAKET}),
    "budget_package": frozenset({CATEGORY_PAKET}),
    "premium_package": frozenset({CATEGORY_PAKET}),
    "contact": frozenset({CATEGORY_KONTAK}),
    "location": frozenset({CATEGORY_KONTAK}),
    "registration": frozenset({CATEGORY_PAKET, CATEGORY_PEMBAYARAN, CATEGORY_INFORMASI}),
}

# classified intent -> (expected categories, bonus)
INTENT_CATEGORY_BONUS: Dict[str, Tuple[FrozenSet[str], int]] = {
    "kontak": (frozenset({CATEGORY_KONTAK}), 60),
    "alamat": (frozenset({CATEGORY_KONTAK}), 50),
    "manasik": (frozenset({CATEGORY_MANASIK}), 40),
    "booking": (frozenset({CATEGORY_PAKET, CATEGORY_PEMBAYARAN}), 30),
    "paket_vip": (frozenset({CATEGORY_PAKET, CATEGORY_LAYANAN}), 30),
    "paket_reguler": (frozenset({CATEGORY_PAKET, CATEGORY_LAYANAN}), 30),
    "paket_umum": (frozenset({CATEGORY_PAKET, CATEGORY_LAYANAN}), 30),
    "layanan": (frozenset({CATEGORY_LAYANAN}), 30),
}

# entity flag -> (item predicate, bonus when raised by the current query)
ENTITY_MATCHERS: Dict[str, Tuple[Callable[[CatalogItem], bool], int]] = {
    "is_vip": (lambda item: "VIP" in item.title, 15),
    "is_reguler": (lambda item: "Reguler" in item.title, 15),
    "is_location": (lambda item: item.category == CATEGORY_KONTAK, 15),
    "is_manasik": (
        lambda item: item.category == CATEGORY_MANASIK or "manasik" in item.title.lower(),
        15,
    ),
    "is_urgent": (lambda item: item.category == CATEGORY_PAKET, 10),
    "is_pricing": (lambda item: item.category == CATEGORY_PAKET, 10),
}

PERSISTED_ENTITY_BONUS = 10
SESSION_CONTINUITY_BONUS = 10
RETRIEVAL_WEIGHT = 10


@dataclass(frozen=True)
class ScoredCandidate:
    item: CatalogItem
    composite: float
    dissimilarity: float

    @property
    def final(self) -> float:
        return self.composite + (1.0 - self.dissimilarity) * RETRIEVAL_WEIGHT


class CompositeScorer:
    """Scores and ranks candidates against a processed query and session."""

    def __init__(self, min_composite_score: float = 10.0, max_results: int = 5):
        self.min_composite_score = min_composite_score
        self.max_results = max_results

    def score(
        self,
        item: CatalogItem,
        processed: ProcessedQuery,
        session: SessionContext,
        intent: Optional[str] = None,
    ) -> float:
        tokens = processed.tokens
        text = item.search_text
        title = item.title.lower()
        category = item.category.lower()
        keywords = {k.lower() for k in item.keywords}
        score = 0.0

        # Token overlap with bigram continuity
        for i, token in enumerate(tokens):
            if token in text:
                score += 10
                if i > 0 and f"{tokens[i - 1]} {token}" in text:
                    score += 5

        # Full phrase in title
        if len(tokens) >= 2 and processed.phrase_text in title:
            score += 20

        # Phrase patterns
        for phrase in processed.phrases:
            if item.category in PHRASE_CATEGORY_COMPATIBILITY.get(phrase.intent, ()):
                score += phrase.boost

        # Entities raised by this query
        for flag in processed.entities.active():
            matcher = ENTITY_MATCHERS.get(flag)
            if matcher and matcher[0](item):
                score += matcher[1]

        # Conversation continuity
        if session.last_category is not None and session.last_category == item.category:
            score += SESSION_CONTINUITY_BONUS

        # Intent
        if intent is None:
            intent = classify_intent(processed)
        expected = INTENT_CATEGORY_BONUS.get(intent)
        if expected and item.category in expected[0]:
            score += expected[1]

        # Entities accumulated over the whole session
        for flag in session.detected_entities:
            matcher = ENTITY_MATCHERS.get(flag)
            if matcher and matcher[0](item):
                score += PERSISTED_ENTITY_BONUS

        # Direct field hits
        for token in tokens:
            if token in title:
                score += 20
            if token in category:
                score += 25
            if token in keywords:
                score += 15

        return score

    def rank(
        self,
        candidates: Sequence[Tuple[CatalogItem, float]],
        processed: ProcessedQuery,
        session: SessionContext,
    ) -> List[ScoredCandidate]:
        """
        Score, threshold and sort candidates, then update the session.

        Only candidates whose composite score exceeds the minimum survive;
        the survivors are sorted by final score (stable, so equal scores keep
        retrieval order) and truncated to max_results.
        """
        intent = classify_intent(processed)
        scored = [
            ScoredCandidate(
                item=item,
                composite=self.score(item, processed, session, intent=intent),
                dissimilarity=dissimilarity,
            )
            for item, dissimilarity in candidates
        ]

        survivors = [c for c in scored if c.composite > self.min_composite_score]
        survivors.sort(key=lambda c: c.final, reverse=True)
        survivors = survivors[:self.max_results]

        for c in survivors:
            logger.debug(f"  {c.final:6.1f}  {c.item.title} (composite {c.composite:.0f}, dissimilarity {c.dissimilarity:.2f})")

        session.record_ranking(processed.tokens, survivors[0].item.category if survivors else None)
        return survivors
