"""
Fuzzy Candidate Retriever

Narrow capability interface over an approximate multi-field string index:

    index = RapidFuzzIndexBuilder().index(catalog)
    candidates = index.query(["paket", "vip"])   # [(CatalogItem, dissimilarity)]

Dissimilarity lies in [0, 1], 0 being a perfect match. Any fuzzy library (or a
hand-rolled trigram index) can stand behind the interface; the default uses
rapidfuzz partial ratios, field-weighted title > keywords > description.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process

from .catalog import CatalogItem

logger = logging.getLogger(__name__)

DEFAULT_FIELD_WEIGHTS = {
    "title": 0.8,
    "keywords": 0.5,
    "description": 0.2,
}
DEFAULT_THRESHOLD = 0.45


class CandidateIndex(ABC):
    """A prebuilt index that answers OR-of-terms queries."""

    @abstractmethod
    def query(self, terms: Sequence[str]) -> List[Tuple[CatalogItem, float]]:
        """Return (item, dissimilarity) pairs, best first. No match -> []."""

    @abstractmethod
    def __len__(self) -> int:
        ...


class IndexBuilder(ABC):
    """Builds a CandidateIndex once over the catalog."""

    @abstractmethod
    def index(self, items: Sequence[CatalogItem]) -> CandidateIndex:
        ...


# =============================================================================
# rapidfuzz implementation
# =============================================================================

@dataclass(frozen=True)
class _IndexedItem:
    item: CatalogItem
    title: str
    keywords: Tuple[str, ...]
    description: str


class RapidFuzzIndex(CandidateIndex):
    """
    Scores every catalog item against every query term.

    For one term, each field's similarity is the best partial ratio of the
    term within that field (keywords are matched one by one). An item is a
    candidate when any field reaches 1 - threshold; its dissimilarity is one
    minus the weighted mean of the field similarities for its best term.
    """

    def __init__(
        self,
        items: Sequence[CatalogItem],
        field_weights: Optional[Dict[str, float]] = None,
        threshold: float = DEFAULT_THRESHOLD,
    ):
        self.field_weights = field_weights or DEFAULT_FIELD_WEIGHTS
        self.threshold = threshold
        self._min_similarity = 1.0 - threshold
        self._weight_total = sum(self.field_weights.values()) or 1.0
        self._entries = [
            _IndexedItem(
                item=item,
                title=item.title.lower(),
                keywords=tuple(k.lower() for k in item.keywords),
                description=item.description.lower(),
            )
            for item in items
        ]

    def __len__(self) -> int:
        return len(self._entries)

    def _field_similarities(self, term: str, entry: _IndexedItem) -> Dict[str, float]:
        keyword_hit = process.extractOne(term, entry.keywords, scorer=fuzz.partial_ratio) if entry.keywords else None
        return {
            "title": fuzz.partial_ratio(term, entry.title) / 100.0,
            "keywords": (keyword_hit[1] / 100.0) if keyword_hit else 0.0,
            "description": fuzz.partial_ratio(term, entry.description) / 100.0,
        }

    def query(self, terms: Sequence[str]) -> List[Tuple[CatalogItem, float]]:
        terms = [t.lower() for t in terms if t]
        if not terms or not self._entries:
            return []

        candidates = []
        for entry in self._entries:
            best_field = 0.0
            best_weighted = 0.0
            for term in terms:
                sims = self._field_similarities(term, entry)
                best_field = max(best_field, max(sims.values()))
                weighted = sum(
                    sims[name] * weight for name, weight in self.field_weights.items()
                ) / self._weight_total
                best_weighted = max(best_weighted, weighted)

            if best_field >= self._min_similarity:
                candidates.append((entry.item, round(1.0 - best_weighted, 4)))

        candidates.sort(key=lambda pair: pair[1])
        return candidates


class RapidFuzzIndexBuilder(IndexBuilder):
    """Default builder: rapidfuzz index with the website's field weights."""

    def __init__(
        self,
        field_weights: Optional[Dict[str, float]] = None,
        threshold: float = DEFAULT_THRESHOLD,
    ):
        self.field_weights = field_weights or dict(DEFAULT_FIELD_WEIGHTS)
        self.threshold = threshold

    def index(self, items: Sequence[CatalogItem]) -> RapidFuzzIndex:
        built = RapidFuzzIndex(items, field_weights=self.field_weights, threshold=self.threshold)
        logger.info(f"Fuzzy index built over {len(built)} catalog items (threshold {self.threshold})")
        return built
