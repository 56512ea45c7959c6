"""
Search Engine

Answers one conversation's questions against the catalog:

    raw query -> QueryPreprocessor
              -> fuzzy candidates -> CompositeScorer   (ranked, thresholded)
              -> intent classifier
              -> ContentSearcher when the ranking is weak
              -> session counters, call-to-action, comparison table
              -> SearchResult

One engine owns one SessionContext. Serve several conversations by giving
each its own engine; catalog, corpus and fuzzy index can be shared. Calls to
search on the same engine are serialized so the session counters stay exact.
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from albait.config import get_config
from core.services.base import BaseService

from .catalog import CatalogItem, PageContentEntry, load_catalog
from .comparison import ComparisonSynthesizer, ComparisonTable
from .content_search import ContentSearcher
from .intent_classifier import classify_intent
from .query_preprocessor import EntityFlags, QueryPreprocessor
from .retriever import CandidateIndex, IndexBuilder, RapidFuzzIndexBuilder
from .sales import SalesIntelligence
from .scorer import CompositeScorer
from .session import SessionContext

# Synthetic page items placed ahead of catalog matches
MAX_FALLBACK_ITEMS = 2


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one query. Confidence 0 means no usable answer was found."""
    results: Tuple[CatalogItem, ...]
    intent: str
    entities: EntityFlags
    confidence: int
    should_show_whatsapp: bool = False
    whatsapp_message: Optional[str] = None
    query_count: int = 0
    package_query_count: int = 0
    comparison: Optional[ComparisonTable] = None
    package_interest: Optional[str] = None
    fallback_used: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [item.to_dict() for item in self.results],
            "intent": self.intent,
            "entities": self.entities.to_dict(),
            "confidence": self.confidence,
            "should_show_whatsapp": self.should_show_whatsapp,
            "whatsapp_message": self.whatsapp_message,
            "query_count": self.query_count,
            "package_query_count": self.package_query_count,
            "comparison": self.comparison.to_dict() if self.comparison else None,
            "package_interest": self.package_interest,
            "fallback_used": self.fallback_used,
        }


def compute_confidence(top_score: Optional[float]) -> int:
    """Twice the best final score, capped at 100; 0 when nothing survived."""
    if top_score is None:
        return 0
    return max(0, min(int(round(top_score * 2)), 100))


class SearchEngine(BaseService):
    """
    Single-session query engine.

    Args:
        catalog: Catalog items; loaded from the configured JSON when omitted
        index: Prebuilt candidate index (shared across sessions)
        indexer: Builder used when no index is given
        corpus: Fallback page corpus; the bundled pages when omitted
        settings: AssistantConfig with thresholds; the global config when omitted
    """

    def __init__(
        self,
        catalog: Optional[Sequence[CatalogItem]] = None,
        index: Optional[CandidateIndex] = None,
        indexer: Optional[IndexBuilder] = None,
        corpus: Optional[Sequence[PageContentEntry]] = None,
        settings=None,
    ):
        if settings is None:
            settings = get_config().assistant
        self.settings = settings

        self.catalog: Tuple[CatalogItem, ...] = tuple(
            catalog if catalog is not None else load_catalog(settings.catalog_path)
        )
        if index is None:
            indexer = indexer or RapidFuzzIndexBuilder(threshold=settings.fuzzy_threshold)
            index = indexer.index(self.catalog)
        self.index = index

        self.session = SessionContext()
        self.preprocessor = QueryPreprocessor()
        self.scorer = CompositeScorer(
            min_composite_score=settings.min_composite_score,
            max_results=settings.max_results,
        )
        self.content_searcher = ContentSearcher(corpus)
        self.sales = SalesIntelligence(
            package_query_threshold=settings.cta_package_queries,
            total_query_threshold=settings.cta_total_queries,
        )
        self.comparison = ComparisonSynthesizer()
        self._lock = threading.Lock()

    def needs_fallback(self, survivor_count: int, confidence: int) -> bool:
        return (
            survivor_count < self.settings.fallback_min_results
            or confidence < self.settings.fallback_min_confidence
        )

    def search(self, query: str) -> SearchResult:
        """Answer one query and advance the session."""
        with self._lock:
            return self._search(query)

    def _search(self, query: str) -> SearchResult:
        processed = self.preprocessor.process(query, session=self.session)
        intent = classify_intent(processed)

        candidates = self.index.query(processed.expanded)
        ranked = self.scorer.rank(candidates, processed, self.session)

        results: List[CatalogItem] = [c.item for c in ranked]
        confidence = compute_confidence(ranked[0].final if ranked else None)

        fallback_used = False
        if self.needs_fallback(len(ranked), confidence):
            page_items = self.content_searcher.search(processed)
            if page_items:
                fallback_used = True
                results = (page_items[:MAX_FALLBACK_ITEMS] + results)[:self.settings.max_results]
            if results:
                confidence = max(confidence, self.settings.fallback_confidence_floor)

        self.session.record_query(processed)
        cta = self.sales.evaluate(self.session)
        comparison = self.comparison.build(self.catalog) if processed.entities.is_comparison else None

        self.logger.debug(
            f"Query {query!r}: intent={intent} confidence={confidence} "
            f"results={len(results)} fallback={fallback_used}"
        )

        return SearchResult(
            results=tuple(results),
            intent=intent,
            entities=processed.entities,
            confidence=confidence,
            should_show_whatsapp=cta.triggered,
            whatsapp_message=cta.message,
            query_count=self.session.query_count,
            package_query_count=self.session.package_query_count,
            comparison=comparison,
            package_interest=self.session.top_package_interest,
            fallback_used=fallback_used,
        )
