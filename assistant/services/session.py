"""
Session Context

Mutable state of one conversation, owned by exactly one SearchEngine.
Nothing here is process-wide: two engines never share a context.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .lexicon import PACKAGE_TIERS
from .query_preprocessor import EntityFlags, ProcessedQuery


@dataclass
class SessionContext:
    last_category: Optional[str] = None
    token_history: List[List[str]] = field(default_factory=list)
    # Grows monotonically; flags are never removed
    detected_entities: Set[str] = field(default_factory=set)
    query_count: int = 0
    package_query_count: int = 0
    package_interest: Counter = field(default_factory=Counter)

    def accumulate_entities(self, flags: EntityFlags) -> None:
        self.detected_entities |= flags.active()

    def record_query(self, processed: ProcessedQuery) -> None:
        """Count the query and the package tiers it mentions."""
        self.query_count += 1
        if processed.is_package_related:
            self.package_query_count += 1

        tokens = set(processed.tokens)
        for tier, words in PACKAGE_TIERS.items():
            if tokens & words:
                self.package_interest[tier] += 1

    def record_ranking(self, tokens: List[str], top_category: Optional[str]) -> None:
        """Remember what was asked and, when something matched, its category."""
        if top_category is not None:
            self.last_category = top_category
        self.token_history.append(list(tokens))

    @property
    def top_package_interest(self) -> Optional[str]:
        """Most mentioned tier; earliest mentioned wins a tie."""
        if not self.package_interest:
            return None
        return self.package_interest.most_common(1)[0][0]

    def to_dict(self) -> Dict:
        return {
            "last_category": self.last_category,
            "detected_entities": sorted(self.detected_entities),
            "query_count": self.query_count,
            "package_query_count": self.package_query_count,
            "package_interest": dict(self.package_interest),
        }
