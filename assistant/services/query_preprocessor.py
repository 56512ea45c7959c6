"""
Query Preprocessor

Turns a raw chat message into a ProcessedQuery:
1. Tokenization (lower-case, punctuation stripped, single characters dropped)
2. Synonym normalization ("pengen" -> "mau")
3. Typo correction (phonetic variant table, then Levenshtein distance <= 2;
   words the lexicon already knows are never corrected)
4. Stop-word removal
5. Semantic expansion (retrieval terms only)
6. Entity detection (location, VIP, budget, legality, contact, ...)
7. Phrase pattern detection ("harga paket" -> pricing)
8. Package relatedness
"""

import re
import logging
from dataclasses import dataclass, field, asdict, fields
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from rapidfuzz.distance import Levenshtein

from .lexicon import (
    PHONETIC_VARIANTS,
    SYNONYMS,
    SEMANTIC_MAP,
    PHRASE_PATTERNS,
    STOP_WORDS,
    ENTITY_KEYWORDS,
    PACKAGE_VOCABULARY,
    KNOWN_WORDS,
)

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w\s]")

# Largest edit distance accepted by typo correction
MAX_TYPO_DISTANCE = 2


@dataclass(frozen=True)
class EntityFlags:
    """Entity flags raised by a single query."""
    is_location: bool = False
    is_vip: bool = False
    is_reguler: bool = False
    is_legalitas: bool = False
    is_contact: bool = False
    is_manasik: bool = False
    is_urgent: bool = False
    is_pricing: bool = False
    is_comparison: bool = False

    def active(self) -> FrozenSet[str]:
        """Names of the flags that are set."""
        return frozenset(f.name for f in fields(self) if getattr(self, f.name))

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


@dataclass(frozen=True)
class PhraseMatch:
    """A multi-token pattern found in the query."""
    pattern: Tuple[str, ...]
    intent: str
    boost: int


@dataclass
class ProcessedQuery:
    """Structured form of one query. Created per call, discarded after use."""
    original: str
    tokens: List[str] = field(default_factory=list)
    expanded: List[str] = field(default_factory=list)
    entities: EntityFlags = field(default_factory=EntityFlags)
    phrases: List[PhraseMatch] = field(default_factory=list)
    is_package_related: bool = False

    @property
    def phrase_text(self) -> str:
        """Final tokens joined by single spaces."""
        return " ".join(self.tokens)

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "tokens": self.tokens,
            "expanded": self.expanded,
            "entities": self.entities.to_dict(),
            "phrases": [{"intent": p.intent, "boost": p.boost} for p in self.phrases],
            "is_package_related": self.is_package_related,
        }


class QueryPreprocessor:
    """
    Stateless query normalizer built over the lexicon tables.

    The tables are injectable so tests and alternative deployments can
    supply their own vocabularies.
    """

    def __init__(
        self,
        phonetic_variants: Optional[Dict[str, List[str]]] = None,
        synonyms: Optional[Dict[str, str]] = None,
        semantic_map: Optional[Dict[str, List[str]]] = None,
        phrase_patterns: Optional[List[Tuple[Tuple[str, ...], str, int]]] = None,
        stop_words: Optional[Iterable[str]] = None,
        entity_keywords: Optional[Dict[str, FrozenSet[str]]] = None,
        package_vocabulary: Optional[Iterable[str]] = None,
        known_words: Optional[Iterable[str]] = None,
    ):
        self.phonetic_variants = phonetic_variants if phonetic_variants is not None else PHONETIC_VARIANTS
        self.synonyms = synonyms if synonyms is not None else SYNONYMS
        self.semantic_map = semantic_map if semantic_map is not None else SEMANTIC_MAP
        self.phrase_patterns = phrase_patterns if phrase_patterns is not None else PHRASE_PATTERNS
        self.stop_words = frozenset(stop_words if stop_words is not None else STOP_WORDS)
        self.entity_keywords = entity_keywords if entity_keywords is not None else ENTITY_KEYWORDS
        self.package_vocabulary = frozenset(
            package_vocabulary if package_vocabulary is not None else PACKAGE_VOCABULARY
        )

        # variant -> canonical, for O(1) exact hits
        self._variant_lookup: Dict[str, str] = {}
        for canonical, variants in self.phonetic_variants.items():
            for variant in variants:
                self._variant_lookup.setdefault(variant, canonical)

        # Words with a meaning of their own in the tables are never corrected
        self.protected_words = frozenset(known_words if known_words is not None else KNOWN_WORDS).union(
            self.package_vocabulary,
            self.synonyms.values(),
            self.semantic_map.keys(),
            *self.semantic_map.values(),
            *self.entity_keywords.values(),
            *(pattern for pattern, _, _ in self.phrase_patterns),
        )

    # =========================================================================
    # Pipeline
    # =========================================================================

    def process(self, query: str, session=None) -> ProcessedQuery:
        """
        Run the full pipeline on a raw query.

        When a session is given, the entity flags raised here are added to
        its accumulated entity set.
        """
        raw_tokens = self.tokenize(query)
        corrected = [self.normalize_token(t) for t in raw_tokens]
        tokens = [t for t in corrected if t not in self.stop_words]

        entities = self.detect_entities(tokens)
        if session is not None:
            session.accumulate_entities(entities)

        processed = ProcessedQuery(
            original=query,
            tokens=tokens,
            expanded=self.expand(tokens),
            entities=entities,
            phrases=self.detect_phrases(tokens),
            is_package_related=self.is_package_related(tokens),
        )
        logger.debug(f"Processed {query!r} -> tokens={tokens} entities={sorted(entities.active())}")
        return processed

    def tokenize(self, query: str) -> List[str]:
        """Lower-case, strip punctuation, split on whitespace, drop 1-char tokens."""
        cleaned = _NON_WORD.sub("", (query or "").lower())
        return [t for t in cleaned.split() if len(t) > 1]

    def normalize_token(self, token: str) -> str:
        """Synonym normalization followed by typo correction."""
        token = self.synonyms.get(token, token)
        return self.correct_typo(token)

    def correct_typo(self, token: str) -> str:
        """
        Map a token to its canonical lexicon term.

        Exact hits in the phonetic variant table win; otherwise the nearest
        canonical key within MAX_TYPO_DISTANCE edits is taken, ties going to
        the key listed first. Stop-words and words the lexicon already knows
        ("tarif", "halo", "cara") are returned unchanged.
        """
        if token in self.stop_words or token in self.phonetic_variants:
            return token
        if token in self._variant_lookup:
            return self._variant_lookup[token]
        if token in self.protected_words:
            return token

        match = self.nearest_canonical(token)
        if match is None:
            return token
        logger.debug(f"Typo corrected: {token!r} -> {match[0]!r} (distance {match[1]})")
        return match[0]

    def nearest_canonical(self, token: str) -> Optional[Tuple[str, int]]:
        """Closest canonical key and its edit distance, or None beyond MAX_TYPO_DISTANCE."""
        best: Optional[Tuple[str, int]] = None
        for canonical in self.phonetic_variants:
            limit = best[1] - 1 if best else MAX_TYPO_DISTANCE
            distance = Levenshtein.distance(token, canonical, score_cutoff=limit)
            if distance <= limit:
                best = (canonical, distance)
        return best

    # =========================================================================
    # Derived signals
    # =========================================================================

    def expand(self, tokens: List[str]) -> List[str]:
        """Tokens plus their semantic relatives, deduplicated in first-seen order."""
        pool = list(tokens)
        for token in tokens:
            pool.extend(self.semantic_map.get(token, ()))
        return list(dict.fromkeys(pool))

    def detect_entities(self, tokens: List[str]) -> EntityFlags:
        token_set = set(tokens)
        raised = {
            name: bool(token_set & keywords)
            for name, keywords in self.entity_keywords.items()
        }
        return EntityFlags(**raised)

    def detect_phrases(self, tokens: List[str]) -> List[PhraseMatch]:
        """Every configured pattern found as a contiguous ordered run of tokens."""
        matches = []
        for pattern, intent, boost in self.phrase_patterns:
            size = len(pattern)
            for start in range(len(tokens) - size + 1):
                if tuple(tokens[start:start + size]) == tuple(pattern):
                    matches.append(PhraseMatch(pattern=tuple(pattern), intent=intent, boost=boost))
                    break
        return matches

    def is_package_related(self, tokens: List[str]) -> bool:
        return any(t in self.package_vocabulary for t in tokens)
