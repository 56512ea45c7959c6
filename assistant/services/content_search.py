"""
Fallback Content Searcher

When catalog retrieval is weak, search the text of the website pages and
turn the best pages into catalog-shaped items whose description is the most
relevant sentence (or sentence pair) of the page.

Page scoring:
    +15  raw query inside the page title
    per token:
    +8   in the title
    +6   per heading containing it
    +3   per paragraph containing it
    +10  equal to a page keyword (else +5 if part of one)

Sentence scoring:
    +10  per token contained, +5 more when it is a whole word
    +20  all tokens verbatim as a phrase
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .catalog import (
    CatalogItem,
    PageContentEntry,
    CATEGORY_PAKET,
    CATEGORY_KONTAK,
    CATEGORY_INFORMASI,
)
from .page_content import PAGE_CONTENT
from .query_preprocessor import ProcessedQuery

logger = logging.getLogger(__name__)

MIN_PAGE_SCORE = 10
MAX_PAGES = 3
MIN_SENTENCE_LENGTH = 10

# URL path fragment -> synthetic item category, first hit wins
URL_CATEGORY_HINTS = (
    ("service", CATEGORY_PAKET),
    ("about", CATEGORY_INFORMASI),
    ("contact", CATEGORY_KONTAK),
)

# Abbreviations whose trailing period does not end a sentence
ABBREVIATIONS = frozenset({
    "jl", "jln", "no", "dr", "drs", "h", "hj", "ir", "prof", "kh", "ust",
    "rp", "dll", "dsb", "dst", "kec", "kab", "kel", "tn", "ny", "sdr", "st",
    "rt", "rw", "telp", "tlp",
})

# Decimals ("28.5") never match: the boundary needs whitespace after the mark
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_TRAILING_WORD = re.compile(r"(\w+)\.$")


def split_sentences(paragraph: str) -> List[str]:
    """
    Split a paragraph into sentences.

    Fragments of MIN_SENTENCE_LENGTH characters or less are dropped.

    Examples:
        >>> split_sentences("Kantor di Jl. Raya Mundu. Buka jam 08.30 setiap hari!")
        ["Kantor di Jl. Raya Mundu.", "Buka jam 08.30 setiap hari!"]
    """
    sentences: List[str] = []
    for piece in _SENTENCE_BOUNDARY.split(paragraph.strip()):
        if sentences:
            previous = _TRAILING_WORD.search(sentences[-1])
            if previous and previous.group(1).lower() in ABBREVIATIONS:
                sentences[-1] = f"{sentences[-1]} {piece}"
                continue
        sentences.append(piece)
    return [s.strip() for s in sentences if len(s.strip()) > MIN_SENTENCE_LENGTH]


def infer_category(url: str) -> str:
    path = url.lower()
    for fragment, category in URL_CATEGORY_HINTS:
        if fragment in path:
            return category
    return CATEGORY_INFORMASI


@dataclass(frozen=True)
class _ScoredSentence:
    score: int
    paragraph: int
    position: int
    text: str


class ContentSearcher:
    """Keyword search over the bundled page corpus."""

    def __init__(
        self,
        corpus: Optional[Sequence[PageContentEntry]] = None,
        min_page_score: int = MIN_PAGE_SCORE,
        max_pages: int = MAX_PAGES,
    ):
        self.corpus = tuple(corpus if corpus is not None else PAGE_CONTENT)
        self.min_page_score = min_page_score
        self.max_pages = max_pages

    # =========================================================================
    # Page ranking
    # =========================================================================

    def score_page(self, page: PageContentEntry, processed: ProcessedQuery) -> int:
        title = page.title.lower()
        headings = [h.lower() for h in page.headings]
        paragraphs = [p.lower() for p in page.paragraphs]
        keywords = [k.lower() for k in page.keywords]
        raw_query = processed.original.lower().strip()

        score = 0
        if raw_query and raw_query in title:
            score += 15

        for token in processed.tokens:
            if token in title:
                score += 8
            score += 6 * sum(1 for h in headings if token in h)
            score += 3 * sum(1 for p in paragraphs if token in p)
            if token in keywords:
                score += 10
            elif any(token in k for k in keywords):
                score += 5

        return score

    def rank_pages(self, processed: ProcessedQuery) -> List[Tuple[PageContentEntry, int]]:
        """Pages above the minimum score, best first, at most max_pages."""
        scored = [(page, self.score_page(page, processed)) for page in self.corpus]
        kept = [(page, score) for page, score in scored if score > self.min_page_score]
        kept.sort(key=lambda pair: pair[1], reverse=True)
        return kept[:self.max_pages]

    # =========================================================================
    # Answer extraction
    # =========================================================================

    def extract_answer(self, page: PageContentEntry, tokens: List[str]) -> str:
        """
        Best sentence of the page for the tokens.

        The runner-up is appended only when it comes from the same paragraph,
        and the pair is returned in reading order. With no matching sentence
        the first paragraph is returned.
        """
        phrase = " ".join(tokens)
        scored: List[_ScoredSentence] = []

        for p_index, paragraph in enumerate(page.paragraphs):
            for s_index, sentence in enumerate(split_sentences(paragraph)):
                lowered = sentence.lower()
                score = 0
                for token in tokens:
                    if token in lowered:
                        score += 10
                        if re.search(rf"\b{re.escape(token)}\b", lowered):
                            score += 5
                if phrase and phrase in lowered:
                    score += 20
                scored.append(_ScoredSentence(score, p_index, s_index, sentence))

        scored.sort(key=lambda s: s.score, reverse=True)
        if not scored or scored[0].score <= 0:
            return page.paragraphs[0] if page.paragraphs else page.title

        best = scored[0]
        if len(scored) > 1:
            runner_up = scored[1]
            if runner_up.score > 0 and runner_up.paragraph == best.paragraph:
                first, second = sorted((best, runner_up), key=lambda s: s.position)
                return f"{first.text} {second.text}"
        return best.text

    def _pick_title(self, page: PageContentEntry, tokens: List[str]) -> str:
        for heading in page.headings:
            lowered = heading.lower()
            if any(token in lowered for token in tokens):
                return heading
        return page.title

    # =========================================================================
    # Entry point
    # =========================================================================

    def search(self, processed: ProcessedQuery) -> List[CatalogItem]:
        """Synthetic items for the best pages; empty when nothing scores."""
        if not processed.tokens:
            return []

        pages = self.rank_pages(processed)
        items = [
            CatalogItem(
                title=self._pick_title(page, processed.tokens),
                description=self.extract_answer(page, processed.tokens),
                url=page.url,
                category=infer_category(page.url),
                keywords=tuple(page.keywords),
                source="page",
            )
            for page, _ in pages
        ]
        logger.info(f"Fallback content search for {processed.original!r}: {len(items)} page(s)")
        return items
