"""Lexical scoring of precedents.

Two mutually exclusive modes:
 - free text (``SearchFilters.search_term`` set): strict token matching with a
   minimum-match gate, phrase-level thesaurus hits always qualify
 - topic + context: weighted field matching over the thesaurus-expanded topic
   title, with a light contribution from the first context terms

Both add the court-hierarchy boost to any record with a positive textual
score and return at most ``MAX_CANDIDATES`` records, best first.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

from jurisrank.lexicon import Lexicon, default_lexicon
from jurisrank.retrieval.filters import apply_filters
from jurisrank.retrieval.hierarchy import court_rank, free_text_boost, topic_boost
from jurisrank.schemas import Precedent, RankedPrecedent, SearchFilters
from jurisrank.text import (
    TEXT_MIN_LEN,
    TITLE_MIN_LEN,
    expand_phrase,
    expand_synonyms,
    normalize,
    stem,
    tokenize,
)

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 40
MAX_CONTEXT_TERMS = 30
MIN_STEM_LEN = 4

# Free-text weights
W_TERM = 30
W_TERM_STEM = 15
W_PHRASE_SYNONYM = 20

# Topic weights
W_KEYWORD = 20
W_KEYWORD_STEM = 15
W_TITLE = 15
W_THESIS = 10
W_THESIS_STEM = 8
W_CONTEXT = 3


def _stem_overlap(a: str, b: str) -> bool:
    return len(a) >= MIN_STEM_LEN and len(b) >= MIN_STEM_LEN and (a in b or b in a)


@dataclass(frozen=True)
class FreeTextQuery:
    terms: Tuple[str, ...]
    phrase_synonyms: Tuple[str, ...]

    @classmethod
    def build(cls, search_term: str, lexicon: Lexicon) -> "FreeTextQuery":
        terms = tokenize(search_term, TEXT_MIN_LEN, lexicon.stopwords)
        return cls(tuple(terms), tuple(expand_phrase(search_term, lexicon.synonyms)))

    @property
    def min_matches(self) -> int:
        return max(1, math.ceil(len(self.terms) / 2))

    def text_score(self, p: Precedent) -> int:
        searchable = normalize(' '.join([p.tese or '', p.enunciado or '', p.titulo or '', ' '.join(p.keyword_list())]))
        score = 0
        matched = 0
        for term in self.terms:
            if term in searchable:
                score += W_TERM
                matched += 1
                continue
            root = stem(term)
            if len(root) >= MIN_STEM_LEN and root in searchable:
                score += W_TERM_STEM
                matched += 1
        if any(syn in searchable for syn in self.phrase_synonyms):
            score += W_PHRASE_SYNONYM
            matched += 1
        if matched == 0:
            return 0
        if matched < self.min_matches and not self.phrase_synonyms:
            return 0
        return score

    def score(self, p: Precedent) -> int:
        base = self.text_score(p)
        return base + free_text_boost(p) if base > 0 else 0


@dataclass(frozen=True)
class TopicQuery:
    search_terms: FrozenSet[str]
    search_stems: FrozenSet[str]
    context_terms: FrozenSet[str]

    @classmethod
    def build(cls, title: str, context: str, lexicon: Lexicon) -> "TopicQuery":
        title_words = tokenize(title, TITLE_MIN_LEN, lexicon.stopwords)
        context_words = tokenize(context, TEXT_MIN_LEN, lexicon.stopwords)[:MAX_CONTEXT_TERMS]
        title_stems = {s for s in (stem(w) for w in title_words) if len(s) > 2}
        return cls(
            search_terms=frozenset(expand_synonyms(title_words, lexicon.synonyms)) | frozenset(title_words),
            search_stems=frozenset(title_stems) | frozenset(title_words),
            context_terms=frozenset(expand_synonyms(context_words, lexicon.synonyms)) if context_words else frozenset(),
        )

    @property
    def is_empty(self) -> bool:
        return not self.search_terms and not self.context_terms

    def text_score(self, p: Precedent) -> int:
        keywords = [k for k in (normalize(k) for k in p.keyword_list()) if k]
        keyword_stems = [stem(w) for k in keywords for w in k.split()]
        tese = normalize(p.holding())
        titulo = normalize(p.titulo)
        tese_stems = [stem(w) for w in tese.split()]

        score = 0
        for term in self.search_terms:
            if any(k in term or term in k for k in keywords):
                score += W_KEYWORD
            if term in titulo:
                score += W_TITLE
            if term in tese:
                score += W_THESIS
        for root in self.search_stems:
            if any(_stem_overlap(root, ks) for ks in keyword_stems):
                score += W_KEYWORD_STEM
            if any(_stem_overlap(root, ts) for ts in tese_stems):
                score += W_THESIS_STEM
        for term in self.context_terms:
            if term in tese or term in titulo:
                score += W_CONTEXT
        return score

    def score(self, p: Precedent) -> int:
        base = self.text_score(p)
        return base + topic_boost(p) if base > 0 else 0


def rank(precedents: Iterable[Precedent], query, limit: int = MAX_CANDIDATES) -> List[RankedPrecedent]:
    """Score, drop zeros, sort descending and truncate.

    Equal scores are ordered by court tier, then by corpus order.
    """
    scored: List[RankedPrecedent] = []
    for p in precedents:
        s = query.score(p)
        if s > 0:
            data = p.model_dump(by_alias=True)
            data.update(score=s, similarity=min(1.0, s / 1000))
            scored.append(RankedPrecedent.model_validate(data))
    scored.sort(key=lambda r: (-r.score, court_rank(r)))
    return scored[:limit]


class PrecedentScorer:
    """Scores a corpus against a topic or a free-text query."""

    def __init__(self, lexicon: Optional[Lexicon] = None) -> None:
        self.lexicon: Lexicon = lexicon or default_lexicon()

    def build_query(self, topic_title: str, context: str, filters: SearchFilters):
        if filters.is_free_text:
            return FreeTextQuery.build(filters.search_term or '', self.lexicon)
        return TopicQuery.build(topic_title or '', context or '', self.lexicon)

    def find_precedents(
        self,
        precedents: Iterable[Precedent],
        topic_title: str,
        context: str = '',
        filters: Optional[SearchFilters] = None,
    ) -> List[RankedPrecedent]:
        filters = filters or SearchFilters()
        query = self.build_query(topic_title, context, filters)
        if isinstance(query, FreeTextQuery) and not query.terms:
            logger.debug("Free-text query %r has no searchable terms", filters.search_term)
            return []
        if isinstance(query, TopicQuery) and query.is_empty:
            return []
        candidates = rank(apply_filters(precedents, filters), query)
        logger.debug("Scored %d candidates (mode=%s)", len(candidates), 'free_text' if filters.is_free_text else 'topic')
        return candidates


__all__ = [
    'PrecedentScorer', 'FreeTextQuery', 'TopicQuery', 'rank',
    'MAX_CANDIDATES', 'MAX_CONTEXT_TERMS',
]
