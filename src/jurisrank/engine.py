"""Precedent search engine.

Flow:
1. Look the query up in the TTL cache (hit -> return the cached list as is).
2. Load the corpus from the store (empty -> ``[]``, nothing cached).
3. Drop status-invalid records and apply the type/court allow-lists.
4. Score lexically (top 40).
5. With more than 3 candidates and a reranker, ask for the 10 most
   relevant; on any failure keep the lexical top 10.
6. Cache and return.

Free-text queries (``filters.search_term``) take the same path as topic
queries: they are reranked too and cut to 10, not returned as the raw
lexical top 40.

Any object with ``rerank(prompt) -> str`` is used as a reranker; only
``NullReranker`` means "no reranker configured".

Corpus load errors propagate. Reranker errors never do.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from jurisrank import metrics
from jurisrank.cache import PrecedentCache, make_cache_key
from jurisrank.corpus import CorpusStore, parse_records
from jurisrank.lexicon import Lexicon, default_lexicon
from jurisrank.rerank import MAX_SELECTED, NullReranker, Reranker, build_prompt, parse_ranking
from jurisrank.retrieval import PrecedentScorer
from jurisrank.schemas import RankedPrecedent, SearchFilters

logger = logging.getLogger(__name__)

MIN_CANDIDATES_FOR_RERANK = 4
RANK_SIMILARITY_STEP = 0.05


def _positional(candidates: List[RankedPrecedent]) -> List[RankedPrecedent]:
    return [
        c.model_copy(update={'similarity': round(1 - i * RANK_SIMILARITY_STEP, 4)})
        for i, c in enumerate(candidates)
    ]


class PrecedentSearchEngine:
    def __init__(
        self,
        corpus: CorpusStore,
        reranker: Optional[Reranker] = None,
        cache: Optional[PrecedentCache] = None,
        lexicon: Optional[Lexicon] = None,
    ) -> None:
        self.corpus = corpus
        self.reranker: Reranker = reranker or NullReranker()
        self.cache = cache if cache is not None else PrecedentCache()
        self.lexicon = lexicon or default_lexicon()
        self.scorer = PrecedentScorer(self.lexicon)

    @property
    def rerank_enabled(self) -> bool:
        return not isinstance(self.reranker, NullReranker)

    def rerank(self, title: str, context: str, candidates: List[RankedPrecedent]) -> List[RankedPrecedent]:
        """Reorder ``candidates`` with the LLM; falls back to the lexical top 10."""
        fallback = candidates[:MAX_SELECTED]
        if not self.rerank_enabled:
            logger.debug("No reranker configured, keeping lexical order for %r", title)
            metrics.RERANK_TOTAL.labels('skipped').inc()
            return fallback
        try:
            reply = self.reranker.rerank(build_prompt(title, context, candidates))
            order = parse_ranking(reply, len(candidates))
            if not order:
                raise ValueError(f"no usable indices in reply {reply[:80]!r}")
        except Exception as e:
            logger.warning("Precedent rerank failed, keeping lexical order: %s", e)
            metrics.RERANK_TOTAL.labels('fallback').inc()
            return fallback
        metrics.RERANK_TOTAL.labels('reranked').inc()
        return _positional([candidates[i] for i in order])

    def search(
        self,
        topic: str,
        context: str = '',
        filters: Union[SearchFilters, Dict[str, Any], None] = None,
    ) -> List[RankedPrecedent]:
        if not isinstance(filters, SearchFilters):
            filters = SearchFilters.model_validate(filters or {})
        mode = 'free_text' if filters.is_free_text else 'topic'

        key = make_cache_key(topic, context, filters)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r (%s)", topic, mode)
            metrics.CACHE_HITS_TOTAL.inc()
            return cached

        records = self.corpus.load()
        if not records:
            return []
        metrics.SEARCHES_TOTAL.labels(mode).inc()

        candidates = self.scorer.find_precedents(parse_records(records), topic, context, filters)
        if len(candidates) >= MIN_CANDIDATES_FOR_RERANK:
            results = self.rerank(topic, context, candidates)
        else:
            results = candidates[:MAX_SELECTED]

        self.cache.set(key, results)
        return results


__all__ = ['PrecedentSearchEngine']
