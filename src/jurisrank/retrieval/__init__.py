"""Candidate filtering, court hierarchy and lexical scoring."""

from jurisrank.retrieval.filters import apply_filters
from jurisrank.retrieval.hierarchy import free_text_boost, topic_boost
from jurisrank.retrieval.scorer import PrecedentScorer, FreeTextQuery, TopicQuery, MAX_CANDIDATES

__all__ = [
    "apply_filters",
    "free_text_boost",
    "topic_boost",
    "PrecedentScorer",
    "FreeTextQuery",
    "TopicQuery",
    "MAX_CANDIDATES",
]
