"""Precedent retrieval and ranking for Brazilian labor-law topics."""

from jurisrank.engine import PrecedentSearchEngine
from jurisrank.cache import PrecedentCache
from jurisrank.corpus import JsonCorpusStore, StaticCorpusStore
from jurisrank.lexicon import Lexicon, load_lexicon, is_binding_type, is_status_valid
from jurisrank.schemas import Precedent, RankedPrecedent, SearchFilters

__version__ = "0.1.0"

__all__ = [
    "PrecedentSearchEngine",
    "PrecedentCache",
    "JsonCorpusStore",
    "StaticCorpusStore",
    "Lexicon",
    "load_lexicon",
    "is_binding_type",
    "is_status_valid",
    "Precedent",
    "RankedPrecedent",
    "SearchFilters",
]
