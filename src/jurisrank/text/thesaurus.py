"""One-hop synonym expansion against the legal thesaurus."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Set, Tuple

from jurisrank.text.normalizer import normalize

__all__ = ["expand_synonyms", "expand_phrase"]


def _overlaps(a: str, b: str) -> bool:
    return a in b or b in a


def expand_synonyms(tokens: Iterable[str], synonyms: Mapping[str, Tuple[str, ...]]) -> List[str]:
    """
    Expand tokens with every thesaurus entry they touch.

    A token touches an entry when it is a substring of (or contains) the
    entry's term or any of its synonyms; the term and all of its synonyms
    are then added. No transitive closure. The result holds the normalized
    input tokens plus the expansions, without duplicates, sorted.
    """
    words = [w for w in (normalize(t) for t in tokens) if w]
    expanded: Set[str] = set(words)
    for word in words:
        for term, syns in synonyms.items():
            if _overlaps(word, term) or any(_overlaps(word, s) for s in syns):
                expanded.add(term)
                expanded.update(syns)
    return sorted(expanded)


def expand_phrase(phrase: str, synonyms: Mapping[str, Tuple[str, ...]]) -> List[str]:
    """
    Strict expansion used for free-text queries.

    Only entries whose term is a substring of (or contains) the whole
    normalized phrase are expanded. Empty when nothing qualifies.
    """
    norm = normalize(phrase)
    if not norm:
        return []
    expanded: Set[str] = set()
    for term, syns in synonyms.items():
        if _overlaps(norm, term):
            expanded.add(term)
            expanded.update(syns)
    return sorted(expanded)
