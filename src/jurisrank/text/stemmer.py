"""Suffix stripper tuned for Portuguese legal vocabulary.

Approximate on purpose: stems only widen recall and are never the sole
match criterion. Each suffix class is stripped at most once, in order.
"""

from __future__ import annotations

import re
from typing import Tuple

from jurisrank.text.normalizer import remove_accents

__all__ = ["stem", "SUFFIX_CLASSES"]

SUFFIX_CLASSES: Tuple[Tuple[str, ...], ...] = (
    # nominalization
    ("cao", "coes", "sao", "soes", "mento", "mentos"),
    # adjectival
    ("orio", "oria", "orios", "orias", "ivo", "iva", "ivos", "ivas"),
    # agentive
    ("ista", "istas", "ante", "antes", "ente", "entes"),
    # quality
    ("ade", "ades", "dade", "dades"),
    # agentive (trade/role)
    ("eiro", "eira", "eiros", "eiras"),
    # class/number
    ("al", "ais", "el", "eis", "il", "is", "ol", "ois", "ul", "uis"),
    # verbal infinitive
    ("ar", "er", "ir", "or", "ur"),
    # plural
    ("s", "es"),
)

_SUFFIX_PATTERNS = tuple(
    re.compile("(" + "|".join(group) + ")$") for group in SUFFIX_CLASSES
)


def stem(word: str) -> str:
    """
    Reduce ``word`` to an approximate root.

    Words shorter than three characters come back unchanged.

    Example:
        >>> stem("horas")
        'hora'
    """
    if not word or len(word) < 3:
        return word
    w = remove_accents(word.lower())
    for pattern in _SUFFIX_PATTERNS:
        w = pattern.sub("", w, count=1)
    return w
