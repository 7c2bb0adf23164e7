"""
Text normalization for Portuguese legal text.

Every comparison made by the ranker happens on normalized text: lower case,
no diacritics, only ``[a-z0-9 ]`` and single spaces. Both functions are pure
and never raise on odd input.
"""

from __future__ import annotations

import re
import unicodedata
from typing import AbstractSet, List, Optional

from nltk.tokenize import RegexpTokenizer

__all__ = ["remove_accents", "normalize", "tokenize", "TITLE_MIN_LEN", "TEXT_MIN_LEN"]

TITLE_MIN_LEN = 2
TEXT_MIN_LEN = 3

_PATTERN_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_PATTERN_WHITESPACE = re.compile(r"\s+")

# Pure regex tokenizer, needs no downloaded NLTK data.
_TOKENIZER = RegexpTokenizer(r"[a-z0-9]+")


def remove_accents(text: Optional[str]) -> str:
    """Drop combining marks after NFD decomposition (``'ção'`` -> ``'cao'``)."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(text: Optional[str]) -> str:
    """
    Case-fold, strip diacritics and punctuation, collapse whitespace.

    Idempotent: ``normalize(normalize(x)) == normalize(x)``.

    Example:
        >>> normalize("Rescisão  Indireta!")
        'rescisao indireta'
    """
    if not isinstance(text, str) or not text:
        return ""
    text = remove_accents(text.lower())
    text = _PATTERN_NON_ALNUM.sub(" ", text)
    return _PATTERN_WHITESPACE.sub(" ", text).strip()


def tokenize(
    text: Optional[str],
    min_len: int = TEXT_MIN_LEN,
    stopwords: AbstractSet[str] = frozenset(),
) -> List[str]:
    """
    Split normalized text into search tokens.

    Tokens shorter than ``min_len`` and stopwords are dropped. Order and
    duplicates are preserved so callers can slice the leading tokens.
    """
    normalized = normalize(text)
    if not normalized:
        return []
    return [
        tok for tok in _TOKENIZER.tokenize(normalized)
        if len(tok) >= min_len and tok not in stopwords
    ]
