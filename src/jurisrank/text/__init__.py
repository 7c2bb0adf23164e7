"""Text pipeline: normalization, stemming and thesaurus expansion."""

from jurisrank.text.normalizer import normalize, remove_accents, tokenize, TITLE_MIN_LEN, TEXT_MIN_LEN
from jurisrank.text.stemmer import stem
from jurisrank.text.thesaurus import expand_synonyms, expand_phrase

__all__ = [
    "normalize",
    "remove_accents",
    "tokenize",
    "stem",
    "expand_synonyms",
    "expand_phrase",
    "TITLE_MIN_LEN",
    "TEXT_MIN_LEN",
]
