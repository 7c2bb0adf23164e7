"""Lexicon loading: stopwords and the legal thesaurus.

The lexicon is a versioned YAML resource shipped with the package
(``config/lexicon_pt.yml``). It is loaded into an immutable ``Lexicon`` at
engine construction so several engines (e.g. one per locale) can coexist.

Also holds the fixed classification tables the ranker relies on:
 - binding-precedent type codes (``is_binding_type``)
 - lifecycle statuses that exclude a precedent (``is_status_valid``)
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

import yaml

from jurisrank.errors import LexiconLoadError
from jurisrank.text.normalizer import normalize

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_LEXICON_PATH = os.path.join(PACKAGE_DIR, 'config', 'lexicon_pt.yml')

BINDING_TYPES: FrozenSet[str] = frozenset({'IRR', 'RR', 'RRAG', 'INCJULGRREMBREP', 'INCJULGRREPETITIVO'})

INVALID_STATUSES: FrozenSet[str] = frozenset({
    'cancelada', 'revogada', 'convertida', 'superado', 'convertida em súmula',
})


def is_binding_type(tipo: Optional[str]) -> bool:
    """True for any spelling of a repetitive-appeal (binding) type code, e.g. ``'inc-julg-rr-emb-rep'``."""
    return (tipo or '').upper().replace('-', '') in BINDING_TYPES


def is_status_valid(status: Optional[str]) -> bool:
    if not status:
        return True
    return status.strip().lower() not in INVALID_STATUSES


@dataclass(frozen=True)
class Lexicon:
    stopwords: FrozenSet[str]
    synonyms: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    version: str = 'unversioned'

    def __len__(self) -> int:
        return len(self.synonyms)


def _build(data: Dict[str, Any], source: str) -> Lexicon:
    stop_raw = data.get('stopwords')
    syn_raw = data.get('synonyms')
    if not isinstance(stop_raw, list):
        raise LexiconLoadError(f"'stopwords' must be a list in {source}")
    if not isinstance(syn_raw, dict):
        raise LexiconLoadError(f"'synonyms' must be a mapping in {source}")

    synonyms: Dict[str, Tuple[str, ...]] = {}
    for term, values in syn_raw.items():
        if not isinstance(values, list):
            raise LexiconLoadError(f"Synonyms for {term!r} must be a list in {source}")
        key = normalize(str(term))
        if not key:
            continue
        synonyms[key] = tuple(s for s in (normalize(str(v)) for v in values) if s)

    return Lexicon(
        stopwords=frozenset(s for s in (normalize(str(w)) for w in stop_raw) if s),
        synonyms=MappingProxyType(synonyms),
        version=str(data.get('version', 'unversioned')),
    )


def load_lexicon(path: Optional[str] = None) -> Lexicon:
    """Read and validate a lexicon YAML file. Raises ``LexiconLoadError``."""
    source = path or DEFAULT_LEXICON_PATH
    try:
        with open(source, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise LexiconLoadError(f"Cannot read lexicon {source}: {e}") from e
    if not isinstance(data, dict):
        raise LexiconLoadError(f"Lexicon {source} must be a mapping")
    return _build(data, source)


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    return load_lexicon(DEFAULT_LEXICON_PATH)


__all__ = [
    'Lexicon', 'load_lexicon', 'default_lexicon', 'is_binding_type', 'is_status_valid',
    'BINDING_TYPES', 'INVALID_STATUSES', 'DEFAULT_LEXICON_PATH',
]
