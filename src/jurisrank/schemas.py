"""Canonical schemas for precedents, query filters and ranked results.

Corpus records use camelCase keys (``tipoProcesso``); the models accept
them as aliases and keep unknown keys so nothing is lost on round-trip.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

_KEYWORD_SPLIT = re.compile(r'[,;]')


class Precedent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    id: Optional[str] = None
    tipo_processo: Optional[str] = Field(default=None, alias='tipoProcesso')
    tribunal: Optional[str] = None
    orgao: Optional[str] = None
    status: Optional[str] = None
    category: Optional[str] = None
    titulo: Optional[str] = None
    tese: Optional[str] = None
    enunciado: Optional[str] = None
    keywords: Union[str, List[str], None] = None
    numero: Optional[str] = None
    tema: Optional[str] = None

    @field_validator(
        'id', 'tipo_processo', 'tribunal', 'orgao', 'status', 'category',
        'titulo', 'tese', 'enunciado', 'numero', 'tema',
        mode='before',
    )
    @classmethod
    def _coerce_str(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator('keywords', mode='before')
    @classmethod
    def _coerce_keywords(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (list, tuple)):
            return [str(k) for k in v if k is not None]
        return str(v)

    def keyword_list(self) -> List[str]:
        if isinstance(self.keywords, str):
            return [k.strip() for k in _KEYWORD_SPLIT.split(self.keywords) if k.strip()]
        if isinstance(self.keywords, list):
            return [str(k) for k in self.keywords if k]
        return []

    def holding(self) -> str:
        return self.tese or self.enunciado or ''


class SearchFilters(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tipo: List[str] = Field(default_factory=list)
    tribunal: List[str] = Field(default_factory=list)
    search_term: Optional[str] = Field(default=None, alias='searchTerm')

    @field_validator('tipo', 'tribunal', mode='before')
    @classmethod
    def _coerce_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            return [str(x) for x in v if x is not None]
        return v

    @field_validator('search_term', mode='before')
    @classmethod
    def _coerce_term(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @property
    def is_free_text(self) -> bool:
        return bool(self.search_term and self.search_term.strip())


class RankedPrecedent(Precedent):
    # Internal ranking score, left out of the public payload.
    score: int = Field(default=0, exclude=True)
    similarity: float = 0.0

    def public_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ['Precedent', 'SearchFilters', 'RankedPrecedent']
