"""Candidate filtering applied before scoring."""
from __future__ import annotations

from typing import Iterable, List

from jurisrank.lexicon import is_binding_type, is_status_valid
from jurisrank.schemas import Precedent, SearchFilters

# Pseudo-type in ``SearchFilters.tipo`` matching every binding-precedent spelling.
BINDING_PSEUDO_TYPE = 'IRR'


def matches_tipo(p: Precedent, allowed: List[str]) -> bool:
    if not allowed:
        return True
    if not p.tipo_processo:
        return False
    if BINDING_PSEUDO_TYPE in allowed and is_binding_type(p.tipo_processo):
        return True
    return p.tipo_processo in allowed


def matches_tribunal(p: Precedent, allowed: List[str]) -> bool:
    if not allowed:
        return True
    return bool(p.tribunal) and p.tribunal in allowed


def apply_filters(precedents: Iterable[Precedent], filters: SearchFilters) -> List[Precedent]:
    """Drop status-invalid records, then apply the type and court allow-lists (AND)."""
    return [
        p for p in precedents
        if is_status_valid(p.status)
        and matches_tipo(p, filters.tipo)
        and matches_tribunal(p, filters.tribunal)
    ]


__all__ = ['apply_filters', 'matches_tipo', 'matches_tribunal', 'BINDING_PSEUDO_TYPE']
