"""Court-hierarchy boosts.

Rules are evaluated in order; the first match wins. Binding tiers sit an
order of magnitude above any textual score.
"""
from __future__ import annotations

from typing import FrozenSet

from jurisrank.lexicon import is_binding_type
from jurisrank.text.normalizer import remove_accents
from jurisrank.schemas import Precedent

STF_BINDING_TYPES: FrozenSet[str] = frozenset({'ADI', 'ADC', 'ADPF', 'RE', 'ARE'})
REGIONAL_BINDING_TYPES: FrozenSet[str] = frozenset({'IRDR', 'IAC'})
REGIONAL_COURTS: FrozenSet[str] = frozenset({'TRT8', 'TRT-8'})
SUMULA = 'SÚMULA'


def _fields(p: Precedent):
    return (
        (p.tipo_processo or '').strip().upper(),
        (p.tribunal or '').strip().upper(),
        (p.orgao or '').upper(),
        remove_accents(p.category).upper(),
    )


def _is_sumula(tipo: str) -> bool:
    return tipo in (SUMULA, 'SUMULA')


def court_rank(p: Precedent) -> int:
    """Tiebreak for equal scores: TST, STF, regional TRT, STJ, then everything else."""
    _, tribunal, orgao, _ = _fields(p)
    if tribunal == 'TST':
        return 0
    if tribunal == 'STF':
        return 1
    if tribunal in REGIONAL_COURTS or tribunal.startswith('TRT') or 'TRT' in orgao:
        return 2
    if tribunal == 'STJ':
        return 3
    return 4


def free_text_boost(p: Precedent) -> int:
    """Boost table used for free-text queries."""
    tipo, tribunal, _, _ = _fields(p)
    if tribunal == 'TST' and is_binding_type(tipo):
        return 500
    if tribunal == 'STF' and tipo in STF_BINDING_TYPES:
        return 500
    if tribunal in REGIONAL_COURTS and tipo in REGIONAL_BINDING_TYPES:
        return 450
    if tribunal == 'STF' and _is_sumula(tipo):
        return 100
    if tribunal == 'TST' and (_is_sumula(tipo) or tipo == 'OJ'):
        return 100
    return {'STF': 50, 'TST': 50, 'TRT8': 30, 'TRT-8': 30, 'STJ': 5}.get(tribunal, 0)


def topic_boost(p: Precedent) -> int:
    """Boost table used for topic + context queries; also inspects ``category`` and ``orgao``."""
    tipo, tribunal, orgao, category = _fields(p)
    if tribunal == 'TST' and (is_binding_type(tipo) or tipo == 'IAC' or 'IRR' in category or 'IAC' in category):
        return 500
    if tribunal == 'STF' and (tipo in STF_BINDING_TYPES or 'REPERCUSSAO' in category):
        return 480
    regional = tribunal in REGIONAL_COURTS or 'TRT' in orgao
    if regional and (tipo in REGIONAL_BINDING_TYPES or 'IRDR' in category or 'IAC' in category):
        return 450
    if tribunal == 'STF' and _is_sumula(tipo):
        return 80
    if tribunal == 'TST' and (_is_sumula(tipo) or tipo == 'OJ'):
        return 70
    return {'STF': 15, 'STJ': 12, 'TST': 10}.get(tribunal, 0)


__all__ = ['free_text_boost', 'topic_boost', 'court_rank', 'STF_BINDING_TYPES', 'REGIONAL_BINDING_TYPES']
