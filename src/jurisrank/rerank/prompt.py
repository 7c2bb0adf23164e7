"""Prompt construction and response parsing for LLM reranking.

Contract:
- build_prompt(title, context, candidates) -> str: compact indexed listing
- parse_ranking(text, n) -> List[int]: in-range indices, most relevant first
"""
from __future__ import annotations

import re
from typing import List, Sequence

from jurisrank.schemas import Precedent

MAX_SELECTED = 10
THESIS_PREVIEW_CHARS = 150

_PATTERN_INT = re.compile(r"\d+")

PROMPT_TEMPLATE = """Você é um especialista em jurisprudência trabalhista brasileira.

TÓPICO DA SENTENÇA: "{title}"

CONTEXTO/RELATÓRIO:
{context}

PRECEDENTES CANDIDATOS:
{candidates}

TAREFA: Selecione os {limit} precedentes MAIS RELEVANTES para fundamentar este tópico específico.

CRITÉRIOS DE PRIORIZAÇÃO:
1. Precedentes que tratam EXATAMENTE do tema específico (não apenas mencionam palavras similares)
2. Súmulas e OJs vinculantes diretamente aplicáveis
3. Teses de repercussão geral ou recursos repetitivos sobre o assunto
4. Hierarquia: TST = STF > TRT > STJ

IMPORTANTE: Foque na PERTINÊNCIA TEMÁTICA REAL, não apenas em palavras coincidentes.

Retorne APENAS os índices dos {limit} selecionados, do mais ao menos relevante.
Formato: 5,12,3,8,15,1,9,7,2,11"""


def format_candidate(index: int, p: Precedent) -> str:
    entry = f"{index}: {p.tipo_processo or 'Precedente'}"
    if p.numero:
        entry += f" {p.numero}"
    if p.tribunal:
        entry += f" ({p.tribunal})"
    if p.titulo:
        entry += f"\n   Título: {p.titulo}"
    entry += f"\n   Tese: {p.holding()[:THESIS_PREVIEW_CHARS]}..."
    return entry


def build_prompt(title: str, context: str, candidates: Sequence[Precedent], limit: int = MAX_SELECTED) -> str:
    listing = "\n\n".join(format_candidate(i, p) for i, p in enumerate(candidates))
    return PROMPT_TEMPLATE.format(
        title=title or '',
        context=(context or '').strip() or 'Não disponível',
        candidates=listing,
        limit=limit,
    )


def parse_ranking(text: str, n: int, limit: int = MAX_SELECTED) -> List[int]:
    """Extract candidate indices from a delimited reply.

    Out-of-range and repeated indices are dropped; at most ``limit`` kept.
    """
    seen: List[int] = []
    for match in _PATTERN_INT.findall(text or ''):
        idx = int(match)
        if idx < n and idx not in seen:
            seen.append(idx)
        if len(seen) >= limit:
            break
    return seen


__all__ = ['build_prompt', 'parse_ranking', 'format_candidate', 'MAX_SELECTED']
