"""Second-pass reranking of lexical candidates with an LLM."""

from jurisrank.rerank.llm import (
    Reranker,
    NullReranker,
    CallableReranker,
    HttpChatReranker,
    RerankOptions,
    build_reranker,
)
from jurisrank.rerank.prompt import build_prompt, parse_ranking, MAX_SELECTED

__all__ = [
    "Reranker",
    "NullReranker",
    "CallableReranker",
    "HttpChatReranker",
    "RerankOptions",
    "build_reranker",
    "build_prompt",
    "parse_ranking",
    "MAX_SELECTED",
]
