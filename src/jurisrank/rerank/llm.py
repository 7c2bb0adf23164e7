"""LLM rerankers.

A reranker receives the fully built prompt and returns the raw model reply.
Raising means the judgment is unusable; the engine then keeps the lexical
order. ``NullReranker`` stands for "no collaborator configured".
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol

import requests

from jurisrank.errors import RerankError

logger = logging.getLogger(__name__)

Messages = List[Dict[str, Any]]


@dataclass(frozen=True)
class RerankOptions:
    """Deterministic decoding parameters requested for every ranking call."""
    max_tokens: int = 300
    temperature: float = 0.0
    top_p: float = 0.9
    top_k: int = 40
    disable_thinking: bool = True
    use_instructions: bool = False


DEFAULT_OPTIONS = RerankOptions()


class Reranker(Protocol):
    def rerank(self, prompt: str) -> str:
        ...


class NullReranker:
    enabled = False

    def rerank(self, prompt: str) -> str:
        raise RerankError("No LLM reranker configured")


def user_message(prompt: str) -> Messages:
    return [{"role": "user", "content": [{"type": "text", "text": prompt}]}]


class CallableReranker:
    """Adapts a ``call_llm(messages, options) -> str`` function."""

    enabled = True

    def __init__(self, call_llm: Callable[[Messages, Dict[str, Any]], str], options: RerankOptions = DEFAULT_OPTIONS) -> None:
        if not callable(call_llm):
            raise TypeError("call_llm must be callable")
        self._call_llm = call_llm
        self.options = options

    def rerank(self, prompt: str) -> str:
        reply = self._call_llm(user_message(prompt), asdict(self.options))
        if not isinstance(reply, str) or not reply.strip():
            raise RerankError("Empty reply from LLM")
        return reply


class HttpChatReranker:
    """Posts the prompt to an OpenAI-compatible ``/chat/completions`` endpoint."""

    enabled = True

    def __init__(
        self,
        api_url: str,
        model: str,
        api_key: str = "",
        timeout_s: float = 30.0,
        options: RerankOptions = DEFAULT_OPTIONS,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.timeout_s = timeout_s
        self.options = options
        self._session = session or requests.Session()

    def _payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.options.max_tokens,
            "temperature": self.options.temperature,
            "top_p": self.options.top_p,
        }

    def rerank(self, prompt: str) -> str:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            r = self._session.post(
                f"{self.api_url}/chat/completions",
                json=self._payload(prompt),
                headers=headers,
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise RerankError(f"LLM request failed: {e}") from e
        if r.status_code != 200:
            raise RerankError(f"LLM API error {r.status_code}: {r.text[:200]}")
        try:
            return r.json()["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise RerankError(f"Unexpected LLM response shape: {e}") from e


def build_reranker(api_url: str = "", model: str = "", api_key: str = "", timeout_s: float = 30.0) -> Reranker:
    if not api_url:
        logger.info("LLM reranking disabled (no API URL configured)")
        return NullReranker()
    return HttpChatReranker(api_url, model=model, api_key=api_key, timeout_s=timeout_s)


__all__ = [
    'Reranker', 'NullReranker', 'CallableReranker', 'HttpChatReranker',
    'RerankOptions', 'DEFAULT_OPTIONS', 'build_reranker', 'user_message',
]
