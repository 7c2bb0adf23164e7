import logging
from flask import request, jsonify

from jurisrank.api import config, state
from jurisrank.cache import PrecedentCache
from jurisrank.corpus import JsonCorpusStore
from jurisrank.engine import PrecedentSearchEngine
from jurisrank.errors import LexiconLoadError
from jurisrank.lexicon import default_lexicon, load_lexicon
from jurisrank.rerank import build_reranker

logger = logging.getLogger("api")


def load_engine():
    try:
        lexicon = load_lexicon(config.LEXICON_PATH) if config.LEXICON_PATH else default_lexicon()
    except LexiconLoadError as e:
        state.engine = None
        state.engine_error = str(e)
        logger.error(f"[api] Failed to load lexicon: {e}")
        return

    reranker = build_reranker(
        api_url=config.LLM_API_URL,
        model=config.LLM_MODEL,
        api_key=config.LLM_API_KEY,
        timeout_s=config.LLM_TIMEOUT_SECONDS,
    )
    state.engine = PrecedentSearchEngine(
        corpus=JsonCorpusStore(config.CORPUS_PATH),
        reranker=reranker,
        cache=PrecedentCache(ttl_seconds=config.CACHE_TTL_SECONDS),
        lexicon=lexicon,
    )
    state.engine_error = None
    logger.info(f"[api] Search engine ready (corpus={config.CORPUS_PATH}, lexicon v{lexicon.version}, {len(lexicon)} thesaurus entries)")


def require_api_key():
    if config.API_KEY:
        key = request.headers.get("X-API-Key", "")
        if key != config.API_KEY:
            return jsonify({"error": "Unauthorized"}), 401
    return None
