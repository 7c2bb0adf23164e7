from prometheus_client import Counter

SEARCHES_TOTAL = Counter('jurisrank_searches_total', 'Precedent searches served', ['mode'])
CACHE_HITS_TOTAL = Counter('jurisrank_cache_hits_total', 'Precedent searches answered from cache')
RERANK_TOTAL = Counter('jurisrank_rerank_total', 'LLM rerank outcomes', ['outcome'])
