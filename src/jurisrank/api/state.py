from typing import Any, Optional

from jurisrank.engine import PrecedentSearchEngine

# Global engine (built on startup by dependencies.load_engine)
engine: Optional[PrecedentSearchEngine] = None
engine_error: Optional[str] = None

# Metrics
REQUEST_COUNT: Any = None
REQUEST_LATENCY: Any = None
