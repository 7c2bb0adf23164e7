from jurisrank.api.routes.search import search_bp
from jurisrank.api.routes.monitoring import monitoring_bp

__all__ = ['search_bp', 'monitoring_bp']
