import platform
from flask import Blueprint, jsonify, Response

from jurisrank.api import config, state

monitoring_bp = Blueprint('monitoring', __name__)

@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

@monitoring_bp.route("/version", methods=["GET"])
def version():
    lexicon = state.engine.lexicon if state.engine is not None else None
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "python": platform.python_version(),
        "lexicon": {"version": lexicon.version, "entries": len(lexicon)} if lexicon else None,
    })

@monitoring_bp.route("/api/health", methods=["GET"])
def health():
    if state.engine is None:
        return jsonify({"status": "error", "detail": state.engine_error}), 500
    return jsonify({"status": "ok"}), 200

@monitoring_bp.route("/api/health/ready", methods=["GET"])
def health_ready():
    """Readiness probe - engine built and reranker wiring known."""
    checks = {
        'engine_loaded': state.engine is not None,
        'reranker_enabled': bool(state.engine is not None and state.engine.rerank_enabled),
    }
    ready = checks['engine_loaded']
    return jsonify({
        "ready": ready,
        "checks": checks,
        "cache_entries": len(state.engine.cache) if state.engine is not None else 0,
    }), 200 if ready else 503

@monitoring_bp.route("/api/health/live", methods=["GET"])
def health_live():
    """Liveness probe - minimal check that service is running."""
    return jsonify({"alive": True}), 200
