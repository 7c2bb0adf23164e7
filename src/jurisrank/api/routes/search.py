import logging
from flask import Blueprint, request, jsonify
from flasgger import swag_from
from werkzeug.exceptions import BadRequest
from pydantic import ValidationError

from jurisrank.api import state, dependencies, models
from jurisrank.api.extensions import limiter
from jurisrank.errors import CorpusLoadError

logger = logging.getLogger("api")

search_bp = Blueprint('search', __name__)

@search_bp.route("/api/precedents/search", methods=["POST"])
@limiter.limit("60/minute")
@swag_from({
    'tags': ['search'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {'type': 'object', 'properties': {
            'topic': {'type': 'string'},
            'context': {'type': 'string'},
            'filters': {'type': 'object', 'properties': {
                'tipo': {'type': 'array', 'items': {'type': 'string'}},
                'tribunal': {'type': 'array', 'items': {'type': 'string'}},
                'searchTerm': {'type': 'string'},
            }},
        }}
    }],
    'responses': {200: {'description': 'OK'}, 400: {'description': 'Validation failed'}, 503: {'description': 'Engine or corpus unavailable'}}
})
def search_precedents():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    if state.engine is None:
        return jsonify({"error": "Search engine unavailable", "detail": state.engine_error}), 503

    raw = request.get_json(silent=True)
    if not isinstance(raw, dict):
        raise BadRequest("Body must be a JSON object")
    try:
        parsed = models.PrecedentSearchRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    if not parsed.has_query():
        return jsonify({"error": "validation_failed", "details": [{"msg": "topic or filters.searchTerm is required"}]}), 400

    try:
        results = state.engine.search(parsed.topic.strip(), parsed.context or "", parsed.filters)
    except CorpusLoadError as e:
        logger.error(f"Corpus load failed: {e}")
        return jsonify({"error": "corpus_unavailable", "detail": str(e)}), 503
    return jsonify({"results": [r.public_dict() for r in results], "count": len(results)})
