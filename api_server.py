import logging
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from giftradar import __version__
from giftradar.context import AppContext
from giftradar.core import FilterOptions, default_config, load_config, resolve_criterion, SORT_CRITERIA
from giftradar.utils.errors import DataNotFoundError, GiftRadarError, InvalidParameterError

app = Flask(__name__)

# Configure Logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

# Loaded once per process; reset by assigning None
_cache = {"ctx": None, "documents": None}


def get_ctx() -> AppContext:
    if _cache["ctx"] is None:
        try:
            config = load_config()
        except FileNotFoundError:
            logger.info("No config file found, using built-in defaults")
            config = default_config()
        _cache["ctx"] = AppContext(config)
    return _cache["ctx"]


def get_documents():
    if _cache["documents"] is None:
        _cache["documents"] = get_ctx().load_documents()
    return _cache["documents"]


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidParameterError(f"{name} must be an integer, got {raw!r}")
    if value < 0:
        raise InvalidParameterError(f"{name} must not be negative")
    return value


def _terms_arg(name: str):
    raw = request.args.get(name, "")
    return tuple(term.strip() for term in raw.split(",") if term.strip())


@app.errorhandler(GiftRadarError)
def handle_giftradar_error(e: GiftRadarError):
    status = 404 if isinstance(e, DataNotFoundError) else 400
    logger.warning(f"Request failed: {e.message}")
    return jsonify({"status": "error", "message": e.message, "error": e.to_dict()}), status


@app.errorhandler(Exception)
def handle_unexpected_error(e: Exception):
    if isinstance(e, HTTPException):
        return e
    logger.error(f"Request failed: {e}")
    return jsonify({"status": "error", "message": str(e)}), 500


@app.route('/documents', methods=['GET'])
def api_documents():
    """
    Filtered and sorted documents.
    Query Params:
        q (optional): search term over title, summary and source
        source (optional): exact source name
        date_range (optional): all, YYYY or lastN
        keywords (optional): comma-separated selected terms
        sort (optional): date, date-asc, title, source, keywords, keyword-relevance
        limit (optional): max number of documents
    """
    ctx = get_ctx()
    options = FilterOptions(
        search_term=request.args.get('q', ''),
        source=request.args.get('source', 'all'),
        date_range=request.args.get('date_range', 'all'),
        keywords=_terms_arg('keywords'),
    )
    sort = request.args.get('sort', 'date')
    criterion = resolve_criterion(sort)
    if criterion is None:
        raise InvalidParameterError(
            f"Invalid sort criterion: {sort}",
            suggestion=f"Supported criteria: {', '.join(SORT_CRITERIA)}"
        )
    limit = _int_arg('limit', 50)

    logger.info(f"Received request: /documents sort={criterion} keywords={list(options.keywords)}")
    filtered = ctx.filter(get_documents(), options)
    ordered = ctx.rank(filtered, criterion, options.keywords)

    results = []
    for document in ordered[:limit]:
        item = document.to_dict()
        if options.keywords:
            item["score"] = ctx.score(options.keywords, document).value
        results.append(item)

    return jsonify({
        "status": "success",
        "total": len(filtered),
        "count": len(results),
        "documents": results,
    }), 200


@app.route('/categories', methods=['GET'])
def api_categories():
    """
    Category metrics.
    Query Params:
        limit (optional): sample size per category
    """
    ctx = get_ctx()
    limit = _int_arg('limit', ctx.sample_limit)
    metrics = ctx.category_report(get_documents(), limit)
    return jsonify({
        "status": "success",
        "categories": [m.to_dict() for m in metrics],
    }), 200


@app.route('/stats', methods=['GET'])
def api_stats():
    """Aggregates for the dashboard charts."""
    return jsonify({"status": "success", **get_ctx().dashboard_stats(get_documents())}), 200


@app.route('/filters', methods=['GET'])
def api_filters():
    """Available sources, date ranges and keywords for the filter panel."""
    return jsonify({"status": "success", **get_ctx().filter_options(get_documents())}), 200


@app.route('/health', methods=['GET'])
def api_health():
    """Health check and system info."""
    return jsonify({
        "status": "online",
        "version": __version__,
        "features": ["keyword-relevance", "category-metrics", "filters", "filter-options", "stats"]
    }), 200


if __name__ == '__main__':
    server = get_ctx().config.get("SERVER", {})
    print("Starting GiftRadar API Server...")
    print("Usage:")
    print("  Documents:   http://localhost:5000/documents?keywords=eco-friendly&sort=keyword-relevance")
    print("  Categories:  http://localhost:5000/categories?limit=3")
    app.run(host=server.get("HOST", "127.0.0.1"), port=server.get("PORT", 5000))
