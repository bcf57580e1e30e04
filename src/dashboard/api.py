"""Flask API exposing the month views over the record store."""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from src.common.config import Settings, settings as default_settings

from .aggregators import build_price_histogram, compute_statistics, count_categories
from .combiner import combine
from .errors import DashboardError
from .filters import filter_records
from .loader import DatasetLoader
from .paginator import paginate
from .store import RecordStore

logger = logging.getLogger(__name__)


def create_app(
    store: RecordStore | None = None,
    loader: DatasetLoader | None = None,
    settings: Settings | None = None,
) -> Flask:
    """Flask application factory.

    Args:
        store: Record store shared by all handlers. A new empty one is
            created when omitted.
        loader: Dataset initializer bound to ``store``.
        settings: Application settings.

    Returns:
        Flask: Application instance. The store and loader are kept in
        ``app.extensions["dashboard"]``.
    """
    settings = settings or default_settings
    store = store if store is not None else RecordStore()
    loader = loader or DatasetLoader(store, settings=settings)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["dashboard"] = {"store": store, "loader": loader}

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    pagination = settings.pagination

    @app.errorhandler(DashboardError)
    def handle_dashboard_error(error: DashboardError):
        logger.warning("%s %s -> %s: %s", request.method, request.path, error.code, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.route("/api/health", methods=["GET"])
    def health_check():
        return jsonify({
            "status": "ok",
            "records": len(store),
            "loadedAt": store.loaded_at.isoformat() if store.loaded_at else None,
        })

    @app.route("/api/initialize-database", methods=["GET"])
    def initialize_database():
        count = loader.initialize()
        return jsonify({
            "message": "Database initialized successfully",
            "records": count,
        })

    @app.route("/api/transactions", methods=["GET"])
    def list_transactions():
        """Month listing with search and pagination."""
        view = filter_records(
            store.snapshot(),
            request.args.get("month"),
            request.args.get("search", ""),
        )
        result = paginate(
            view,
            request.args.get("page"),
            request.args.get("perPage"),
            default_page=pagination.default_page,
            default_per_page=pagination.default_per_page,
        )
        return jsonify(result.to_dict())

    @app.route("/api/statistics", methods=["GET"])
    def statistics():
        records = store.snapshot()
        view = filter_records(records, request.args.get("month"))
        return jsonify(compute_statistics(view, len(records)).to_dict())

    @app.route("/api/bar-chart", methods=["GET"])
    def bar_chart():
        view = filter_records(store.snapshot(), request.args.get("month"))
        return jsonify([b.to_dict() for b in build_price_histogram(view)])

    @app.route("/api/pie-chart", methods=["GET"])
    def pie_chart():
        view = filter_records(store.snapshot(), request.args.get("month"))
        return jsonify([c.to_dict() for c in count_categories(view)])

    @app.route("/api/combined-response", methods=["GET"])
    def combined_response():
        result = combine(
            store.snapshot(),
            request.args.get("month"),
            default_page=pagination.default_page,
            default_per_page=pagination.default_per_page,
        )
        return jsonify(result.to_dict())

    return app
