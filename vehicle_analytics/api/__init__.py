"""
VehicleAnalytics - REST API Package

Flask blueprints mounted on the dashboard's Flask server under /api.
"""

import logging

from flask import Blueprint, Flask, jsonify
from flask_cors import CORS

from vehicle_analytics import __version__
from vehicle_analytics.api.analytics_routes import create_analytics_blueprint
from vehicle_analytics.api.data_routes import create_data_blueprint
from vehicle_analytics.api.vehicle_routes import create_vehicle_blueprint
from vehicle_analytics.views.registry import ViewRegistry


logger = logging.getLogger(__name__)


def create_core_blueprint() -> Blueprint:
    """Blueprint for /api/health and the /api endpoint index."""
    core_bp = Blueprint("core", __name__)

    @core_bp.get("/health")
    def health():
        return jsonify(status="OK", message="Vehicle Analytics Dashboard API is running")

    @core_bp.get("")
    def api_index():
        return jsonify({
            "message": "Vehicle Analytics Dashboard API",
            "version": __version__,
            "endpoints": {
                "health": "/api/health",
                "vehicles": "/api/vehicles",
                "analytics": "/api/analytics",
                "data": "/api/data"
            }
        })

    return core_bp


def register_api(server: Flask, views: ViewRegistry) -> Flask:
    """
    Mount every API blueprint on a Flask server.

    Args:
        server: Flask app (the Dash app's .server)
        views: Views bound to the shared record store

    Returns:
        The same Flask app
    """
    CORS(server, resources={r"/api/*": {"origins": "*"}})

    server.register_blueprint(create_core_blueprint(), url_prefix="/api")
    server.register_blueprint(create_vehicle_blueprint(views.vehicles), url_prefix="/api/vehicles")
    server.register_blueprint(create_analytics_blueprint(views.analytics), url_prefix="/api/analytics")
    server.register_blueprint(create_data_blueprint(views.data), url_prefix="/api/data")

    logger.info("[OK] REST API registered under /api")
    return server


__all__ = [
    "register_api",
    "create_core_blueprint",
    "create_vehicle_blueprint",
    "create_analytics_blueprint",
    "create_data_blueprint"
]
