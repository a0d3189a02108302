"""
VehicleAnalytics - Data Management API Routes

POST /api/data/init        replace the store with fresh mock data
POST /api/data/test-init   same, with test wording
GET  /api/data/status      store summary
GET  /api/data/export      filtered records as JSON or CSV attachment
"""

import logging

from flask import Blueprint, Response, jsonify, request

from vehicle_analytics.api.responses import register_error_handlers
from vehicle_analytics.views.data_views import DataViews


logger = logging.getLogger(__name__)


def create_data_blueprint(views: DataViews) -> Blueprint:
    """
    Build the data management blueprint.

    Args:
        views: Data views bound to the record store

    Returns:
        Blueprint to mount at /api/data
    """
    data_bp = Blueprint("data", __name__)

    @data_bp.post("/init")
    def init_data():
        logger.info("[...] Initializing data with mock data")
        return jsonify(views.initialize())

    @data_bp.post("/test-init")
    def test_init_data():
        logger.info("[...] Generating test mock data")
        return jsonify(views.initialize(
            message="Test data generated successfully!",
            note="Dashboard should now show data in all sections",
            source_label="Test Mock Data"
        ))

    @data_bp.get("/status")
    def data_status():
        return jsonify(views.status())

    @data_bp.get("/export")
    def export_data():
        result = views.export(request.args)
        response = Response(result.content, mimetype=result.mimetype)
        response.headers["Content-Disposition"] = f"attachment; filename={result.filename}"
        response.headers["Cache-Control"] = "no-cache"
        return response

    register_error_handlers(data_bp)
    return data_bp
