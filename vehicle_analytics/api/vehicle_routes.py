"""
VehicleAnalytics - Vehicle API Routes

GET /api/vehicles           filtered, paginated records
GET /api/vehicles/stats     totals per vehicle type, manufacturer, fuel type
GET /api/vehicles/filters   distinct values for filter dropdowns
"""

from flask import Blueprint, jsonify, request

from vehicle_analytics.api.responses import register_error_handlers, rows_response, to_rows
from vehicle_analytics.views.vehicle_views import VehicleViews


def create_vehicle_blueprint(views: VehicleViews) -> Blueprint:
    """
    Build the vehicles blueprint.

    Args:
        views: Vehicle views bound to the record store

    Returns:
        Blueprint to mount at /api/vehicles
    """
    vehicle_bp = Blueprint("vehicles", __name__)

    @vehicle_bp.get("")
    def list_vehicles():
        return rows_response(to_rows(views.list_vehicles(request.args)), "vehicles.csv")

    @vehicle_bp.get("/stats")
    def vehicle_stats():
        return rows_response(to_rows(views.stats(request.args)), "vehicle_stats.csv")

    @vehicle_bp.get("/filters")
    def vehicle_filters():
        return jsonify(views.filter_options())

    register_error_handlers(vehicle_bp)
    return vehicle_bp
