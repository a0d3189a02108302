"""
VehicleAnalytics - Analytics API Routes

GET /api/analytics/yoy           year-over-year growth
GET /api/analytics/qoq           quarter-over-quarter growth
GET /api/analytics/trends        per-period totals (period=daily|weekly|monthly|...)
GET /api/analytics/market-share  share of filtered total

Every route accepts format=csv for a CSV attachment.
"""

from flask import Blueprint, request

from vehicle_analytics.api.responses import register_error_handlers, rows_response, to_rows
from vehicle_analytics.views.analytics_views import AnalyticsViews


def create_analytics_blueprint(views: AnalyticsViews) -> Blueprint:
    """
    Build the analytics blueprint.

    Args:
        views: Analytics views bound to the record store

    Returns:
        Blueprint to mount at /api/analytics
    """
    analytics_bp = Blueprint("analytics", __name__)

    @analytics_bp.get("/yoy")
    def yoy_growth():
        return rows_response(to_rows(views.yoy(request.args)), "yoy_growth.csv")

    @analytics_bp.get("/qoq")
    def qoq_growth():
        return rows_response(to_rows(views.qoq(request.args)), "qoq_growth.csv")

    @analytics_bp.get("/trends")
    def trends():
        return rows_response(to_rows(views.trends(request.args)), "trends.csv")

    @analytics_bp.get("/market-share")
    def market_share():
        return rows_response(to_rows(views.market_share(request.args)), "market_share.csv")

    register_error_handlers(analytics_bp)
    return analytics_bp
