"""
VehicleAnalytics - Views Package

Filtered analytics, record and data-management views for the dashboard
and REST API.
"""

from vehicle_analytics.views.record_filter import FilterCriteria
from vehicle_analytics.views.analytics_views import AnalyticsViews
from vehicle_analytics.views.vehicle_views import VehicleViews
from vehicle_analytics.views.data_views import DataViews, ExportResult
from vehicle_analytics.views.registry import ViewRegistry, build_views

__all__ = [
    "FilterCriteria",
    "AnalyticsViews",
    "VehicleViews",
    "DataViews",
    "ExportResult",
    "ViewRegistry",
    "build_views"
]
