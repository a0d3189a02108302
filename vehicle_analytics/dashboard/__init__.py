"""
VehicleAnalytics - Dashboard Package

Dash/Plotly dashboard for vehicle registration analytics.
"""

from vehicle_analytics.dashboard.app import VehicleAnalyticsDashboard
from vehicle_analytics.dashboard.data_provider import DashboardDataProvider

__all__ = [
    "VehicleAnalyticsDashboard",
    "DashboardDataProvider"
]
