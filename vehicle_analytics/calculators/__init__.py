"""
VehicleAnalytics - Calculators Package

Growth, market share and KPI calculation modules.
"""

from vehicle_analytics.calculators.growth_calculator import (
    GrowthCalculator,
    growth_percentage,
    round2
)
from vehicle_analytics.calculators.market_share_calculator import MarketShareCalculator
from vehicle_analytics.calculators.kpi_calculator import DashboardKPIs, KPICalculator

__all__ = [
    "GrowthCalculator",
    "growth_percentage",
    "round2",
    "MarketShareCalculator",
    "DashboardKPIs",
    "KPICalculator"
]
