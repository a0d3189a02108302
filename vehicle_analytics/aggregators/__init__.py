"""
VehicleAnalytics - Aggregators Package

Period grouping and trend aggregation modules.
"""

from vehicle_analytics.aggregators.time_aggregator import (
    RegistrationGrouper,
    TrendAggregator,
    TimeAggregator
)

__all__ = [
    "RegistrationGrouper",
    "TrendAggregator",
    "TimeAggregator"
]
