"""
VehicleAnalytics - Data Models Package

Dataclass models for grouping dimensions and registration facts.
"""

from vehicle_analytics.models.dimensions import PeriodType, BucketKey, ShareKey, DimPeriod
from vehicle_analytics.models.facts import (
    VehicleRecord,
    AggregateBucket,
    GrowthEntry,
    MarketShareEntry,
    VehicleStatEntry
)

__all__ = [
    "PeriodType",
    "BucketKey",
    "ShareKey",
    "DimPeriod",
    "VehicleRecord",
    "AggregateBucket",
    "GrowthEntry",
    "MarketShareEntry",
    "VehicleStatEntry"
]
