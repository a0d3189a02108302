"""
VehicleAnalytics - Data Collectors Package

Collectors that produce registration records for the record store.
"""

from vehicle_analytics.collectors.registration_collector import (
    MockRegistrationCollector,
    MANUFACTURERS,
    VEHICLE_TYPES,
    FUEL_TYPES,
    STATES
)

__all__ = [
    "MockRegistrationCollector",
    "MANUFACTURERS",
    "VEHICLE_TYPES",
    "FUEL_TYPES",
    "STATES"
]
