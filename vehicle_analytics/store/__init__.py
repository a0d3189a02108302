"""
VehicleAnalytics - Record Store Package

In-memory working set of registration records.
"""

from vehicle_analytics.store.record_store import RecordStore

__all__ = [
    "RecordStore"
]
