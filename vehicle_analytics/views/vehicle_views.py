"""
VehicleAnalytics - Vehicle Views

Record listing, grouped statistics and filter options.
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from vehicle_analytics.models.facts import VehicleRecord, VehicleStatEntry
from vehicle_analytics.store.record_store import RecordStore
from vehicle_analytics.utils.performance import timed
from vehicle_analytics.views.record_filter import FilterCriteria


logger = logging.getLogger(__name__)


def parse_non_negative_int(value: Optional[str], default: int) -> int:
    """
    Parse a pagination parameter.

    Args:
        value: Raw query value
        default: Value used when missing or not an integer

    Returns:
        Parsed integer clamped to >= 0
    """
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return max(parsed, 0)


class VehicleViews:
    """
    Record-level views.

    Provides:
    - Filtered, paginated record listing
    - Totals per vehicle type, manufacturer and fuel type
    - Distinct values for filter dropdowns
    """

    LIST_FILTERS = ("vehicle_type", "manufacturer", "start_date", "end_date", "fuel_type")
    STATS_FILTERS = ("start_date", "end_date", "vehicle_type", "manufacturer")

    def __init__(self, store: RecordStore, default_limit: int = 100, max_limit: int = 10000):
        """
        Initialize the vehicle views.

        Args:
            store: Record store to read snapshots from
            default_limit: Page size when no limit is given
            max_limit: Upper bound for requested page sizes
        """
        self.store = store
        self.default_limit = default_limit
        self.max_limit = max_limit
        logger.debug("VehicleViews initialized")

    @timed("views.list_vehicles")
    def list_vehicles(self, params: Optional[Mapping[str, str]] = None) -> List[VehicleRecord]:
        """
        Filtered records sliced by offset and limit.

        Filters: vehicle_type, manufacturer, start_date, end_date, fuel_type
        Options: limit (default 100), offset (default 0)
        """
        params = params or {}
        criteria = FilterCriteria.from_params(params, self.LIST_FILTERS)
        records = criteria.apply(self.store.snapshot())

        offset = parse_non_negative_int(params.get("offset"), 0)
        limit = min(parse_non_negative_int(params.get("limit"), self.default_limit), self.max_limit)
        return records[offset:offset + limit]

    @timed("views.stats")
    def stats(self, params: Optional[Mapping[str, str]] = None) -> List[VehicleStatEntry]:
        """
        Totals and registration date span per vehicle type, manufacturer
        and fuel type, largest first.

        Filters: start_date, end_date, vehicle_type, manufacturer
        """
        criteria = FilterCriteria.from_params(params, self.STATS_FILTERS)
        records = criteria.apply(self.store.snapshot())

        grouped: Dict[Tuple[str, str, str], VehicleStatEntry] = {}
        for record in records:
            key = (record.vehicle_type, record.manufacturer, record.fuel_type)
            entry = grouped.get(key)
            if entry is None:
                entry = VehicleStatEntry(
                    vehicle_type=record.vehicle_type,
                    manufacturer=record.manufacturer,
                    fuel_type=record.fuel_type,
                    first_registration=record.registration_date,
                    last_registration=record.registration_date
                )
                grouped[key] = entry
            entry.add(record)

        return sorted(grouped.values(), key=lambda entry: entry.total_vehicles, reverse=True)

    def filter_options(self) -> Dict[str, List[str]]:
        """
        Distinct, sorted values for each categorical filter.

        Returns:
            Dictionary with vehicle_types, manufacturers and fuel_types
        """
        records = self.store.snapshot()
        return {
            "vehicle_types": sorted({record.vehicle_type for record in records}),
            "manufacturers": sorted({record.manufacturer for record in records}),
            "fuel_types": sorted({record.fuel_type for record in records})
        }
