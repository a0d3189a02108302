"""
VehicleAnalytics - Market Share Calculator

Computes each manufacturer/vehicle type's share of the filtered total.
"""

import logging
from typing import List, Optional, Sequence

from vehicle_analytics.aggregators.time_aggregator import RegistrationGrouper
from vehicle_analytics.calculators.growth_calculator import round2
from vehicle_analytics.models.facts import MarketShareEntry, VehicleRecord


logger = logging.getLogger(__name__)


class MarketShareCalculator:
    """
    Calculator for market share by manufacturer and vehicle type.
    """

    def __init__(self, grouper: Optional[RegistrationGrouper] = None):
        self.grouper = grouper or RegistrationGrouper()

    def calculate(self, records: Sequence[VehicleRecord]) -> List[MarketShareEntry]:
        """
        Calculate market share for filtered records.

        Args:
            records: Filtered registration records

        Returns:
            MarketShareEntry list sorted by total vehicles, highest first.
            All shares are 0 when the grand total is 0.
        """
        grand_total = sum(record.count for record in records)
        buckets = self.grouper.group_by_share(records)

        entries = [
            MarketShareEntry(
                manufacturer=bucket.manufacturer,
                vehicle_type=bucket.vehicle_type,
                total_vehicles=bucket.total_vehicles,
                total_registrations=bucket.total_registrations,
                market_share_percentage=(
                    round2(bucket.total_vehicles / grand_total * 100) if grand_total > 0 else 0.0
                )
            )
            for bucket in buckets.values()
        ]

        logger.debug(f"Calculated market share for {len(entries)} buckets (total {grand_total})")
        return sorted(entries, key=lambda entry: entry.total_vehicles, reverse=True)
