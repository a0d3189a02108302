"""
VehicleAnalytics - Growth Calculator

Computes period-over-period growth (YoY and QoQ) from period buckets.
"""

import logging
import math
from collections import defaultdict
from typing import Callable, Dict, Hashable, Iterable, List, Optional

from vehicle_analytics.models.facts import AggregateBucket, GrowthEntry


logger = logging.getLogger(__name__)


def round2(value: float) -> float:
    """
    Round to 2 decimal places, halves rounding up (toward +infinity).

    Args:
        value: Value to round

    Returns:
        floor(value * 100 + 0.5) / 100
    """
    return math.floor(value * 100 + 0.5) / 100


def growth_percentage(current: int, previous: int) -> float:
    """
    Percentage change from previous to current.

    A previous total of 0 reports 0 growth rather than an infinite change.

    Args:
        current: Current period total
        previous: Previous period total

    Returns:
        Signed percentage rounded to 2 decimal places
    """
    if previous <= 0:
        return 0.0
    return round2(((current - previous) / previous) * 100)


def label_year(label: str) -> str:
    """Year part of a yearly ("2024") or quarterly ("2024-Q3") label."""
    return label.split("-", 1)[0]


def label_quarter(label: str) -> str:
    """Quarter number of a quarterly label ("2024-Q3" -> "3")."""
    return label.rsplit("Q", 1)[-1]


class GrowthCalculator:
    """
    Calculator for period-over-period growth.

    Computes:
    - Year-over-year growth per vehicle type and manufacturer
    - Quarter-over-quarter growth per vehicle type, manufacturer and year
    """

    def year_over_year(self, buckets: Iterable[AggregateBucket]) -> List[GrowthEntry]:
        """
        Compare consecutive years for each vehicle type and manufacturer.

        Args:
            buckets: Buckets grouped with PeriodType.YEARLY

        Returns:
            GrowthEntry list sorted by absolute growth, highest first
        """
        return self._period_over_period(
            buckets,
            partition_key=lambda bucket: (bucket.vehicle_type, bucket.manufacturer),
            order_key=lambda bucket: int(label_year(bucket.period_label)),
            period_name=lambda bucket: label_year(bucket.period_label),
            period_kind="year"
        )

    def quarter_over_quarter(self, buckets: Iterable[AggregateBucket]) -> List[GrowthEntry]:
        """
        Compare consecutive quarters within a year for each vehicle type
        and manufacturer. Q4 of one year is never compared with Q1 of the next.

        Args:
            buckets: Buckets grouped with PeriodType.QUARTERLY

        Returns:
            GrowthEntry list sorted by absolute growth, highest first
        """
        return self._period_over_period(
            buckets,
            partition_key=lambda bucket: (
                bucket.vehicle_type, bucket.manufacturer, label_year(bucket.period_label)
            ),
            order_key=lambda bucket: int(label_quarter(bucket.period_label)),
            period_name=lambda bucket: label_quarter(bucket.period_label),
            period_kind="quarter",
            year_of=lambda bucket: label_year(bucket.period_label)
        )

    def _period_over_period(
        self,
        buckets: Iterable[AggregateBucket],
        partition_key: Callable[[AggregateBucket], Hashable],
        order_key: Callable[[AggregateBucket], int],
        period_name: Callable[[AggregateBucket], str],
        period_kind: str,
        year_of: Optional[Callable[[AggregateBucket], str]] = None
    ) -> List[GrowthEntry]:
        """
        Partition buckets, order each partition by period and compare
        adjacent periods.
        """
        partitions: Dict[Hashable, List[AggregateBucket]] = defaultdict(list)
        for bucket in buckets:
            partitions[partition_key(bucket)].append(bucket)

        entries: List[GrowthEntry] = []
        for members in partitions.values():
            ordered = sorted(members, key=order_key)

            for previous, current in zip(ordered, ordered[1:]):
                entries.append(GrowthEntry(
                    vehicle_type=current.vehicle_type,
                    manufacturer=current.manufacturer,
                    current_period=period_name(current),
                    previous_period=period_name(previous),
                    current_vehicles=current.total_vehicles,
                    previous_vehicles=previous.total_vehicles,
                    growth_percentage=growth_percentage(current.total_vehicles, previous.total_vehicles),
                    absolute_change=current.total_vehicles - previous.total_vehicles,
                    period_kind=period_kind,
                    year=year_of(current) if year_of else None
                ))

        logger.debug(f"Computed {len(entries)} {period_kind}-over-{period_kind} entries")
        return sorted(entries, key=lambda entry: abs(entry.growth_percentage), reverse=True)
