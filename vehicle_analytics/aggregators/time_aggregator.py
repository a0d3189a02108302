"""
VehicleAnalytics - Time Aggregator

Groups registration records into period buckets (daily/weekly/monthly/
quarterly/yearly) and produces ordered trend series.
"""

import logging
from typing import Dict, Iterable, List

from vehicle_analytics.models.dimensions import BucketKey, PeriodType, ShareKey
from vehicle_analytics.models.facts import AggregateBucket, VehicleRecord


logger = logging.getLogger(__name__)


class RegistrationGrouper:
    """
    Partitions records into aggregation buckets.

    Handles:
    - Time-bucketed grouping by (period, vehicle type, manufacturer)
    - Market-share grouping by (manufacturer, vehicle type)
    """

    def group_by_period(
        self,
        records: Iterable[VehicleRecord],
        period_type: PeriodType
    ) -> Dict[BucketKey, AggregateBucket]:
        """
        Group records by period label, vehicle type and manufacturer.

        Args:
            records: Filtered registration records
            period_type: Time-bucketing policy

        Returns:
            Mapping of BucketKey to AggregateBucket
        """
        buckets: Dict[BucketKey, AggregateBucket] = {}

        for record in records:
            label = record.period.label_for(period_type)
            key = BucketKey(label, record.vehicle_type, record.manufacturer)

            bucket = buckets.get(key)
            if bucket is None:
                bucket = AggregateBucket(
                    key=key,
                    vehicle_type=record.vehicle_type,
                    manufacturer=record.manufacturer,
                    period_label=label
                )
                buckets[key] = bucket
            bucket.add(record)

        logger.debug(f"Grouped records into {len(buckets)} {period_type.value} buckets")
        return buckets

    def group_by_share(
        self,
        records: Iterable[VehicleRecord]
    ) -> Dict[ShareKey, AggregateBucket]:
        """
        Group records by manufacturer and vehicle type (no time bucket).

        Args:
            records: Filtered registration records

        Returns:
            Mapping of ShareKey to AggregateBucket
        """
        buckets: Dict[ShareKey, AggregateBucket] = {}

        for record in records:
            key = ShareKey(record.manufacturer, record.vehicle_type)

            bucket = buckets.get(key)
            if bucket is None:
                bucket = AggregateBucket(
                    key=key,
                    vehicle_type=record.vehicle_type,
                    manufacturer=record.manufacturer
                )
                buckets[key] = bucket
            bucket.add(record)

        logger.debug(f"Grouped records into {len(buckets)} share buckets")
        return buckets


class TrendAggregator:
    """
    Builds raw per-period totals ordered chronologically.
    """

    def __init__(self, grouper: RegistrationGrouper):
        self.grouper = grouper

    def build_trend(
        self,
        records: Iterable[VehicleRecord],
        period_type: PeriodType
    ) -> List[AggregateBucket]:
        """
        Aggregate records into a trend series.

        Args:
            records: Filtered registration records
            period_type: Time-bucketing policy

        Returns:
            Buckets sorted ascending by period label (ISO labels sort
            chronologically; ties keep first-seen order)
        """
        buckets = self.grouper.group_by_period(records, period_type)
        return sorted(buckets.values(), key=lambda bucket: bucket.period_label or "")


class TimeAggregator:
    """
    Facade class for registration grouping operations.

    Provides unified interface to RegistrationGrouper and TrendAggregator.
    """

    def __init__(self):
        self.grouper = RegistrationGrouper()
        self.trends = TrendAggregator(self.grouper)
        logger.debug("TimeAggregator initialized")

    def group_by_period(
        self,
        records: Iterable[VehicleRecord],
        period_type: PeriodType
    ) -> Dict[BucketKey, AggregateBucket]:
        """Group records by period label, vehicle type and manufacturer."""
        return self.grouper.group_by_period(records, period_type)

    def group_by_share(
        self,
        records: Iterable[VehicleRecord]
    ) -> Dict[ShareKey, AggregateBucket]:
        """Group records by manufacturer and vehicle type."""
        return self.grouper.group_by_share(records)

    def build_trend(
        self,
        records: Iterable[VehicleRecord],
        period_type: PeriodType = PeriodType.MONTHLY
    ) -> List[AggregateBucket]:
        """Aggregate records into a chronologically ordered trend series."""
        return self.trends.build_trend(records, period_type)
