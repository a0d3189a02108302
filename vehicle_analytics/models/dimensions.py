"""
VehicleAnalytics - Dimension Models

Grouping dimensions for registration aggregates: time periods and the
composite keys that identify aggregation buckets.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class PeriodType(Enum):
    """Time-bucketing policy for grouping registrations."""
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @classmethod
    def from_value(
        cls,
        value: Optional[str],
        default: Optional["PeriodType"] = None
    ) -> "PeriodType":
        """
        Resolve a period type from a query string value.

        Args:
            value: Raw value such as "monthly" (case-insensitive)
            default: Period returned for missing or unknown values
                     (MONTHLY when not given)

        Returns:
            Matching PeriodType, or the default
        """
        fallback = default or cls.MONTHLY
        if not value or not value.strip():
            return fallback

        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return fallback


@dataclass(frozen=True)
class BucketKey:
    """
    Composite key for time-bucketed aggregation.

    Primary Key: period_label + vehicle_type + manufacturer
    """
    period_label: Optional[str]
    vehicle_type: str
    manufacturer: str


@dataclass(frozen=True)
class ShareKey:
    """
    Composite key for market-share aggregation (no time bucket).

    Primary Key: manufacturer + vehicle_type
    """
    manufacturer: str
    vehicle_type: str


@dataclass
class DimPeriod:
    """
    Period dimension - calendar attributes of a registration date.

    Primary Key: date_key (YYYY-MM-DD format)
    """
    date_key: str  # YYYY-MM-DD format
    year: int
    quarter: int  # 1-4
    month: int
    day: int
    iso_year: int
    iso_week: int

    @classmethod
    def from_date(cls, value: date) -> "DimPeriod":
        """
        Create DimPeriod from a calendar date.

        Args:
            value: Registration date

        Returns:
            DimPeriod instance
        """
        iso_year, iso_week, _ = value.isocalendar()

        return cls(
            date_key=value.isoformat(),
            year=value.year,
            quarter=(value.month - 1) // 3 + 1,
            month=value.month,
            day=value.day,
            iso_year=iso_year,
            iso_week=iso_week
        )

    @property
    def year_key(self) -> str:
        """Year label (YYYY)."""
        return f"{self.year:04d}"

    @property
    def quarter_key(self) -> str:
        """Quarter label (YYYY-Qn)."""
        return f"{self.year:04d}-Q{self.quarter}"

    @property
    def month_key(self) -> str:
        """Month label (YYYY-MM)."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def week_key(self) -> str:
        """ISO week label (YYYY-Www) using the ISO week-numbering year."""
        return f"{self.iso_year:04d}-W{self.iso_week:02d}"

    def label_for(self, period_type: PeriodType) -> Optional[str]:
        """
        Get the bucket label for a period type.

        Args:
            period_type: Time-bucketing policy

        Returns:
            Period label, or None when period_type is NONE
        """
        if period_type == PeriodType.YEARLY:
            return self.year_key
        if period_type == PeriodType.QUARTERLY:
            return self.quarter_key
        if period_type == PeriodType.MONTHLY:
            return self.month_key
        if period_type == PeriodType.WEEKLY:
            return self.week_key
        if period_type == PeriodType.DAILY:
            return self.date_key
        return None
