"""
VehicleAnalytics - Fact Models

Data models for registration facts and the aggregates derived from them.
Grain: one VehicleRecord per observed registration event.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from vehicle_analytics.models.dimensions import BucketKey, DimPeriod, ShareKey


@dataclass(frozen=True)
class VehicleRecord:
    """
    Fact record for a vehicle registration event.

    Primary Key: id
    Grain: Per registration event (count vehicles)
    """
    id: int
    registration_date: date
    vehicle_type: str
    manufacturer: str
    fuel_type: str
    count: int = 1
    registration_number: Optional[str] = None
    model: Optional[str] = None
    state: Optional[str] = None
    source: Optional[str] = None
    fetched_at: Optional[str] = None  # ISO 8601 timestamp

    def __post_init__(self):
        """Every record represents at least one vehicle."""
        object.__setattr__(self, "count", normalize_count(self.count))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON/CSV export."""
        return {
            "id": self.id,
            "registration_number": self.registration_number,
            "vehicle_type": self.vehicle_type,
            "manufacturer": self.manufacturer,
            "model": self.model,
            "fuel_type": self.fuel_type,
            "registration_date": self.registration_date.isoformat(),
            "state": self.state,
            "source": self.source,
            "fetched_at": self.fetched_at,
            "count": self.count
        }

    @property
    def period(self) -> DimPeriod:
        """Calendar attributes of the registration date."""
        return DimPeriod.from_date(self.registration_date)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "VehicleRecord":
        """
        Create VehicleRecord from a raw data-source row.

        Args:
            raw: Row dictionary with snake_case keys

        Returns:
            VehicleRecord instance

        Raises:
            ValueError: If id or registration_date cannot be parsed
        """
        try:
            record_id = int(raw["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid record id: {raw.get('id')!r}") from e

        return cls(
            id=record_id,
            registration_date=parse_registration_date(raw.get("registration_date")),
            vehicle_type=str(raw.get("vehicle_type") or ""),
            manufacturer=str(raw.get("manufacturer") or ""),
            fuel_type=str(raw.get("fuel_type") or ""),
            count=raw.get("count"),
            registration_number=raw.get("registration_number"),
            model=raw.get("model"),
            state=raw.get("state"),
            source=raw.get("source"),
            fetched_at=raw.get("fetched_at")
        )


def normalize_count(value: Any) -> int:
    """
    Normalize a vehicle count, defaulting to 1 when absent or invalid.

    Args:
        value: Raw count value

    Returns:
        Count >= 1
    """
    if isinstance(value, bool):
        return 1
    try:
        count = int(value)
    except (TypeError, ValueError):
        return 1
    return count if count >= 1 else 1


def parse_registration_date(value: Union[str, date, datetime, None]) -> date:
    """
    Parse an ISO 8601 registration date (day precision).

    A time-of-day suffix (e.g. "2024-03-05T10:00:00Z") is ignored.

    Args:
        value: Date string, date or datetime

    Returns:
        Calendar date

    Raises:
        ValueError: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid registration date: {value!r}")
    return date.fromisoformat(strip_time_suffix(value))


def strip_time_suffix(value: str) -> str:
    """
    Drop a "T..." or " ..." time-of-day suffix from an ISO date string.

    Any other trailing text is kept, so "2024-01-05garbage" stays invalid.
    """
    value = value.strip()
    if len(value) > 10 and value[10] in ("T", " "):
        return value[:10]
    return value


@dataclass
class AggregateBucket:
    """
    Aggregation cell keyed by a dimension tuple.

    Created lazily on the first matching record, so a bucket
    always has at least one registration.
    """
    key: Union[BucketKey, ShareKey]
    vehicle_type: str
    manufacturer: str
    period_label: Optional[str] = None  # None for market-share buckets
    total_vehicles: int = 0
    total_registrations: int = 0

    def add(self, record: VehicleRecord) -> None:
        """Accumulate one record into the bucket."""
        self.total_vehicles += record.count
        self.total_registrations += 1

    def to_dict(self) -> dict:
        """Convert to dictionary for API/dashboard consumption."""
        result: Dict[str, Any] = {}
        if self.period_label is not None:
            result["period"] = self.period_label
        result.update({
            "vehicle_type": self.vehicle_type,
            "manufacturer": self.manufacturer,
            "total_vehicles": self.total_vehicles,
            "total_registrations": self.total_registrations
        })
        return result


@dataclass
class GrowthEntry:
    """
    One period-over-period comparison for a vehicle type and manufacturer.

    Derived, never persisted. period_kind is "year" for YoY entries
    and "quarter" for QoQ entries (where year is also set).
    """
    vehicle_type: str
    manufacturer: str
    current_period: str
    previous_period: str
    current_vehicles: int
    previous_vehicles: int
    growth_percentage: float
    absolute_change: int
    period_kind: str = "year"
    year: Optional[str] = None

    @property
    def growth_type(self) -> str:
        """Direction of growth ("positive" includes no change)."""
        return "positive" if self.growth_percentage >= 0 else "negative"

    def to_dict(self) -> dict:
        """Convert to dictionary for API/dashboard consumption."""
        result: Dict[str, Any] = {
            "vehicle_type": self.vehicle_type,
            "manufacturer": self.manufacturer
        }
        if self.period_kind == "quarter":
            result.update({
                "year": self.year,
                "current_quarter": self.current_period,
                "previous_quarter": self.previous_period
            })
        else:
            result.update({
                "current_year": self.current_period,
                "previous_year": self.previous_period
            })
        result.update({
            "current_vehicles": self.current_vehicles,
            "previous_vehicles": self.previous_vehicles,
            "growth_percentage": self.growth_percentage,
            "growth_type": self.growth_type,
            "absolute_change": self.absolute_change
        })
        return result


@dataclass
class MarketShareEntry:
    """
    Share of a manufacturer/vehicle type within the filtered total.
    """
    manufacturer: str
    vehicle_type: str
    total_vehicles: int
    total_registrations: int
    market_share_percentage: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for API/dashboard consumption."""
        return {
            "manufacturer": self.manufacturer,
            "vehicle_type": self.vehicle_type,
            "total_vehicles": self.total_vehicles,
            "total_registrations": self.total_registrations,
            "market_share_percentage": self.market_share_percentage
        }


@dataclass
class VehicleStatEntry:
    """
    Registration totals per vehicle type, manufacturer and fuel type.

    Primary Key: vehicle_type + manufacturer + fuel_type
    """
    vehicle_type: str
    manufacturer: str
    fuel_type: str
    first_registration: date
    last_registration: date
    total_registrations: int = 0
    total_vehicles: int = 0

    def add(self, record: VehicleRecord) -> None:
        """Accumulate one record and widen the registration date span."""
        self.total_registrations += 1
        self.total_vehicles += record.count
        if record.registration_date < self.first_registration:
            self.first_registration = record.registration_date
        if record.registration_date > self.last_registration:
            self.last_registration = record.registration_date

    def to_dict(self) -> dict:
        """Convert to dictionary for API/dashboard consumption."""
        return {
            "vehicle_type": self.vehicle_type,
            "manufacturer": self.manufacturer,
            "fuel_type": self.fuel_type,
            "total_registrations": self.total_registrations,
            "total_vehicles": self.total_vehicles,
            "first_registration": self.first_registration.isoformat(),
            "last_registration": self.last_registration.isoformat()
        }
