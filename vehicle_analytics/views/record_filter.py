"""
VehicleAnalytics - Record Filter

Narrows a record snapshot by optional query predicates.
"""

import logging
from dataclasses import dataclass, fields
from datetime import date
from typing import Callable, Iterable, List, Mapping, Optional, Sequence

from vehicle_analytics.models.facts import VehicleRecord, strip_time_suffix


logger = logging.getLogger(__name__)


FILTER_FIELDS = ("vehicle_type", "manufacturer", "fuel_type", "start_date", "end_date", "year")


def _is_set(value: Optional[str]) -> bool:
    """A predicate applies only when it has non-whitespace content."""
    return value is not None and value.strip() != ""


def parse_filter_date(value: str) -> Optional[date]:
    """
    Parse a filter date, ignoring any time-of-day suffix.

    Args:
        value: Date string such as "2024-01-31" or "2024-01-31T12:00:00Z"

    Returns:
        Calendar date, or None if the string is not a valid date
    """
    try:
        return date.fromisoformat(strip_time_suffix(value))
    except ValueError:
        return None


@dataclass(frozen=True)
class FilterCriteria:
    """
    Optional predicates for narrowing registration records.

    All values are kept as received from the query string. A record must
    satisfy every predicate that is set; unset or blank predicates are ignored.
    """
    vehicle_type: Optional[str] = None
    manufacturer: Optional[str] = None
    fuel_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    year: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        params: Optional[Mapping[str, object]],
        allowed: Sequence[str] = FILTER_FIELDS
    ) -> "FilterCriteria":
        """
        Build criteria from a query parameter mapping.

        Args:
            params: Query parameters (unknown keys are ignored)
            allowed: Predicate names honoured by the calling endpoint

        Returns:
            FilterCriteria instance
        """
        params = params or {}
        values = {}
        for name in allowed:
            raw = params.get(name)
            if raw is not None:
                values[name] = str(raw)
        return cls(**values)

    def active(self) -> dict:
        """Predicates that will be applied."""
        return {f.name: getattr(self, f.name) for f in fields(self) if _is_set(getattr(self, f.name))}

    def _predicates(self) -> List[Callable[[VehicleRecord], bool]]:
        """Build the list of record predicates for the set criteria."""
        predicates: List[Callable[[VehicleRecord], bool]] = []

        if _is_set(self.vehicle_type):
            predicates.append(lambda record: record.vehicle_type == self.vehicle_type)
        if _is_set(self.manufacturer):
            predicates.append(lambda record: record.manufacturer == self.manufacturer)
        if _is_set(self.fuel_type):
            predicates.append(lambda record: record.fuel_type == self.fuel_type)

        if _is_set(self.start_date):
            start = parse_filter_date(self.start_date)
            if start is None:
                logger.debug(f"Unparseable start_date {self.start_date!r}; nothing matches")
                return [lambda record: False]
            predicates.append(lambda record: record.registration_date >= start)

        if _is_set(self.end_date):
            end = parse_filter_date(self.end_date)
            if end is None:
                logger.debug(f"Unparseable end_date {self.end_date!r}; nothing matches")
                return [lambda record: False]
            predicates.append(lambda record: record.registration_date <= end)

        if _is_set(self.year):
            year = self.year.strip()
            predicates.append(lambda record: f"{record.registration_date.year:04d}" == year)

        return predicates

    def apply(self, records: Iterable[VehicleRecord]) -> List[VehicleRecord]:
        """
        Filter records by every set predicate.

        Args:
            records: Record snapshot (not modified)

        Returns:
            New list of matching records in their original order
        """
        predicates = self._predicates()
        return [record for record in records if all(check(record) for check in predicates)]
