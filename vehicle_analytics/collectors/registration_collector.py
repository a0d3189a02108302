"""
VehicleAnalytics - Registration Collector

Produces vehicle registration records for the record store. The only data
source implemented is a realistic mock generator used for demonstrations.
"""

import logging
import random
import string
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from vehicle_analytics.models.facts import VehicleRecord


logger = logging.getLogger(__name__)


MANUFACTURERS = [
    "Maruti Suzuki", "Hyundai", "Honda", "Tata Motors", "Mahindra",
    "Toyota", "Kia", "MG Motor", "Volkswagen", "Ford", "Nissan",
    "Skoda", "Renault", "BMW", "Mercedes-Benz", "Audi", "Volvo"
]

VEHICLE_TYPES = ["Two Wheeler", "Three Wheeler", "Four Wheeler", "Commercial Vehicle"]

FUEL_TYPES = ["Petrol", "Diesel", "Electric", "Hybrid", "CNG"]

STATES = ["Maharashtra", "Delhi", "Karnataka", "Tamil Nadu"]


class MockRegistrationCollector:
    """
    Collector that generates realistic mock registration records.

    Fields generated:
    - registration_date: uniform over [start_date, end_date]
    - vehicle_type, manufacturer, fuel_type, state: uniform picks
    - count: vehicles represented by the record (1-100)
    - registration_number: state-prefixed synthetic plate
    """

    def __init__(
        self,
        record_count: int = 500,
        start_date: date = date(2023, 1, 1),
        end_date: date = date(2024, 12, 31),
        seed: Optional[int] = None,
        source_label: str = "Mock Data (Demo)"
    ):
        """
        Initialize the mock collector.

        Args:
            record_count: Number of records per collection
            start_date: Earliest registration date
            end_date: Latest registration date
            seed: Random seed for reproducible data (None for random)
            source_label: Value stored in each record's source field
        """
        if start_date > end_date:
            raise ValueError("start_date must not be after end_date")

        self.record_count = max(record_count, 0)
        self.start_date = start_date
        self.end_date = end_date
        self.source_label = source_label
        self._rng = random.Random(seed)
        logger.debug("MockRegistrationCollector initialized")

    def collect(self) -> List[VehicleRecord]:
        """
        Generate one batch of registration records.

        Returns:
            List of VehicleRecord objects with ids 1..record_count
        """
        logger.info(f"[...] Generating {self.record_count} mock registration records")

        fetched_at = datetime.now(timezone.utc).isoformat()
        span_days = (self.end_date - self.start_date).days

        records = [
            self._generate_record(index + 1, span_days, fetched_at)
            for index in range(self.record_count)
        ]

        logger.info(f"[OK] Generated {len(records)} mock registration records")
        return records

    def _generate_record(self, record_id: int, span_days: int, fetched_at: str) -> VehicleRecord:
        """Generate a single mock record."""
        rng = self._rng
        manufacturer = rng.choice(MANUFACTURERS)
        state = rng.choice(STATES)

        registration_date = self.start_date + timedelta(days=rng.randint(0, span_days))

        # Raw rows go through the same boundary schema as any other source
        return VehicleRecord.from_dict({
            "id": record_id,
            "registration_date": registration_date.isoformat(),
            "vehicle_type": rng.choice(VEHICLE_TYPES),
            "manufacturer": manufacturer,
            "fuel_type": rng.choice(FUEL_TYPES),
            "count": rng.randint(1, 100),
            "registration_number": self._generate_registration_number(state),
            "model": f"{manufacturer} Model {rng.randint(1, 10)}",
            "state": state,
            "source": self.source_label,
            "fetched_at": fetched_at
        })

    def _generate_registration_number(self, state: str) -> str:
        """Plate like MA42KX5123: state prefix, district, series, number."""
        rng = self._rng
        series = "".join(rng.choice(string.ascii_uppercase) for _ in range(2))
        return f"{state[:2].upper()}{rng.randint(1, 99)}{series}{rng.randint(1000, 9999)}"
