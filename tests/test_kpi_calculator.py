"""
VehicleAnalytics - KPI Calculator Tests

Unit tests for dashboard KPI calculation.
"""

import unittest
from datetime import date

from vehicle_analytics.calculators.kpi_calculator import KPICalculator
from vehicle_analytics.models.dimensions import BucketKey
from vehicle_analytics.models.facts import AggregateBucket, VehicleStatEntry


class TestKPICalculator(unittest.TestCase):
    """Test cases for KPICalculator."""

    def setUp(self):
        """Set up test fixtures."""
        self.calculator = KPICalculator()

    def _create_stat(self, manufacturer: str, registrations: int, vehicles: int) -> VehicleStatEntry:
        """Helper to create test stat entry."""
        return VehicleStatEntry(
            vehicle_type="Four Wheeler",
            manufacturer=manufacturer,
            fuel_type="Petrol",
            first_registration=date(2024, 1, 1),
            last_registration=date(2024, 2, 1),
            total_registrations=registrations,
            total_vehicles=vehicles
        )

    def _create_bucket(self, period: str, manufacturer: str, vehicles: int, registrations: int = 1) -> AggregateBucket:
        """Helper to create test trend bucket."""
        return AggregateBucket(
            key=BucketKey(period, "Four Wheeler", manufacturer),
            vehicle_type="Four Wheeler",
            manufacturer=manufacturer,
            period_label=period,
            total_vehicles=vehicles,
            total_registrations=registrations
        )

    def test_totals(self):
        stats = [self._create_stat("Kia", 3, 20), self._create_stat("Kia", 1, 5), self._create_stat("Audi", 2, 10)]

        kpis = self.calculator.calculate(stats, [])

        self.assertEqual(kpis.total_vehicles, 35)
        self.assertEqual(kpis.total_registrations, 6)
        self.assertEqual(kpis.unique_manufacturers, 2)
        self.assertEqual(kpis.avg_vehicles_per_registration, 5.83)
        self.assertIsNone(kpis.latest_period)
        self.assertIsNone(kpis.period_change_pct)

    def test_period_change(self):
        """Test change between the last two periods across manufacturers."""
        trend = [
            self._create_bucket("2024-01", "Kia", 10),
            self._create_bucket("2024-01", "Audi", 10),
            self._create_bucket("2024-02", "Kia", 30),
        ]

        kpis = self.calculator.calculate([], trend)

        self.assertEqual(kpis.latest_period, "2024-02")
        self.assertEqual(kpis.previous_period, "2024-01")
        self.assertEqual(kpis.period_change_pct, 50.0)

    def test_single_period_has_no_change(self):
        kpis = self.calculator.calculate([], [self._create_bucket("2024-01", "Kia", 10)])

        self.assertEqual(kpis.latest_period, "2024-01")
        self.assertIsNone(kpis.previous_period)
        self.assertIsNone(kpis.period_change_pct)

    def test_empty_inputs(self):
        kpis = self.calculator.calculate([], [])

        self.assertEqual(kpis.total_vehicles, 0)
        self.assertEqual(kpis.avg_vehicles_per_registration, 0.0)

    def test_period_series(self):
        trend = [
            self._create_bucket("2024-01", "Kia", 10, 2),
            self._create_bucket("2024-01", "Audi", 5, 1),
            self._create_bucket("2024-02", "Kia", 7, 3),
        ]

        series = self.calculator.period_series(trend)

        self.assertEqual(series, [
            {"period": "2024-01", "total_vehicles": 15, "total_registrations": 3},
            {"period": "2024-02", "total_vehicles": 7, "total_registrations": 3}
        ])


if __name__ == "__main__":
    unittest.main()
