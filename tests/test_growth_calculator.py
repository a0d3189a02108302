"""
VehicleAnalytics - Growth Calculator Tests

Unit tests for year-over-year and quarter-over-quarter growth.
"""

import unittest
from datetime import date

from vehicle_analytics.aggregators.time_aggregator import TimeAggregator
from vehicle_analytics.calculators.growth_calculator import (
    GrowthCalculator,
    growth_percentage,
    round2
)
from vehicle_analytics.collectors.registration_collector import MockRegistrationCollector
from vehicle_analytics.models.dimensions import PeriodType
from vehicle_analytics.models.facts import VehicleRecord


class TestGrowthHelpers(unittest.TestCase):
    """Test cases for rounding and percentage helpers."""

    def test_round2_half_up(self):
        self.assertEqual(round2(12.345678), 12.35)
        self.assertEqual(round2(-0.125), -0.12)
        self.assertEqual(round2(-2.5), -2.5)
        self.assertEqual(round2(0.125), 0.13)

    def test_growth_percentage(self):
        self.assertEqual(growth_percentage(15, 10), 50.0)
        self.assertEqual(growth_percentage(5, 10), -50.0)
        self.assertEqual(growth_percentage(10, 3), 233.33)

    def test_zero_previous_reports_zero(self):
        """Test the zero-division policy."""
        self.assertEqual(growth_percentage(20, 0), 0.0)


class TestGrowthCalculator(unittest.TestCase):
    """Test cases for GrowthCalculator."""

    def setUp(self):
        """Set up test fixtures."""
        self.aggregator = TimeAggregator()
        self.calculator = GrowthCalculator()

    def _create_record(
        self,
        registration_date: str,
        count: int,
        vehicle_type: str = "Car",
        manufacturer: str = "A"
    ) -> VehicleRecord:
        """Helper to create test record."""
        return VehicleRecord(
            id=1,
            registration_date=date.fromisoformat(registration_date),
            vehicle_type=vehicle_type,
            manufacturer=manufacturer,
            fuel_type="Petrol",
            count=count
        )

    def _yoy(self, records):
        buckets = self.aggregator.group_by_period(records, PeriodType.YEARLY)
        return self.calculator.year_over_year(buckets.values())

    def _qoq(self, records):
        buckets = self.aggregator.group_by_period(records, PeriodType.QUARTERLY)
        return self.calculator.quarter_over_quarter(buckets.values())

    def test_yoy_fifty_percent(self):
        """Test 10 -> 15 vehicles is 50% growth."""
        records = [self._create_record("2023-05-01", 10), self._create_record("2024-05-01", 15)]

        entries = self._yoy(records)

        self.assertEqual(len(entries), 1)
        entry = entries[0]
        self.assertEqual(entry.current_vehicles, 15)
        self.assertEqual(entry.previous_vehicles, 10)
        self.assertEqual(entry.growth_percentage, 50.0)
        self.assertEqual(entry.absolute_change, 5)
        self.assertEqual(entry.growth_type, "positive")
        self.assertEqual(entry.to_dict()["current_year"], "2024")
        self.assertEqual(entry.to_dict()["previous_year"], "2023")

    def test_yoy_compares_adjacent_present_years(self):
        """Test years with no data are skipped rather than compared as zero."""
        records = [
            self._create_record("2021-01-01", 10),
            self._create_record("2023-01-01", 5),
            self._create_record("2024-01-01", 10),
        ]

        entries = self._yoy(records)
        pairs = sorted((entry.previous_period, entry.current_period) for entry in entries)

        self.assertEqual(pairs, [("2021", "2023"), ("2023", "2024")])

    def test_single_period_produces_nothing(self):
        self.assertEqual(self._yoy([self._create_record("2024-01-01", 10)]), [])

    def test_sorted_by_absolute_growth(self):
        """Test entries are ordered by |growth| descending."""
        records = [
            self._create_record("2023-01-01", 10, manufacturer="A"),
            self._create_record("2024-01-01", 12, manufacturer="A"),   # +20%
            self._create_record("2023-01-01", 10, manufacturer="B"),
            self._create_record("2024-01-01", 2, manufacturer="B"),    # -80%
            self._create_record("2023-01-01", 10, manufacturer="C"),
            self._create_record("2024-01-01", 15, manufacturer="C"),   # +50%
        ]

        entries = self._yoy(records)

        self.assertEqual([entry.manufacturer for entry in entries], ["B", "C", "A"])
        self.assertEqual(entries[0].growth_type, "negative")

    def test_equal_growth_keeps_partition_order(self):
        """Test ties keep the order partitions were first seen."""
        records = [
            self._create_record("2023-01-01", 10, manufacturer="Z"),
            self._create_record("2023-01-01", 10, manufacturer="Y"),
            self._create_record("2024-01-01", 10, manufacturer="Z"),
            self._create_record("2024-01-01", 10, manufacturer="Y"),
        ]

        entries = self._yoy(records)

        self.assertEqual([entry.manufacturer for entry in entries], ["Z", "Y"])
        self.assertEqual(entries[0].growth_percentage, 0.0)
        self.assertEqual(entries[0].growth_type, "positive")

    def test_qoq_within_year(self):
        """Test quarters compare within one year."""
        records = [
            self._create_record("2024-02-01", 20),
            self._create_record("2024-05-01", 30),
            self._create_record("2024-08-01", 15),
        ]

        entries = self._qoq(records)
        by_quarter = {entry.current_period: entry for entry in entries}

        self.assertEqual(set(by_quarter), {"2", "3"})
        self.assertEqual(by_quarter["2"].growth_percentage, 50.0)
        self.assertEqual(by_quarter["3"].growth_percentage, -50.0)
        self.assertEqual(by_quarter["3"].to_dict()["year"], "2024")
        self.assertEqual(by_quarter["3"].to_dict()["previous_quarter"], "2")

    def test_qoq_does_not_cross_years(self):
        """Test Q4 of one year is not compared with Q1 of the next."""
        records = [self._create_record("2023-11-01", 10), self._create_record("2024-02-01", 20)]

        self.assertEqual(self._qoq(records), [])

    def test_partitions_by_type_and_manufacturer(self):
        """Test different vehicle types are never compared."""
        records = [
            self._create_record("2023-01-01", 10, vehicle_type="Car"),
            self._create_record("2024-01-01", 20, vehicle_type="Bike"),
        ]

        self.assertEqual(self._yoy(records), [])

    def test_empty_input(self):
        self.assertEqual(self.calculator.year_over_year([]), [])
        self.assertEqual(self.calculator.quarter_over_quarter([]), [])

    def test_growth_sign_follows_absolute_change(self):
        """Test growth direction agrees with the vehicle delta on generated data."""
        for seed in (2, 19, 64):
            records = MockRegistrationCollector(record_count=300, seed=seed).collect()

            for entry in self._yoy(records) + self._qoq(records):
                self.assertGreaterEqual(entry.previous_vehicles, 1)
                self.assertEqual(entry.absolute_change, entry.current_vehicles - entry.previous_vehicles)
                self.assertEqual(entry.growth_percentage > 0, entry.absolute_change > 0)
                self.assertEqual(entry.growth_percentage < 0, entry.absolute_change < 0)


if __name__ == "__main__":
    unittest.main()
