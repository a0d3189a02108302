"""
VehicleAnalytics - Record Filter Tests

Unit tests for filter predicates over registration records.
"""

import unittest
from datetime import date

from vehicle_analytics.models.facts import VehicleRecord
from vehicle_analytics.views.record_filter import FilterCriteria, parse_filter_date


class TestFilterCriteria(unittest.TestCase):
    """Test cases for FilterCriteria."""

    def setUp(self):
        """Set up test fixtures."""
        self.records = [
            self._create_record(1, "2023-03-15", "Two Wheeler", "Honda", "Petrol"),
            self._create_record(2, "2023-11-02", "Four Wheeler", "Tata Motors", "Electric"),
            self._create_record(3, "2024-01-01", "Four Wheeler", "Honda", "Diesel"),
            self._create_record(4, "2024-06-30", "Two Wheeler", "Tata Motors", "Petrol"),
        ]

    def _create_record(
        self,
        record_id: int,
        registration_date: str,
        vehicle_type: str,
        manufacturer: str,
        fuel_type: str
    ) -> VehicleRecord:
        """Helper to create test record."""
        return VehicleRecord(
            id=record_id,
            registration_date=date.fromisoformat(registration_date),
            vehicle_type=vehicle_type,
            manufacturer=manufacturer,
            fuel_type=fuel_type,
            count=10
        )

    def _ids(self, records):
        return [record.id for record in records]

    def test_no_criteria_keeps_everything_in_order(self):
        """Test empty criteria returns all records in original order."""
        result = FilterCriteria().apply(self.records)
        self.assertEqual(self._ids(result), [1, 2, 3, 4])

    def test_result_is_new_list(self):
        """Test apply does not return the input sequence."""
        result = FilterCriteria().apply(self.records)
        self.assertIsNot(result, self.records)

    def test_equality_predicates_combine(self):
        """Test categorical predicates are ANDed."""
        criteria = FilterCriteria(vehicle_type="Four Wheeler", manufacturer="Honda")
        self.assertEqual(self._ids(criteria.apply(self.records)), [3])

    def test_equality_is_case_sensitive(self):
        """Test equality compares exactly."""
        criteria = FilterCriteria(manufacturer="honda")
        self.assertEqual(criteria.apply(self.records), [])

    def test_blank_values_are_ignored(self):
        """Test empty and whitespace-only predicates do not filter."""
        criteria = FilterCriteria(vehicle_type="", manufacturer="   ", year=" ")
        self.assertEqual(len(criteria.apply(self.records)), 4)

    def test_date_range_is_inclusive(self):
        """Test start and end dates include boundary days."""
        criteria = FilterCriteria(start_date="2023-11-02", end_date="2024-01-01")
        self.assertEqual(self._ids(criteria.apply(self.records)), [2, 3])

    def test_date_with_time_suffix(self):
        """Test a time-of-day suffix is ignored."""
        criteria = FilterCriteria(start_date="2024-01-01T23:59:59Z")
        self.assertEqual(self._ids(criteria.apply(self.records)), [3, 4])

    def test_unparseable_date_matches_nothing(self):
        """Test invalid dates fail open to an empty result."""
        self.assertEqual(FilterCriteria(start_date="not-a-date").apply(self.records), [])
        self.assertEqual(FilterCriteria(end_date="2024-13-45").apply(self.records), [])

    def test_year_predicate(self):
        """Test year compares the registration year."""
        criteria = FilterCriteria(year="2024")
        self.assertEqual(self._ids(criteria.apply(self.records)), [3, 4])

    def test_year_non_numeric_matches_nothing(self):
        """Test a non-numeric year matches no records."""
        self.assertEqual(FilterCriteria(year="twenty").apply(self.records), [])

    def test_from_params_respects_allowed(self):
        """Test predicates outside the allowed set are dropped."""
        params = {"manufacturer": "Honda", "fuel_type": "Diesel", "unknown": "x"}
        criteria = FilterCriteria.from_params(params, allowed=("manufacturer",))

        self.assertEqual(criteria.manufacturer, "Honda")
        self.assertIsNone(criteria.fuel_type)
        self.assertEqual(self._ids(criteria.apply(self.records)), [1, 3])

    def test_active_lists_set_predicates(self):
        """Test blank predicates are left out of active()."""
        criteria = FilterCriteria(vehicle_type="Two Wheeler", manufacturer="Honda", fuel_type="")

        self.assertEqual(criteria.active(), {"vehicle_type": "Two Wheeler", "manufacturer": "Honda"})

    def test_date_with_trailing_garbage_matches_nothing(self):
        """Test only a T or space time suffix is stripped."""
        self.assertEqual(FilterCriteria(start_date="2024-01-05garbage").apply(self.records), [])
        self.assertEqual(len(FilterCriteria(end_date="2024-06-30 08:00").apply(self.records)), 4)

    def test_apply_is_idempotent(self):
        """Test filtering an already filtered list changes nothing."""
        for criteria in (
            FilterCriteria(),
            FilterCriteria(manufacturer="Honda"),
            FilterCriteria(vehicle_type="Two Wheeler", start_date="2023-06-01"),
            FilterCriteria(year="2024", end_date="2024-03-01"),
            FilterCriteria(start_date="bad"),
        ):
            once = criteria.apply(self.records)
            self.assertEqual(criteria.apply(once), once)

    def test_empty_input(self):
        """Test empty sequence returns empty list."""
        self.assertEqual(FilterCriteria(manufacturer="Honda").apply([]), [])


class TestParseFilterDate(unittest.TestCase):
    """Test cases for parse_filter_date."""

    def test_valid_date(self):
        self.assertEqual(parse_filter_date("2024-02-29"), date(2024, 2, 29))

    def test_invalid_date(self):
        self.assertIsNone(parse_filter_date("2023-02-29"))
        self.assertIsNone(parse_filter_date("yesterday"))
        self.assertIsNone(parse_filter_date("2024-01-05garbage"))

    def test_time_suffix(self):
        self.assertEqual(parse_filter_date("2024-01-05T00:00:00Z"), date(2024, 1, 5))
        self.assertEqual(parse_filter_date("2024-01-05 12:30"), date(2024, 1, 5))


if __name__ == "__main__":
    unittest.main()
