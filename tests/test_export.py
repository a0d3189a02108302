"""
VehicleAnalytics - Export Helper Tests
"""

import unittest
from datetime import date

from vehicle_analytics.utils.export import csv_download, export_filename, rows_to_csv


class TestRowsToCsv(unittest.TestCase):
    """Test cases for CSV rendering."""

    def test_header_and_crlf(self):
        rows = [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]
        self.assertEqual(rows_to_csv(rows), "a,b\r\n1,x\r\n2,y")

    def test_quoting(self):
        """Test commas, quotes and newlines are quoted."""
        rows = [{"name": 'Say "hi"', "place": "Pune, MH", "note": "two\nlines"}]

        self.assertEqual(
            rows_to_csv(rows),
            'name,place,note\r\n"Say ""hi""","Pune, MH","two\nlines"'
        )

    def test_none_is_empty_cell(self):
        self.assertEqual(rows_to_csv([{"a": None, "b": 0}]), "a,b\r\n,0")

    def test_column_selection(self):
        rows = [{"a": 1, "b": 2, "c": 3}]
        self.assertEqual(rows_to_csv(rows, ["c", "a"]), "c,a\r\n3,1")

    def test_empty(self):
        self.assertEqual(rows_to_csv([]), "")


class TestDownloadHelpers(unittest.TestCase):
    """Test cases for download payloads and filenames."""

    def test_csv_download(self):
        payload = csv_download([{"a": 1}], "out.csv")
        self.assertEqual(payload, {"content": "a\r\n1", "filename": "out.csv", "type": "text/csv"})

    def test_export_filename(self):
        self.assertEqual(export_filename("json", date(2024, 5, 1)), "vehicle_data_2024-05-01.json")


if __name__ == "__main__":
    unittest.main()
