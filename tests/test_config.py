"""
VehicleAnalytics - Configuration Tests
"""

import os
import unittest
from datetime import date
from pathlib import Path
from unittest.mock import patch

from vehicle_analytics.utils.config import Config


class TestConfig(unittest.TestCase):
    """Test cases for environment-driven configuration."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        self.assertEqual(config.server.port, 8050)
        self.assertFalse(config.server.debug)
        self.assertEqual(config.mock_data.record_count, 500)
        self.assertIsNone(config.mock_data.seed)
        self.assertEqual(config.export.default_limit, 100)
        self.assertEqual(config.log_dir, Path("data/logs"))

    def test_environment_overrides(self):
        env = {
            "DASH_PORT": "9000",
            "DASH_DEBUG": "true",
            "MOCK_RECORD_COUNT": "50",
            "MOCK_START_DATE": "2022-01-01",
            "MOCK_DATA_SEED": "99",
            "DATA_DIR": "/tmp/vehicle-data"
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config()

        self.assertEqual(config.server.port, 9000)
        self.assertTrue(config.server.debug)
        self.assertEqual(config.mock_data.record_count, 50)
        self.assertEqual(config.mock_data.start_date, date(2022, 1, 1))
        self.assertEqual(config.mock_data.seed, 99)
        self.assertEqual(config.export_dir, Path("/tmp/vehicle-data/exports"))

    def test_malformed_values_name_the_variable(self):
        with patch.dict(os.environ, {"DASH_PORT": "eighty"}, clear=True):
            with self.assertRaisesRegex(ValueError, "DASH_PORT"):
                Config()

        with patch.dict(os.environ, {"MOCK_END_DATE": "soon"}, clear=True):
            with self.assertRaisesRegex(ValueError, "MOCK_END_DATE"):
                Config()

    def test_reversed_mock_range(self):
        env = {"MOCK_START_DATE": "2024-06-01", "MOCK_END_DATE": "2024-01-01"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValueError):
                Config()


if __name__ == "__main__":
    unittest.main()
