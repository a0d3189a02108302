"""
VehicleAnalytics - Dashboard Application Tests

Smoke tests for dashboard construction and chart builders.
"""

import unittest

from vehicle_analytics.main import create_app


class TestVehicleAnalyticsDashboard(unittest.TestCase):
    """Test cases for VehicleAnalyticsDashboard."""

    @classmethod
    def setUpClass(cls):
        """Build one dashboard for all tests."""
        cls.dashboard = create_app(seed_data=True)
        cls.provider = cls.dashboard.data_provider

    def test_api_mounted_on_dash_server(self):
        client = self.dashboard.server.test_client()

        response = client.get("/api/data/status")

        self.assertEqual(response.status_code, 200)
        self.assertGreater(response.get_json()["data_status"]["total_records"], 0)

    def test_charts_from_dashboard_data(self):
        data = self.provider.get_dashboard_data({"period": "monthly"})

        trend = self.dashboard._build_trends_chart(data["trend_series"])
        pie = self.dashboard._build_market_share_chart(data["market_share"])
        yoy = self.dashboard._build_growth_chart(data["yoy"], "current_year", "previous_year")

        self.assertEqual(len(trend.data), 2)
        self.assertEqual(len(pie.data[0].labels), len(data["market_share"]))
        self.assertLessEqual(len(yoy.data[0].x), self.provider.GROWTH_ROWS)

    def test_empty_chart_placeholder(self):
        figure = self.dashboard._build_trends_chart([])

        self.assertEqual(len(figure.data), 0)
        self.assertEqual(len(figure.layout.annotations), 1)

    def test_period_change_formatting(self):
        text, style, label = self.dashboard._format_period_change({
            "period_change_pct": -12.5,
            "latest_period": "2024-12",
            "previous_period": "2024-11"
        })

        self.assertEqual(text, "-12.5%")
        self.assertEqual(style["color"], self.dashboard.COLORS["negative"])
        self.assertEqual(label, "2024-12 vs 2024-11")

        text, _, _ = self.dashboard._format_period_change({"period_change_pct": None})
        self.assertEqual(text, "n/a")

    def test_growth_bar_labels(self):
        qoq = {"manufacturer": "Kia", "vehicle_type": "Four Wheeler", "year": "2024",
               "previous_quarter": "2", "current_quarter": "3"}
        yoy = {"manufacturer": "Kia", "vehicle_type": "Four Wheeler",
               "previous_year": "2023", "current_year": "2024"}

        self.assertEqual(
            self.dashboard._growth_label(qoq, "current_quarter", "previous_quarter"),
            "Kia / Four Wheeler (2024 Q2->Q3)"
        )
        self.assertEqual(
            self.dashboard._growth_label(yoy, "current_year", "previous_year"),
            "Kia / Four Wheeler (2023->2024)"
        )


if __name__ == "__main__":
    unittest.main()
