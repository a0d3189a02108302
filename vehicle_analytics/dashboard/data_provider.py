"""
VehicleAnalytics - Dashboard Data Provider

Assembles dashboard data from the analytics, vehicle and data views.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from vehicle_analytics.calculators.kpi_calculator import KPICalculator
from vehicle_analytics.utils.performance import timed
from vehicle_analytics.views.registry import ViewRegistry


logger = logging.getLogger(__name__)


class DashboardDataProvider:
    """
    Data provider for the Vehicle Analytics Dashboard.

    Runs the views for the current filter selection and returns
    plain data structures for the dashboard callbacks.
    """

    # Rows shown in charts and tables
    MARKET_SHARE_SLICES = 8
    GROWTH_ROWS = 15

    def __init__(self, views: ViewRegistry, kpi_calculator: Optional[KPICalculator] = None):
        """
        Initialize the data provider.

        Args:
            views: Views bound to the shared record store
            kpi_calculator: KPI calculator (creates default if None)
        """
        self.views = views
        self.kpi_calculator = kpi_calculator or KPICalculator()
        logger.debug("DashboardDataProvider initialized")

    @staticmethod
    def build_params(filters: Optional[Mapping[str, Any]]) -> Dict[str, str]:
        """
        Convert dashboard control values to query parameters.

        Args:
            filters: Control values (None or "" means not selected)

        Returns:
            Parameter mapping with string values only
        """
        params: Dict[str, str] = {}
        for name, value in (filters or {}).items():
            if value is None or str(value).strip() == "":
                continue
            params[name] = str(value)
        return params

    @timed("data_provider.get_dashboard_data")
    def get_dashboard_data(self, filters: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Get all data for one dashboard refresh.

        Args:
            filters: start_date, end_date, vehicle_type, manufacturer,
                     fuel_type, year and period control values

        Returns:
            Dictionary with kpis, trend series, market share, stats,
            growth tables and data status
        """
        params = self.build_params(filters)

        stats = self.views.vehicles.stats(params)
        trend = self.views.analytics.trends(params)
        market_share = self.views.analytics.market_share(params)
        yoy = self.views.analytics.yoy(params)
        qoq = self.views.analytics.qoq(params)

        kpis = self.kpi_calculator.calculate(stats, trend)

        return {
            "kpis": kpis.to_dict(),
            "trend_series": self.kpi_calculator.period_series(trend),
            "market_share": self._summarize_market_share(
                [entry.to_dict() for entry in market_share]
            ),
            "stats": [entry.to_dict() for entry in stats],
            "yoy": [entry.to_dict() for entry in yoy],
            "qoq": [entry.to_dict() for entry in qoq],
            "status": self.views.data.status()
        }

    def get_filter_options(self) -> Dict[str, List[str]]:
        """Distinct values for the filter dropdowns, plus available years."""
        options = self.views.vehicles.filter_options()
        years = sorted({f"{record.registration_date.year:04d}" for record in self.views.store.snapshot()})
        options["years"] = years
        return options

    def _summarize_market_share(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Collapse market share rows to manufacturers for the pie chart.

        Keeps the largest manufacturers and folds the rest into "Others".
        """
        by_manufacturer: Dict[str, Dict[str, Any]] = {}
        for row in rows:
            entry = by_manufacturer.setdefault(
                row["manufacturer"],
                {"manufacturer": row["manufacturer"], "total_vehicles": 0, "market_share_percentage": 0.0}
            )
            entry["total_vehicles"] += row["total_vehicles"]
            entry["market_share_percentage"] += row["market_share_percentage"]

        ranked = sorted(by_manufacturer.values(), key=lambda entry: entry["total_vehicles"], reverse=True)
        top = ranked[:self.MARKET_SHARE_SLICES]
        rest = ranked[self.MARKET_SHARE_SLICES:]

        if rest:
            top.append({
                "manufacturer": "Others",
                "total_vehicles": sum(entry["total_vehicles"] for entry in rest),
                "market_share_percentage": sum(entry["market_share_percentage"] for entry in rest)
            })

        for entry in top:
            entry["market_share_percentage"] = round(entry["market_share_percentage"], 2)
        return top
