"""
VehicleAnalytics - KPI Calculator

Computes the headline KPIs shown on the dashboard cards.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from vehicle_analytics.calculators.growth_calculator import growth_percentage, round2
from vehicle_analytics.models.facts import AggregateBucket, VehicleStatEntry


logger = logging.getLogger(__name__)


@dataclass
class DashboardKPIs:
    """
    Headline KPI values for the dashboard overview cards.
    """
    total_vehicles: int = 0
    total_registrations: int = 0
    unique_manufacturers: int = 0
    avg_vehicles_per_registration: float = 0.0
    latest_period: Optional[str] = None
    previous_period: Optional[str] = None
    period_change_pct: Optional[float] = None  # None until two periods exist

    def to_dict(self) -> dict:
        """Convert to dictionary for API/dashboard consumption."""
        return {
            "total_vehicles": self.total_vehicles,
            "total_registrations": self.total_registrations,
            "unique_manufacturers": self.unique_manufacturers,
            "avg_vehicles_per_registration": self.avg_vehicles_per_registration,
            "latest_period": self.latest_period,
            "previous_period": self.previous_period,
            "period_change_pct": self.period_change_pct
        }


class KPICalculator:
    """
    Calculator for dashboard KPI metrics.

    Computes:
    - Totals of vehicles and registrations
    - Distinct manufacturer count
    - Average vehicles per registration
    - Change between the last two trend periods
    """

    def calculate(
        self,
        stats: Sequence[VehicleStatEntry],
        trend: Sequence[AggregateBucket]
    ) -> DashboardKPIs:
        """
        Calculate dashboard KPIs.

        Args:
            stats: Stat entries for the current filter scope
            trend: Trend buckets for the same scope, ordered by period

        Returns:
            DashboardKPIs instance
        """
        total_vehicles = sum(entry.total_vehicles for entry in stats)
        total_registrations = sum(entry.total_registrations for entry in stats)

        kpis = DashboardKPIs(
            total_vehicles=total_vehicles,
            total_registrations=total_registrations,
            unique_manufacturers=len({entry.manufacturer for entry in stats}),
            avg_vehicles_per_registration=(
                round2(total_vehicles / total_registrations) if total_registrations > 0 else 0.0
            )
        )

        period_totals = self.sum_by_period(trend)
        if period_totals:
            periods = list(period_totals.keys())
            kpis.latest_period = periods[-1]
            if len(periods) >= 2:
                kpis.previous_period = periods[-2]
                kpis.period_change_pct = growth_percentage(
                    period_totals[periods[-1]], period_totals[periods[-2]]
                )

        logger.debug(f"Calculated KPIs: {kpis.total_vehicles} vehicles, {kpis.total_registrations} registrations")
        return kpis

    @staticmethod
    def sum_by_period(trend: Sequence[AggregateBucket]) -> Dict[str, int]:
        """
        Collapse trend buckets into total vehicles per period.

        Args:
            trend: Trend buckets ordered by period

        Returns:
            Ordered mapping of period label to total vehicles
        """
        totals: Dict[str, int] = OrderedDict()
        for bucket in trend:
            label = bucket.period_label or ""
            totals[label] = totals.get(label, 0) + bucket.total_vehicles
        return totals

    @staticmethod
    def period_series(trend: Sequence[AggregateBucket]) -> List[dict]:
        """
        Per-period totals for charting.

        Args:
            trend: Trend buckets ordered by period

        Returns:
            List of {"period", "total_vehicles", "total_registrations"} dicts
        """
        series: Dict[str, dict] = OrderedDict()
        for bucket in trend:
            label = bucket.period_label or ""
            point = series.setdefault(
                label, {"period": label, "total_vehicles": 0, "total_registrations": 0}
            )
            point["total_vehicles"] += bucket.total_vehicles
            point["total_registrations"] += bucket.total_registrations
        return list(series.values())
