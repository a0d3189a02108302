"""
VehicleAnalytics - Analytics Views

Growth, trend and market-share views over the record store. Each view
takes a mapping of query parameters and honours the filters its endpoint
supports.
"""

import logging
from typing import List, Mapping, Optional

from vehicle_analytics.aggregators.time_aggregator import TimeAggregator
from vehicle_analytics.calculators.growth_calculator import GrowthCalculator
from vehicle_analytics.calculators.market_share_calculator import MarketShareCalculator
from vehicle_analytics.models.dimensions import PeriodType
from vehicle_analytics.models.facts import AggregateBucket, GrowthEntry, MarketShareEntry
from vehicle_analytics.store.record_store import RecordStore
from vehicle_analytics.utils.performance import timed
from vehicle_analytics.views.record_filter import FilterCriteria


logger = logging.getLogger(__name__)


# Trend buckets supported by the trends view (monthly is the fallback)
TREND_PERIODS = (
    PeriodType.DAILY,
    PeriodType.WEEKLY,
    PeriodType.MONTHLY,
    PeriodType.QUARTERLY,
    PeriodType.YEARLY
)


class AnalyticsViews:
    """
    Analytics views for the dashboard and REST API.

    Provides:
    - Year-over-year growth
    - Quarter-over-quarter growth
    - Registration trends per period
    - Market share by manufacturer and vehicle type
    """

    YOY_FILTERS = ("vehicle_type", "manufacturer", "fuel_type")
    QOQ_FILTERS = ("vehicle_type", "manufacturer", "fuel_type", "year")
    TREND_FILTERS = ("vehicle_type", "manufacturer", "start_date", "end_date")
    SHARE_FILTERS = ("start_date", "end_date", "vehicle_type")

    def __init__(
        self,
        store: RecordStore,
        aggregator: Optional[TimeAggregator] = None,
        growth_calculator: Optional[GrowthCalculator] = None,
        market_share_calculator: Optional[MarketShareCalculator] = None
    ):
        """
        Initialize the analytics views.

        Args:
            store: Record store to read snapshots from
            aggregator: Time aggregator (creates default if None)
            growth_calculator: Growth calculator (creates default if None)
            market_share_calculator: Market share calculator (creates default if None)
        """
        self.store = store
        self.aggregator = aggregator or TimeAggregator()
        self.growth_calculator = growth_calculator or GrowthCalculator()
        self.market_share_calculator = market_share_calculator or MarketShareCalculator(
            self.aggregator.grouper
        )
        logger.debug("AnalyticsViews initialized")

    @timed("views.yoy")
    def yoy(self, params: Optional[Mapping[str, str]] = None) -> List[GrowthEntry]:
        """
        Year-over-year growth per vehicle type and manufacturer.

        Filters: vehicle_type, manufacturer, fuel_type
        """
        criteria = FilterCriteria.from_params(params, self.YOY_FILTERS)
        records = criteria.apply(self.store.snapshot())
        buckets = self.aggregator.group_by_period(records, PeriodType.YEARLY)
        return self.growth_calculator.year_over_year(buckets.values())

    @timed("views.qoq")
    def qoq(self, params: Optional[Mapping[str, str]] = None) -> List[GrowthEntry]:
        """
        Quarter-over-quarter growth per vehicle type, manufacturer and year.

        Filters: vehicle_type, manufacturer, fuel_type, year
        """
        criteria = FilterCriteria.from_params(params, self.QOQ_FILTERS)
        records = criteria.apply(self.store.snapshot())
        buckets = self.aggregator.group_by_period(records, PeriodType.QUARTERLY)
        return self.growth_calculator.quarter_over_quarter(buckets.values())

    @timed("views.trends")
    def trends(self, params: Optional[Mapping[str, str]] = None) -> List[AggregateBucket]:
        """
        Raw per-period totals ordered by period.

        Filters: vehicle_type, manufacturer, start_date, end_date
        Options: period = daily | weekly | monthly | quarterly | yearly
                 (default and fallback: monthly)
        """
        params = params or {}
        criteria = FilterCriteria.from_params(params, self.TREND_FILTERS)
        records = criteria.apply(self.store.snapshot())
        return self.aggregator.build_trend(records, self.trend_period(params.get("period")))

    @timed("views.market_share")
    def market_share(self, params: Optional[Mapping[str, str]] = None) -> List[MarketShareEntry]:
        """
        Share of the filtered total per manufacturer and vehicle type.

        Filters: start_date, end_date, vehicle_type
        """
        criteria = FilterCriteria.from_params(params, self.SHARE_FILTERS)
        records = criteria.apply(self.store.snapshot())
        return self.market_share_calculator.calculate(records)

    @staticmethod
    def trend_period(value: Optional[str]) -> PeriodType:
        """Resolve the trend period, falling back to monthly."""
        period = PeriodType.from_value(value, PeriodType.MONTHLY)
        return period if period in TREND_PERIODS else PeriodType.MONTHLY
