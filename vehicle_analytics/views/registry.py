"""
VehicleAnalytics - View Registry

Builds the shared record store and the views that read from it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from vehicle_analytics.collectors.registration_collector import MockRegistrationCollector
from vehicle_analytics.store.record_store import RecordStore
from vehicle_analytics.utils.config import Config
from vehicle_analytics.views.analytics_views import AnalyticsViews
from vehicle_analytics.views.data_views import DataViews
from vehicle_analytics.views.vehicle_views import VehicleViews


logger = logging.getLogger(__name__)


@dataclass
class ViewRegistry:
    """
    One record store and every view bound to it.
    """
    store: RecordStore
    analytics: AnalyticsViews
    vehicles: VehicleViews
    data: DataViews


def build_views(
    config: Optional[Config] = None,
    store: Optional[RecordStore] = None,
    collector: Optional[MockRegistrationCollector] = None
) -> ViewRegistry:
    """
    Wire a record store, collector and views together.

    Args:
        config: Application configuration (loads from environment if None)
        store: Record store (creates an empty one if None)
        collector: Data source (creates a mock collector from config if None)

    Returns:
        ViewRegistry instance
    """
    config = config or Config()
    store = store if store is not None else RecordStore()

    if collector is None:
        mock = config.mock_data
        collector = MockRegistrationCollector(
            record_count=mock.record_count,
            start_date=mock.start_date,
            end_date=mock.end_date,
            seed=mock.seed,
            source_label=mock.source_label
        )

    registry = ViewRegistry(
        store=store,
        analytics=AnalyticsViews(store),
        vehicles=VehicleViews(
            store,
            default_limit=config.export.default_limit,
            max_limit=config.export.max_limit
        ),
        data=DataViews(store, collector)
    )
    logger.debug("ViewRegistry built")
    return registry
