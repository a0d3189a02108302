"""
VehicleAnalytics - Data Management Views

Store initialization, status reporting and filtered exports.
"""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Mapping, Optional

from vehicle_analytics.collectors.registration_collector import MockRegistrationCollector
from vehicle_analytics.store.record_store import RecordStore
from vehicle_analytics.utils.errors import NoDataError, UnsupportedFormatError
from vehicle_analytics.utils.export import export_filename, rows_to_csv
from vehicle_analytics.utils.performance import PerformanceTimer
from vehicle_analytics.views.record_filter import FilterCriteria


logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """
    Rendered export ready to be sent as an attachment.
    """
    content: str
    mimetype: str
    filename: str
    record_count: int


class DataViews:
    """
    Data management views.

    Provides:
    - Store initialization from the mock collector
    - Data status summary
    - Filtered JSON/CSV export
    """

    EXPORT_FILTERS = ("start_date", "end_date", "vehicle_type", "manufacturer", "fuel_type")
    EXPORT_FORMATS = {
        "json": "application/json",
        "csv": "text/csv; charset=utf-8"
    }

    def __init__(self, store: RecordStore, collector: MockRegistrationCollector):
        """
        Initialize the data views.

        Args:
            store: Record store to manage
            collector: Data source used to (re)initialize the store
        """
        self.store = store
        self.collector = collector
        logger.debug("DataViews initialized")

    def initialize(
        self,
        message: str = "Data initialized successfully with mock data",
        note: str = "Using realistic mock data for demonstration purposes",
        source_label: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Replace the store contents with a fresh collection.

        Args:
            message: Summary message for the response
            note: Additional note for the response
            source_label: Data source description (default: the collector's label)

        Returns:
            Initialization summary with records_fetched and last_updated
        """
        label = source_label or self.collector.source_label
        logger.info(f"[...] Initializing record store from collector ({label})")

        with PerformanceTimer("data.initialize"):
            records = self.collector.collect()
            stamped_at = self.store.replace_all(records, label)

        return {
            "message": message,
            "records_fetched": len(records),
            "data_source": label,
            "last_updated": stamped_at.isoformat(),
            "note": note
        }

    def status(self) -> Dict[str, Any]:
        """
        Summarize the current store contents.

        Returns:
            Dictionary with data_status, last_updated and data_source
        """
        records = self.store.snapshot()

        earliest: Optional[date] = None
        latest: Optional[date] = None
        if records:
            dates = [record.registration_date for record in records]
            earliest = min(dates)
            latest = max(dates)

        last_updated = self.store.last_updated or datetime.now(timezone.utc)

        return {
            "data_status": {
                "total_records": len(records),
                "earliest_date": earliest.isoformat() if earliest else None,
                "latest_date": latest.isoformat() if latest else None,
                "unique_manufacturers": len({record.manufacturer for record in records}),
                "unique_vehicle_types": len({record.vehicle_type for record in records})
            },
            "last_updated": last_updated.isoformat(),
            "data_source": (self.store.source_label or "Unknown") if records else "No data available"
        }

    def export(self, params: Optional[Mapping[str, str]] = None) -> ExportResult:
        """
        Export filtered records as JSON or CSV.

        Filters: start_date, end_date, vehicle_type, manufacturer, fuel_type
        Options: format = json (default) | csv

        Raises:
            UnsupportedFormatError: If format is not json or csv
            NoDataError: If no records match the filters
        """
        params = params or {}
        export_format = (params.get("format") or "json").strip().lower()
        if export_format not in self.EXPORT_FORMATS:
            raise UnsupportedFormatError(export_format)

        criteria = FilterCriteria.from_params(params, self.EXPORT_FILTERS)
        records = criteria.apply(self.store.snapshot())
        if not records:
            raise NoDataError("No data available for export with the specified filters")

        rows = [record.to_dict() for record in records]
        if export_format == "csv":
            content = rows_to_csv(rows)
        else:
            content = json.dumps(rows)

        logger.info(f"[OK] Exported {len(rows)} records as {export_format} (filters: {criteria.active()})")
        return ExportResult(
            content=content,
            mimetype=self.EXPORT_FORMATS[export_format],
            filename=export_filename(export_format),
            record_count=len(rows)
        )
