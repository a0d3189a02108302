"""
VehicleAnalytics - Record Store

Owns the in-memory working set of vehicle registration records.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from vehicle_analytics.models.facts import VehicleRecord


logger = logging.getLogger(__name__)


class RecordStore:
    """
    In-memory store of registration records.

    Supports one mutating operation (replace_all) and any number of readers.
    Each replacement installs a new immutable tuple, so a reader holding a
    snapshot keeps a consistent view even if a replacement lands mid-read.
    """

    def __init__(self, records: Optional[Iterable[VehicleRecord]] = None):
        """
        Initialize the record store.

        Args:
            records: Optional initial records (does not stamp last_updated)
        """
        self._records: Tuple[VehicleRecord, ...] = tuple(records or ())
        self._last_updated: Optional[datetime] = None
        self._source_label: Optional[str] = None
        self._lock = threading.Lock()
        logger.debug("RecordStore initialized")

    def replace_all(
        self,
        records: Iterable[VehicleRecord],
        source_label: Optional[str] = None
    ) -> datetime:
        """
        Replace the whole working set.

        Args:
            records: New records
            source_label: Human-readable description of the data source

        Returns:
            The last-updated timestamp stamped on this replacement (UTC)
        """
        new_records = tuple(records)
        stamped_at = datetime.now(timezone.utc)

        with self._lock:
            self._records = new_records
            self._last_updated = stamped_at
            self._source_label = source_label

        logger.info(f"[OK] Record store replaced with {len(new_records)} records")
        return stamped_at

    def snapshot(self) -> Tuple[VehicleRecord, ...]:
        """Return the current records (immutable)."""
        with self._lock:
            return self._records

    @property
    def last_updated(self) -> Optional[datetime]:
        """Timestamp of the last replace_all, or None if never replaced."""
        with self._lock:
            return self._last_updated

    @property
    def source_label(self) -> Optional[str]:
        """Data source description from the last replace_all."""
        with self._lock:
            return self._source_label

    def __len__(self) -> int:
        return len(self.snapshot())
