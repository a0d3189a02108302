"""
VehicleAnalytics - Error Types

Exceptions raised by views and mapped to HTTP statuses by the API layer.
"""


class AnalyticsError(Exception):
    """Base class for analytics errors."""

    status_code = 500


class NoDataError(AnalyticsError):
    """Raised when an export matches no records."""

    status_code = 404


class UnsupportedFormatError(AnalyticsError):
    """Raised when an export format other than json/csv is requested."""

    status_code = 400

    def __init__(self, requested_format: str):
        self.requested_format = requested_format
        super().__init__('Unsupported format. Use "json" or "csv"')
