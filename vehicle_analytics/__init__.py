"""
VehicleAnalytics - Vehicle Registration Analytics Dashboard

This package provides tools for filtering, aggregating and reporting on
vehicle registration records: KPI totals, market share, year-over-year and
quarter-over-quarter growth, and time-series trends.
"""

__version__ = "26.10.18"
__author__ = "Vehicle Analytics Team"
