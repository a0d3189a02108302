"""
WSGI entry point for the VehicleAnalytics Dashboard.

This module creates the Dash application (with the REST API mounted under
/api) and exposes its Flask server for production WSGI servers.

Usage with Gunicorn:
    gunicorn -c gunicorn_config.py wsgi:server
"""

import logging

from vehicle_analytics.main import create_app
from vehicle_analytics.utils.config import Config
from vehicle_analytics.utils.logging_config import setup_logging


logger = logging.getLogger(__name__)


def create_server():
    """
    Create and configure the Dash application.

    Returns:
        Flask server instance (for WSGI)
    """
    config = Config()
    setup_logging(level=logging.INFO, log_dir=config.log_dir)

    logger.info("=" * 60)
    logger.info("VehicleAnalytics - Dashboard (Gunicorn)")
    logger.info("=" * 60)

    dashboard = create_app(config)
    return dashboard.server


# Called when Gunicorn imports this module
server = create_server()
