"""
VehicleAnalytics - Dashboard Launcher

Run this script to start the dashboard web interface with the REST API.
The record store is seeded with mock registration data on startup.

Usage:
    python run_dashboard.py
    python run_dashboard.py --port 8080
    python run_dashboard.py --debug
"""

import argparse
import logging
import sys

from vehicle_analytics.main import create_app
from vehicle_analytics.utils.config import Config
from vehicle_analytics.utils.logging_config import setup_logging


logger = logging.getLogger(__name__)


def parse_arguments() -> argparse.Namespace:
    """Parse launcher arguments."""
    parser = argparse.ArgumentParser(description="VehicleAnalytics Dashboard")
    parser.add_argument("--host", help="Host address to bind (default: DASH_HOST)")
    parser.add_argument("--port", type=int, help="Port number (default: DASH_PORT)")
    parser.add_argument("--debug", action="store_true", help="Enable Dash debug mode")
    parser.add_argument("--no-seed", action="store_true", help="Start with an empty record store")
    return parser.parse_args()


def main() -> int:
    """Start the dashboard."""
    args = parse_arguments()

    config = Config()
    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_dir=config.log_dir
    )

    host = args.host or config.server.host
    port = args.port or config.server.port

    logger.info("=" * 60)
    logger.info("VehicleAnalytics - Dashboard")
    logger.info(f"Dashboard: http://{host}:{port}")
    logger.info(f"REST API:  http://{host}:{port}/api")
    logger.info("=" * 60)

    dashboard = create_app(config, seed_data=not args.no_seed)

    try:
        dashboard.run(host=host, port=port, debug=args.debug or config.server.debug)
    except KeyboardInterrupt:
        logger.info("[SHUTDOWN] Dashboard stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
