"""
VehicleAnalytics - Main Entry Point

This module provides the command line entry point and the application factory
shared by the dashboard launcher and the WSGI module.
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from vehicle_analytics.calculators.kpi_calculator import KPICalculator
from vehicle_analytics.dashboard.app import VehicleAnalyticsDashboard
from vehicle_analytics.dashboard.data_provider import DashboardDataProvider
from vehicle_analytics.api import register_api
from vehicle_analytics.utils.config import Config
from vehicle_analytics.utils.errors import AnalyticsError
from vehicle_analytics.utils.logging_config import LogContext, setup_logging
from vehicle_analytics.utils.performance import format_perf_report
from vehicle_analytics.views.registry import ViewRegistry, build_views


logger = logging.getLogger(__name__)


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        description="VehicleAnalytics - Vehicle Registration Analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the dashboard and REST API
  python -m vehicle_analytics.main --serve

  # Log data status and KPIs for the mock data
  python -m vehicle_analytics.main --summary

  # Export filtered records (format from the file extension)
  python -m vehicle_analytics.main --export exports/tata.csv --manufacturer "Tata Motors"
        """
    )

    # Operation modes (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument(
        "--serve",
        action="store_true",
        help="Run the dashboard and REST API"
    )
    mode_group.add_argument(
        "--summary",
        action="store_true",
        help="Log data status, KPIs and top growth movements"
    )
    mode_group.add_argument(
        "--export",
        type=Path,
        metavar="PATH",
        help="Write filtered records to PATH (.csv or .json)"
    )

    # Filter options
    parser.add_argument("--start-date", help="Earliest registration date (YYYY-MM-DD)")
    parser.add_argument("--end-date", help="Latest registration date (YYYY-MM-DD)")
    parser.add_argument("--vehicle-type", help="Vehicle type filter")
    parser.add_argument("--manufacturer", help="Manufacturer filter")
    parser.add_argument("--fuel-type", help="Fuel type filter")

    # Server options
    parser.add_argument("--host", help="Override DASH_HOST")
    parser.add_argument("--port", type=int, help="Override DASH_PORT")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def filter_params(args: argparse.Namespace) -> Dict[str, str]:
    """Collect the filter options that were given on the command line."""
    names = ("start_date", "end_date", "vehicle_type", "manufacturer", "fuel_type")
    return {name: getattr(args, name) for name in names if getattr(args, name)}


def create_app(config: Optional[Config] = None, seed_data: bool = True) -> VehicleAnalyticsDashboard:
    """
    Build views, dashboard and REST API around one record store.

    Args:
        config: Application configuration (loads from environment if None)
        seed_data: Fill the store with mock data before serving

    Returns:
        Dashboard with the API registered on its Flask server
    """
    config = config or Config()
    views = build_views(config)

    if seed_data:
        views.data.initialize()

    dashboard = VehicleAnalyticsDashboard(data_provider=DashboardDataProvider(views))
    register_api(dashboard.server, views)
    return dashboard


def run_summary(views: ViewRegistry, params: Dict[str, str]) -> bool:
    """
    Log data status, KPIs and the largest growth movements.

    Returns:
        True if the store holds data, False otherwise
    """
    status = views.data.status()
    data_status = status["data_status"]
    if data_status["total_records"] == 0:
        logger.warning("[WARN] No records loaded")
        return False

    logger.info(
        f"[OK] {data_status['total_records']} records from {status['data_source']} "
        f"({data_status['earliest_date']} to {data_status['latest_date']})"
    )

    kpis = KPICalculator().calculate(views.vehicles.stats(params), views.analytics.trends(params))
    logger.info(f"Total vehicles:       {kpis.total_vehicles}")
    logger.info(f"Registrations:        {kpis.total_registrations}")
    logger.info(f"Manufacturers:        {kpis.unique_manufacturers}")
    logger.info(f"Avg per registration: {kpis.avg_vehicles_per_registration}")
    if kpis.period_change_pct is not None:
        logger.info(f"{kpis.latest_period} vs {kpis.previous_period}: {kpis.period_change_pct}%")

    for label, entries in (("YoY", views.analytics.yoy(params)), ("QoQ", views.analytics.qoq(params))):
        for entry in entries[:5]:
            logger.info(
                f"{label} {entry.manufacturer} / {entry.vehicle_type}: "
                f"{entry.previous_period} -> {entry.current_period} {entry.growth_percentage}%"
            )

    for entry in views.analytics.market_share(params)[:5]:
        logger.info(f"Share {entry.manufacturer} / {entry.vehicle_type}: {entry.market_share_percentage}%")

    return True


def run_export(views: ViewRegistry, path: Path, params: Dict[str, str]) -> bool:
    """
    Write filtered records to a file.

    Returns:
        True if the file was written
    """
    export_params = dict(params)
    export_params["format"] = path.suffix.lstrip(".") or "json"

    result = views.data.export(export_params)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.content, encoding="utf-8", newline="")
    logger.info(f"[OK] Wrote {result.record_count} records to {path}")
    return True


def main(argv=None) -> int:
    """
    Main entry point for VehicleAnalytics.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_arguments(argv)

    # Load configuration
    try:
        config = Config()
    except ValueError as error:
        setup_logging(level=logging.INFO, log_dir=None)
        logger.error(f"[ERROR] Failed to load configuration: {error}")
        return 1

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(level=log_level, log_dir=config.log_dir)

    logger.info("=" * 60)
    logger.info("VehicleAnalytics - Starting")
    logger.info(f"Timestamp: {datetime.now(timezone.utc).isoformat()}")
    logger.info("=" * 60)

    params = filter_params(args)
    success = False

    try:
        if args.serve:
            dashboard = create_app(config)
            dashboard.run(
                host=args.host or config.server.host,
                port=args.port or config.server.port,
                debug=config.server.debug
            )
            success = True

        else:
            views = build_views(config)
            views.data.initialize()

            if args.summary:
                perf_level = logging.DEBUG if args.verbose else logging.INFO
                with LogContext("vehicle_analytics.utils.performance", perf_level):
                    success = run_summary(views, params)
                if args.verbose:
                    logger.info(format_perf_report())

            elif args.export:
                success = run_export(views, args.export, params)

    except KeyboardInterrupt:
        logger.warning("[WARN] Operation interrupted by user")
        return 130

    except AnalyticsError as error:
        logger.error(f"[ERROR] {error}")
        return 1

    except Exception as error:
        logger.error(f"[ERROR] Operation failed: {error}", exc_info=True)
        return 1

    logger.info("=" * 60)
    if success:
        logger.info("[DONE] VehicleAnalytics - Complete")
    else:
        logger.error("[ERROR] VehicleAnalytics - Failed")
    logger.info("=" * 60)

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
