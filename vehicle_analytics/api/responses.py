"""
VehicleAnalytics - API Response Helpers

JSON/CSV rendering and the JSON error envelope shared by all blueprints.
"""

import logging
from typing import Any, Dict, List, Sequence

from flask import Blueprint, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from vehicle_analytics.utils.errors import AnalyticsError
from vehicle_analytics.utils.export import rows_to_csv


logger = logging.getLogger(__name__)


def rows_response(rows: Sequence[Dict[str, Any]], csv_name: str) -> Response:
    """
    Render rows as JSON, or as a CSV attachment when ?format=csv.

    Args:
        rows: Row dictionaries
        csv_name: Attachment filename used for CSV output

    Returns:
        Flask response
    """
    if (request.args.get("format") or "").strip().lower() == "csv":
        response = Response(rows_to_csv(rows), mimetype="text/csv")
        response.headers["Content-Disposition"] = f"attachment; filename={csv_name}"
        response.headers["Cache-Control"] = "no-cache"
        return response
    return jsonify(list(rows))


def to_rows(items: Sequence[Any]) -> List[Dict[str, Any]]:
    """Convert model objects to row dictionaries."""
    return [item.to_dict() for item in items]


def error_response(message: str, status: int) -> Response:
    """Build the JSON error envelope."""
    response = jsonify({"error": message})
    response.status_code = status
    return response


def register_error_handlers(blueprint: Blueprint) -> None:
    """
    Map errors raised inside a blueprint to JSON responses.

    AnalyticsError subclasses use their status_code; HTTP errors pass
    through; anything else is logged and reported as 500.
    """

    @blueprint.errorhandler(AnalyticsError)
    def handle_analytics_error(error: AnalyticsError):
        logger.warning(f"[WARN] {request.path}: {error}")
        return error_response(str(error), error.status_code)

    @blueprint.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        if isinstance(error, HTTPException):
            return error
        logger.error(f"[ERROR] {request.method} {request.path} failed: {error}", exc_info=True)
        return error_response("Something went wrong!", 500)
