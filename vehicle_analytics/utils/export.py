"""
VehicleAnalytics - Export Helpers

CSV rendering for API downloads and dashboard exports.
"""

import csv
import io
from datetime import date
from typing import Any, Dict, List, Optional, Sequence


def rows_to_csv(
    rows: Sequence[Dict[str, Any]],
    columns: Optional[List[str]] = None
) -> str:
    """
    Render rows as CSV text.

    Values containing commas, quotes or newlines are quoted with internal
    quotes doubled. None renders as an empty cell.

    Args:
        rows: Row dictionaries (one CSV row each)
        columns: Column order (default: keys of the first row)

    Returns:
        CSV text with a header row and CRLF line endings, "" when rows is empty
    """
    if not rows:
        return ""

    fieldnames = columns or list(rows[0].keys())
    output = io.StringIO()
    writer = csv.DictWriter(
        output,
        fieldnames=fieldnames,
        extrasaction="ignore",
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\r\n"
    )
    writer.writeheader()
    writer.writerows(rows)

    # Drop the terminator after the last row
    return output.getvalue()[:-2]


def csv_download(
    rows: Sequence[Dict[str, Any]],
    filename: str,
    columns: Optional[List[str]] = None
) -> Dict[str, str]:
    """
    Build the payload for a dcc.Download component.

    Args:
        rows: Row dictionaries to export
        filename: Output filename
        columns: Column names to include

    Returns:
        Dictionary with content, filename and type
    """
    return {
        "content": rows_to_csv(rows, columns),
        "filename": filename,
        "type": "text/csv"
    }


def export_filename(extension: str, today: Optional[date] = None) -> str:
    """Dated attachment name, e.g. vehicle_data_2024-05-01.csv."""
    stamp = (today or date.today()).isoformat()
    return f"vehicle_data_{stamp}.{extension}"
