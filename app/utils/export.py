"""
Utility functions for exporting data to CSV format.
Used by admins to download the (filtered) application list.
"""

import csv
import io
from datetime import datetime
from typing import Dict, Iterable

from app.models.application import Application


def export_applications_to_csv(applications: Iterable[Application]) -> str:
    """
    Export applications to CSV format.

    Args:
        applications: Applications in the order they should appear

    Returns:
        CSV string ready to be downloaded
    """

    output = io.StringIO()

    fieldnames = [
        'SubmissionDate',
        'FullName',
        'NIM',
        'Major',
        'LnTClass',
        'PositionApplied',
        'BinusianEmail',
        'PrivateEmail',
        'ResumeURL'
    ]

    writer = csv.DictWriter(output, fieldnames=fieldnames)
    writer.writeheader()

    for app in applications:
        writer.writerow({
            'SubmissionDate': app.submission_date.strftime('%Y-%m-%d'),
            'FullName': app.full_name,
            'NIM': app.nim,
            'Major': app.major,
            'LnTClass': app.lnt_class,
            'PositionApplied': app.position,
            'BinusianEmail': app.binusian_email,
            'PrivateEmail': app.private_email,
            'ResumeURL': app.resume_url
        })

    csv_string = output.getvalue()
    output.close()

    return csv_string


def export_filename(today: datetime = None) -> str:
    today = today or datetime.utcnow()
    return f"praetorian_applications_{today.strftime('%Y-%m-%d')}"


def create_csv_response_headers(filename: str) -> Dict[str, str]:
    """
    Create headers for CSV file download response.

    Args:
        filename: Name of the CSV file (without .csv extension)

    Returns:
        Dictionary of headers for FastAPI Response
    """

    return {
        "Content-Disposition": f"attachment; filename={filename}.csv"
    }
