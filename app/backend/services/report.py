"""Console report for a meeting point result."""
from typing import List
from app.backend.schemas.meeting import MeetingPointReport


def format_report(report: MeetingPointReport) -> List[str]:
    """
    Render a report as the lines printed by the command line tool.

    Args:
        report: Meeting point report

    Returns:
        Report lines, without trailing newlines
    """
    metrics = report.metrics
    return [
        f"optimal location: {report.optimal_location}",
        f"cumulative time: {metrics.cumulative_time_hours:.3f}h",
        f"average time: {metrics.average_time_hours:.3f}h",
        f"CO2 emission saved: {metrics.co2_saved_kg:.3f}kg",
    ]
