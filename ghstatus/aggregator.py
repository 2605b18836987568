"""
Incident aggregation.

Turns the retained incidents into per-day counts, the current status
flag and a chart-ready series with tooltip text.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Sequence

from ghstatus.models import (
    AggregationResult,
    ChartPoint,
    ChartSeries,
    CurrentStatus,
    Incident,
)

DEFAULT_ISSUE_WINDOW = timedelta(hours=1)


def count_by_date(incidents: Sequence[Incident]) -> Dict[str, int]:
    """Count incidents per display date, keyed in first-seen order."""
    counts: Dict[str, int] = {}
    for incident in incidents:
        counts[incident.date] = counts.get(incident.date, 0) + 1
    return counts


def current_status(
    incidents: Sequence[Incident],
    evaluation_time: datetime,
    issue_window: timedelta = DEFAULT_ISSUE_WINDOW,
) -> CurrentStatus:
    """ISSUES if any incident was updated within ``issue_window``."""
    if evaluation_time.tzinfo is None:
        evaluation_time = evaluation_time.replace(tzinfo=timezone.utc)
    cutoff = evaluation_time - issue_window
    if any(incident.updated > cutoff for incident in incidents):
        return CurrentStatus.ISSUES
    return CurrentStatus.OPERATIONAL


def aggregate(
    incidents: Sequence[Incident],
    evaluation_time: Optional[datetime] = None,
    issue_window: timedelta = DEFAULT_ISSUE_WINDOW,
) -> AggregationResult:
    """
    Aggregate already-filtered incidents.

    Args:
        incidents: Incidents returned by ``parse_feed``.
        evaluation_time: Reference "now"; defaults to the current UTC time.
        issue_window: How recent an update must be to count as ongoing.
    """
    if evaluation_time is None:
        evaluation_time = datetime.now(timezone.utc)
    return AggregationResult(
        count_by_date=count_by_date(incidents),
        current_status=current_status(incidents, evaluation_time, issue_window),
    )


def tooltip_label(incident: Incident) -> str:
    return f"{incident.time_range}, {incident.title}"


def build_chart_series(
    incidents: Sequence[Incident],
    counts: Dict[str, int],
) -> ChartSeries:
    """
    Build one chart point per incident (x = date, y = that date's count).

    Points and tooltips come from the same pass over ``incidents`` so that
    point ``i`` always describes ``incidents[i]``.
    """
    series = ChartSeries(labels=list(counts.keys()))
    for incident in incidents:
        series.points.append(ChartPoint(x=incident.date, y=counts[incident.date]))
        series.tooltips.append(tooltip_label(incident))
    return series
