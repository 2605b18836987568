"""
Data models for the status dashboard.

Defines the incidents extracted from the feed, the per-day aggregation,
the chart-ready series and the dashboard settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List


@dataclass(frozen=True)
class Incident:
    """
    A single incident entry retained from the status feed.

    Attributes:
        title: Incident title, verbatim from the feed.
        updated: When the incident was last updated (timezone-aware).
        date: Display date, e.g. "Oct 05, 2026".
        time_range: "<start> - <end>", either side "N/A" if unknown.
        updated_raw: The feed's <updated> text as received.
    """

    title: str
    updated: datetime
    date: str
    time_range: str
    updated_raw: str = ""


class CurrentStatus(Enum):
    """Overall service state derived from recent incidents."""

    OPERATIONAL = "operational"
    ISSUES = "issues"

    @property
    def label(self) -> str:
        if self is CurrentStatus.ISSUES:
            return "Experiencing issues ⚠️"
        return "All Systems Operational"

    @property
    def color(self) -> str:
        return "red" if self is CurrentStatus.ISSUES else "green"


@dataclass
class AggregationResult:
    """Incident counts per display date plus the derived current status."""

    count_by_date: Dict[str, int] = field(default_factory=dict)
    current_status: CurrentStatus = CurrentStatus.OPERATIONAL

    @property
    def total(self) -> int:
        return sum(self.count_by_date.values())


@dataclass(frozen=True)
class ChartPoint:
    x: str
    y: int


@dataclass
class ChartSeries:
    """
    Bar chart description: one point per incident.

    ``points[i]`` and ``tooltips[i]`` always describe the same incident,
    so the series must not be reordered after it is built.
    """

    labels: List[str] = field(default_factory=list)
    points: List[ChartPoint] = field(default_factory=list)
    tooltips: List[str] = field(default_factory=list)
    label: str = "Count"

    def tooltip_label(self, index: int) -> str:
        """Tooltip text for the point at ``index``."""
        return self.tooltips[index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "labels": list(self.labels),
            "datasets": [
                {
                    "label": self.label,
                    "data": [{"x": p.x, "y": p.y} for p in self.points],
                }
            ],
            "tooltips": list(self.tooltips),
        }


@dataclass
class DashboardSettings:
    """Dashboard configuration."""

    feed_url: str = "https://www.githubstatus.com/history.atom"
    request_timeout: int = 15  # seconds
    window_months: int = 1
    issue_window_minutes: int = 60
    chart_width: int = 40  # widest bar, in characters
    serve: bool = False
    port: int = 10000
