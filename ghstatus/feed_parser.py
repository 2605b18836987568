"""
Atom Feed Parser.

Parses the status page's Atom feed into Incident objects, extracting:
  - Incident title and update timestamp
  - A display date ("MMM DD, YYYY")
  - A best-effort time range scraped from the entry's HTML content

Only incidents inside the rolling window (start of last month onwards)
are kept. Entries are matched by local tag name, so the Atom namespace
is optional.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from xml.etree import ElementTree as ET

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

from ghstatus import notifier
from ghstatus.errors import FeedParseError
from ghstatus.models import Incident

# Bare time token, or a time token inside the status page's time marker
_TIME_RANGE_RE = re.compile(r"(\d{1,2}:\d{2})|data-var='time'>(\d{1,2}:\d{2})")

# Fixed English month names, independent of the process locale
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_MISSING = "N/A"


class _MalformedEntry(ValueError):
    """Raised internally for an entry that cannot become an Incident."""


def _as_aware(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _local_name(tag: str) -> str:
    """Strip the "{namespace}" prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    """Full text content of the first child called ``name``, or None."""
    for child in element:
        if _local_name(child.tag) == name:
            return "".join(child.itertext())
    return None


# ─── Public helpers ───────────────────────────────────────────


def window_start(now: datetime, months: int = 1) -> datetime:
    """
    First instant of the rolling window: ``months`` calendar months before
    ``now``, truncated to the start of that month.

    >>> window_start(datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc))
    datetime.datetime(2026, 9, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    shifted = _as_aware(now) - relativedelta(months=months)
    return shifted.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def format_display_date(dt: datetime) -> str:
    """Format as "MMM DD, YYYY" in the timestamp's own offset."""
    return f"{_MONTHS[dt.month - 1]} {dt.day:02d}, {dt.year}"


def extract_time_range(content: str) -> str:
    """
    Scrape "<start> - <end>" out of an entry's HTML content.

    The end time is the bare token of the first match; the start time is
    the marked token of the second match. Anything not found is "N/A".
    """
    matches: List[Tuple[str, str]] = _TIME_RANGE_RE.findall(content)

    end_time = matches[0][0] if len(matches) > 0 else ""
    start_time = matches[1][1] if len(matches) > 1 else ""

    return f"{start_time or _MISSING} - {end_time or _MISSING}"


# ─── Public API ───────────────────────────────────────────────


def parse_entry(entry: ET.Element) -> Incident:
    """
    Build an Incident from a single <entry> element.

    Raises:
        ValueError: if title, updated or content is missing, or the
            updated timestamp cannot be parsed or has an invalid offset.
    """
    title = _child_text(entry, "title")
    updated_raw = _child_text(entry, "updated")
    content = _child_text(entry, "content")

    missing = [
        name
        for name, value in (("title", title), ("updated", updated_raw), ("content", content))
        if value is None
    ]
    if missing:
        raise _MalformedEntry(f"missing <{'>, <'.join(missing)}>")

    try:
        updated = _as_aware(dateutil_parser.parse(updated_raw.strip()))
        # dateutil accepts offsets datetime cannot compare, e.g. +25:00
        updated.utcoffset()
    except (ValueError, OverflowError) as exc:
        raise _MalformedEntry(f"bad <updated> value {updated_raw!r}") from exc

    return Incident(
        title=title,
        updated=updated,
        date=format_display_date(updated),
        time_range=extract_time_range(content),
        updated_raw=updated_raw,
    )


def parse_feed(
    xml_text: str,
    now: Optional[datetime] = None,
    window_months: int = 1,
) -> List[Incident]:
    """
    Parse an Atom feed into the incidents of the rolling window.

    Args:
        xml_text: Raw XML string of the feed.
        now: Evaluation time; defaults to the current UTC time.
        window_months: How many calendar months back the window reaches.

    Returns:
        Incidents updated strictly after ``window_start(now)``, in feed order.

    Raises:
        FeedParseError: if ``xml_text`` is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise FeedParseError(f"Malformed feed XML: {exc}") from exc

    now = _as_aware(now) if now is not None else datetime.now(timezone.utc)
    threshold = window_start(now, window_months)
    incidents: List[Incident] = []

    for position, entry in enumerate(
        el for el in root.iter() if _local_name(el.tag) == "entry"
    ):
        try:
            incident = parse_entry(entry)
        except _MalformedEntry as exc:
            notifier.print_warning(f"Skipping feed entry #{position + 1}: {exc}")
            continue

        if incident.updated > threshold:
            incidents.append(incident)

    return incidents
