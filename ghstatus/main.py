"""
Main entry point — the Dashboard orchestrator.

Fetches the status feed once, runs it through the parse/aggregate
pipeline and renders the result to the console. Optionally keeps a
small aiohttp server running that exposes the same data as JSON.

Usage:
    python -m ghstatus
    python ghstatus/main.py
"""

from __future__ import annotations

import asyncio
import signal
import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import aiohttp
from aiohttp import web

from ghstatus import notifier
from ghstatus.aggregator import aggregate, build_chart_series
from ghstatus.config import load_config
from ghstatus.errors import DashboardError
from ghstatus.feed_parser import parse_feed
from ghstatus.fetcher import fetch_feed
from ghstatus.models import AggregationResult, ChartSeries, DashboardSettings, Incident


@dataclass
class DashboardState:
    """Everything one render needs, produced by a single refresh."""

    incidents: List[Incident] = field(default_factory=list)
    result: AggregationResult = field(default_factory=AggregationResult)
    series: ChartSeries = field(default_factory=ChartSeries)

    def to_dict(self) -> Dict[str, Any]:
        status = self.result.current_status
        return {
            "status": status.value,
            "status_label": status.label,
            "status_color": status.color,
            "incident_count": self.result.total,
            "chart": self.series.to_dict(),
        }


class Dashboard:
    """
    Top-level orchestrator.

    Holds no incident state of its own: ``refresh`` returns a fresh
    DashboardState which is then handed to ``render``.
    """

    def __init__(self, settings: DashboardSettings) -> None:
        self.settings = settings

    def build_state(self, xml_text: str, now: Optional[datetime] = None) -> DashboardState:
        """Run the parse → aggregate → chart pipeline on a feed body."""
        now = now or datetime.now(timezone.utc)
        incidents = parse_feed(xml_text, now=now, window_months=self.settings.window_months)
        result = aggregate(
            incidents,
            evaluation_time=now,
            issue_window=timedelta(minutes=self.settings.issue_window_minutes),
        )
        series = build_chart_series(incidents, result.count_by_date)
        return DashboardState(incidents=incidents, result=result, series=series)

    async def refresh(
        self,
        session: aiohttp.ClientSession,
        now: Optional[datetime] = None,
    ) -> DashboardState:
        """
        Fetch the feed and build the dashboard state.

        Feed problems are reported and replaced by the empty state.
        """
        try:
            body = await fetch_feed(
                session,
                self.settings.feed_url,
                timeout=self.settings.request_timeout,
            )
            return self.build_state(body, now)
        except DashboardError as exc:
            notifier.print_error(f"Error fetching GitHub status: {exc}")
            return DashboardState()

    def render(self, state: DashboardState) -> None:
        notifier.print_banner()
        notifier.print_status(state.result.current_status)
        notifier.print_chart(state.series, width=self.settings.chart_width)


def create_app(state: DashboardState) -> web.Application:
    """JSON view of a dashboard state for an external chart front end."""
    app = web.Application()
    app.router.add_get("/", lambda _: web.json_response(state.to_dict()))
    app.router.add_get("/health", lambda _: web.json_response({"status": "healthy"}))
    return app


def _handle_signals(stop: asyncio.Event, loop: asyncio.AbstractEventLoop) -> None:
    """Register signal handlers for graceful shutdown."""
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop.set)
        except NotImplementedError:
            # Windows doesn't support add_signal_handler
            pass


async def _serve(state: DashboardState, port: int) -> None:
    stop = asyncio.Event()
    _handle_signals(stop, asyncio.get_running_loop())

    runner = web.AppRunner(create_app(state))
    await runner.setup()
    site = web.TCPSite(runner, "0.0.0.0", port)
    await site.start()
    notifier.print_serving(port)

    try:
        await stop.wait()
    finally:
        notifier.print_shutdown()
        await runner.cleanup()


async def async_main() -> None:
    """Async entry point."""
    settings = load_config()
    dashboard = Dashboard(settings)

    async with aiohttp.ClientSession() as session:
        state = await dashboard.refresh(session)
    dashboard.render(state)

    if settings.serve:
        await _serve(state, settings.port)


def main() -> None:
    """Sync entry point."""
    try:
        asyncio.run(async_main())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
