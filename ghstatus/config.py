"""
YAML configuration loader.

Reads config.yaml and produces a typed DashboardSettings object.
Falls back to defaults if the config file is missing.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from ghstatus import notifier
from ghstatus.models import DashboardSettings

# Default path: config.yaml next to the project root
_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def load_config(path: str | Path | None = None) -> DashboardSettings:
    """
    Load and parse the YAML configuration file.

    The PORT environment variable, when set, overrides the configured port.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    defaults = DashboardSettings()

    if config_path.exists():
        with open(config_path, "r") as fh:
            raw = yaml.safe_load(fh) or {}
        section = raw.get("dashboard") or {}
    else:
        notifier.print_config_notice(str(config_path))
        section = {}

    settings = DashboardSettings(
        feed_url=section.get("feed_url", defaults.feed_url),
        request_timeout=int(section.get("request_timeout", defaults.request_timeout)),
        window_months=int(section.get("window_months", defaults.window_months)),
        issue_window_minutes=int(
            section.get("issue_window_minutes", defaults.issue_window_minutes)
        ),
        chart_width=int(section.get("chart_width", defaults.chart_width)),
        serve=bool(section.get("serve", defaults.serve)),
        port=int(section.get("port", defaults.port)),
    )

    if os.environ.get("PORT"):
        settings.port = int(os.environ["PORT"])

    return settings
