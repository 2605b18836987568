"""
Console Notifier — the dashboard's terminal rendering.

Prints the status badge, a text bar chart of incidents per day with the
tooltip detail of every incident, and error/warning lines, using ANSI
colors for readability.
"""

from __future__ import annotations

from datetime import datetime, timezone

from ghstatus.models import ChartSeries, CurrentStatus

# ANSI color codes for terminal styling
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_CYAN = "\033[96m"
_WHITE = "\033[97m"
_GRAY = "\033[90m"
_BG_RED = "\033[41m"
_BG_GREEN = "\033[42m"

_BAR = "█"


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def print_banner() -> None:
    """Print the dashboard header."""
    banner = f"""
{_BOLD}{_CYAN}+------------------------------------------------------------------+
|                          GitHub Status                           |
+------------------------------------------------------------------+{_RESET}
"""
    print(banner)


def print_status(status: CurrentStatus) -> None:
    """Print the current status as a colored badge."""
    background = _BG_RED if status is CurrentStatus.ISSUES else _BG_GREEN
    print(f"  {background}{_BOLD}{_WHITE} {status.label} {_RESET}\n")


def print_chart(series: ChartSeries, width: int = 40) -> None:
    """
    Print one bar per date, followed by the tooltip of every incident
    that landed on that date.
    """
    print(f"  {_BOLD}Incidents in the last month{_RESET}\n")

    if not series.points:
        print(f"  {_DIM}No incidents.{_RESET}\n")
        return

    counts = {point.x: point.y for point in series.points}
    peak = max(counts.values())
    label_width = max(len(label) for label in series.labels)

    for label in series.labels:
        count = counts[label]
        bar = _BAR * max(1, round(count / peak * width))
        print(f"  {label:<{label_width}} {_RED}{bar}{_RESET} {_BOLD}{count}{_RESET}")
        for index, point in enumerate(series.points):
            if point.x == label:
                print(f"  {' ' * label_width}   {_DIM}{series.tooltip_label(index)}{_RESET}")

    print()


def print_error(message: str) -> None:
    """Print an error message."""
    print(f"  {_GRAY}[{_timestamp()}]{_RESET} {_RED}ERROR{_RESET} {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    print(f"  {_GRAY}[{_timestamp()}]{_RESET} {_YELLOW}WARNING{_RESET} {message}")


def print_config_notice(path: str) -> None:
    print(f"⚠  Config file not found at {path}, using defaults.")


def print_serving(port: int) -> None:
    """Print where the JSON endpoint is listening."""
    print(
        f"  {_BOLD}{_GREEN}Serving dashboard data on port {port}{_RESET}"
        f"  {_DIM}(Press Ctrl+C to stop){_RESET}\n"
    )


def print_shutdown() -> None:
    """Print shutdown message."""
    print(f"\n{_BOLD}{_CYAN}Dashboard stopped. Goodbye!{_RESET}\n")
