"""Exceptions raised while loading the status feed."""


class DashboardError(Exception):
    """Base class for feed problems the dashboard recovers from."""


class FeedFetchError(DashboardError):
    """The feed could not be downloaded (network, timeout, HTTP status)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class FeedParseError(DashboardError):
    """The feed body is not a well-formed XML document."""
