"""
GitHub Status Dashboard — one-shot incident overview.

Fetches GitHub's public status feed, keeps the incidents of the last
month, counts them per day and renders a status badge plus bar chart.
"""

__version__ = "1.0.0"
