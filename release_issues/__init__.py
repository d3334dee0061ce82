"""Open GitLab issues for a release, as a CSV report."""

__version__ = "0.3.0"
