"""ItemKeeper: a token-authenticated, per-user item API."""

__version__ = "0.1.0"
