"""HTTP API for ItemKeeper."""
