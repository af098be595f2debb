"""HTTP API: routers and dependency functions."""
