"""HTTP API for word checks."""
