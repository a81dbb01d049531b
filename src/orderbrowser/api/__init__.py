"""HTTP API for the order browser."""
