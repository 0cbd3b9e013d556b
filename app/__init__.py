"""Application layer: use cases, data source and startup."""
