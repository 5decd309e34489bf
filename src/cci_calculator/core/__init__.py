"""Core scoring domain: catalog, parameters, scoring, aggregation, services."""
