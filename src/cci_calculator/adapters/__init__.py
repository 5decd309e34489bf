"""Adapters that turn computed results into consumer-facing content."""
