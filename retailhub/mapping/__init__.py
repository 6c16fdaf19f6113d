"""Conversion between persisted records, domain entities and API responses."""
