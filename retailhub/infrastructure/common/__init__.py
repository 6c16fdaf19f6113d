"""Shared infrastructure: generic repository, controller, DI and error handling."""
