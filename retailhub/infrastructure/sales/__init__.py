"""Sales bounded context: orders."""
