"""Domain services for finance."""
