"""Domain services for the product catalog."""
