"""Catalog bounded context: categories, master products, products and stock."""
