"""
Domain layer.

Stateless business rules that need neither the database nor the web layer:
stock ledger arithmetic and finance report folding.
"""
