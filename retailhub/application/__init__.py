"""
Application layer.

Services orchestrate repositories and domain services for one resource each.
The generic ``Service`` passes CRUD straight through; resource services add
their business rules on top of it.
"""
