"""
Infrastructure layer.

SQLAlchemy repositories, FastAPI routers and request/response schemas,
grouped by bounded context.
"""
