"""Infrastructure layer — database engine, schema, and repositories.

This layer depends on stdlib, SQLAlchemy, and the domain models it
persists. It must never import from services, commands, or output.
"""
