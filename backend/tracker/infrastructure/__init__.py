"""Infrastructure Layer — database access, lookups and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy errors mapped to DatabaseError before leaving this layer
"""
