"""Services Layer — reference validation, membership reconciliation, entity CRUD.

Invariants:
    - Services own the transaction: validate everything, then write, then commit once
    - Per-entity behaviour comes from EntityDefinition tables (no auto-discovery)

Design Decisions:
    - One generic EntityService plus narrow subclasses (TaskService) where an
      entity's reads differ
"""
