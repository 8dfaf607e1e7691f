"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (type/format/required fields)
    - Existence of referenced entities is NOT checked here (services do that)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
