"""API Layer — FastAPI routes, request middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON: {"data": ...} or {"error": ...}

Design Decisions:
    - Thin routes delegate to services
"""
