"""API Layer — FastAPI routes, dependencies, error handlers and middleware.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies (except 204 responses)

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
