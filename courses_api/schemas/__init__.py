"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas serialize with camelCase aliases (firstName, userId, ...)
    - Secrets have no field in any response schema

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Request bodies are NOT parsed into schemas: the field validation engine
      reports violations in its own ordered format (core/field_validation.py)
"""
