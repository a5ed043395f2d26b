"""Course Catalog API Package — users, courses, Basic auth, field validation.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
