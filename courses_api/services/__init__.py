"""Service Layer — orchestrates validation, existence checks and persistence.

Invariants:
    - Services receive repositories and the caller's identity as parameters
    - Services raise RequestRejectedError subclasses; they never build responses
"""
