"""Infrastructure Layer — database, repositories, hashing, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Database errors leave this layer only as PersistenceError
"""
