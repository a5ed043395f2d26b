"""ORM Models — SQLAlchemy declarative models for users and courses.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner side; every Course references exactly one User

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from courses_api.models.user import User  # noqa: F401
from courses_api.models.course import Course  # noqa: F401
