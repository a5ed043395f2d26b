"""Course ORM — a CRUD-managed entity owned by exactly one User.

Invariants:
    - user_id is a non-null FK to users.id (the database rejects unknown owners)
    - estimated_time and materials_needed are nullable (optional on input)
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courses_api.db.base import Base


class Course(Base):
    """Course entity."""
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    estimated_time: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    materials_needed: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )

    owner: Mapped["User"] = relationship("User", back_populates="courses")
