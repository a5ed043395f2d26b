"""User ORM — an authenticable principal that owns courses.

Invariants:
    - id is an auto-incremented integer primary key
    - password holds a bcrypt hash, never the plain-text secret
    - email_address is the Basic-auth lookup key (uniqueness not enforced here)

Design Decisions:
    - Column names are snake_case; the API's camelCase lives in schemas/
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courses_api.db.base import Base


class User(Base):
    """User entity; owns zero or more courses."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email_address: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    courses: Mapped[list["Course"]] = relationship(
        "Course", back_populates="owner", passive_deletes=True,
    )
