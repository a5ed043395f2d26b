"""SQLAlchemy Repositories — UserRepository / CourseRepository implementations.

Invariants:
    - One repository instance per request, bound to that request's AsyncSession
    - Every write commits immediately (one create/update/delete == one transaction)
    - Failed writes roll back and raise PersistenceError via translate_db_errors
    - Reads are ordered by id so "first match" is deterministic

Design Decisions:
    - Repositories accept snake_case field dicts; camelCase mapping stays in services
"""

import logging
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from courses_api.core.domain_types import CourseId
from courses_api.infrastructure.database import translate_db_errors
from courses_api.models.course import Course
from courses_api.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Read access for authentication, insert for registration."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> Sequence[User]:
        async with translate_db_errors(self._db, "select"):
            result = await self._db.execute(select(User).order_by(User.id))
            return result.scalars().all()

    async def find_by_email(self, email_address: str) -> Sequence[User]:
        async with translate_db_errors(self._db, "select"):
            result = await self._db.execute(
                select(User)
                .where(User.email_address == email_address)
                .order_by(User.id),
            )
            return result.scalars().all()

    async def create(self, fields: dict[str, Any]) -> User:
        user = User(**fields)
        async with translate_db_errors(self._db, "insert"):
            self._db.add(user)
            await self._db.commit()
            await self._db.refresh(user)
        logger.info("User created", extra={"user_id": user.id})
        return user


class SqlCourseRepository:
    """Full CRUD over the courses table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> Sequence[Course]:
        async with translate_db_errors(self._db, "select"):
            result = await self._db.execute(select(Course).order_by(Course.id))
            return result.scalars().all()

    async def find_by_id(self, course_id: CourseId) -> Course | None:
        async with translate_db_errors(self._db, "select"):
            return await self._db.get(Course, course_id)

    async def create(self, fields: dict[str, Any]) -> Course:
        course = Course(**fields)
        async with translate_db_errors(self._db, "insert"):
            self._db.add(course)
            await self._db.commit()
            await self._db.refresh(course)
        return course

    async def update(self, course: Course, fields: dict[str, Any]) -> Course:
        for name, value in fields.items():
            setattr(course, name, value)
        async with translate_db_errors(self._db, "update"):
            await self._db.commit()
            await self._db.refresh(course)
        return course

    async def delete(self, course: Course) -> None:
        async with translate_db_errors(self._db, "delete"):
            await self._db.delete(course)
            await self._db.commit()
