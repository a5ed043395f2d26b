"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Repositories speak plain dicts for writes (camelCase keys already
      mapped by the service) and ORM-shaped objects for reads
"""

from typing import Any, Protocol, Sequence

from courses_api.core.domain_types import CourseId


class UserLike(Protocol):
    """Structural contract for User rows handed to core and services."""
    id: int
    first_name: str
    last_name: str
    email_address: str
    password: str


class CourseLike(Protocol):
    """Structural contract for Course rows handed to core and services."""
    id: int
    title: str
    description: str
    estimated_time: str | None
    materials_needed: str | None
    user_id: int


class UserRepository(Protocol):
    """Contract for user persistence, implemented by shell."""
    async def find_all(self) -> Sequence[UserLike]: ...
    async def find_by_email(self, email_address: str) -> Sequence[UserLike]: ...
    async def create(self, fields: dict[str, Any]) -> UserLike: ...


class CourseRepository(Protocol):
    """Contract for course persistence, implemented by shell."""
    async def find_all(self) -> Sequence[CourseLike]: ...
    async def find_by_id(self, course_id: CourseId) -> CourseLike | None: ...
    async def create(self, fields: dict[str, Any]) -> CourseLike: ...
    async def update(
        self, course: CourseLike, fields: dict[str, Any],
    ) -> CourseLike: ...
    async def delete(self, course: CourseLike) -> None: ...
