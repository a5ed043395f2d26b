"""Course Catalog Service — decision order and field mapping with a fake repository.

Invariants:
    - update checks existence before validation, validation before the write
    - create never writes when the payload has violations
    - partial updates leave absent optional columns untouched
"""

from dataclasses import dataclass

import pytest

from courses_api.core.domain_types import CourseId, UserId, VerifiedIdentity
from courses_api.core.errors import ResourceNotFoundError, ValidationFailedError
from courses_api.services import course_catalog


IDENTITY = VerifiedIdentity(user_id=UserId(1), email_address="ada@example.com")


@dataclass
class _Course:
    id: int
    title: str
    description: str
    estimated_time: str | None
    materials_needed: str | None
    user_id: int


class _FakeCourses:
    """In-memory CourseRepository that records every call."""

    def __init__(self, *rows: _Course):
        self.rows = {row.id: row for row in rows}
        self.calls: list[str] = []

    async def find_all(self):
        self.calls.append("find_all")
        return list(self.rows.values())

    async def find_by_id(self, course_id):
        self.calls.append("find_by_id")
        return self.rows.get(course_id)

    async def create(self, fields):
        self.calls.append("create")
        row = _Course(id=len(self.rows) + 1, **fields)
        self.rows[row.id] = row
        return row

    async def update(self, course, fields):
        self.calls.append("update")
        for name, value in fields.items():
            setattr(course, name, value)
        return course

    async def delete(self, course):
        self.calls.append("delete")
        del self.rows[course.id]


def _stored() -> _Course:
    return _Course(1, "Old", "Old desc", "2 hours", "Pencil", 1)


# ─── parse_course_id ─────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("1", CourseId(1)), ("42", CourseId(42)),
    ("01", CourseId(1)), ("007", CourseId(7)),
    ("2147483647", CourseId(2147483647)), ("2147483648", None),
    ("99999999999999999999999", None),
    ("abc", None), ("-3", None), ("+3", None), ("", None),
])
def test_parse_course_id(raw, expected):
    assert course_catalog.parse_course_id(raw) == expected


# ─── course_fields ───────────────────────────────────────────────

def test_course_fields_full_defaults_optionals_to_none():
    fields = course_catalog.course_fields(
        {"title": "T", "description": "D", "userId": "3"}, partial=False,
    )
    assert fields == {
        "title": "T", "description": "D",
        "estimated_time": None, "materials_needed": None, "user_id": 3,
    }


def test_course_fields_partial_omits_absent_optionals():
    fields = course_catalog.course_fields(
        {"title": "T", "description": "D", "userId": 3, "estimatedTime": "1h"},
        partial=True,
    )
    assert fields == {
        "title": "T", "description": "D", "estimated_time": "1h", "user_id": 3,
    }


# ─── create ──────────────────────────────────────────────────────

async def test_create_with_violations_never_writes():
    repo = _FakeCourses()
    with pytest.raises(ValidationFailedError) as exc_info:
        await course_catalog.create_course(IDENTITY, {"title": "T"}, repo)
    assert len(exc_info.value.violations) == 2
    assert repo.calls == []


async def test_create_persists_mapped_fields():
    repo = _FakeCourses()
    course = await course_catalog.create_course(
        IDENTITY, {"title": "T", "description": "D", "userId": 9}, repo,
    )
    assert course.user_id == 9
    assert repo.calls == ["create"]


# ─── update ──────────────────────────────────────────────────────

async def test_update_missing_course_is_404_before_validation():
    repo = _FakeCourses()
    with pytest.raises(ResourceNotFoundError):
        await course_catalog.update_course(IDENTITY, "5", {}, repo)
    assert repo.calls == ["find_by_id"]


async def test_update_invalid_payload_checked_after_existence():
    repo = _FakeCourses(_stored())
    with pytest.raises(ValidationFailedError):
        await course_catalog.update_course(IDENTITY, "1", {"title": ""}, repo)
    assert repo.calls == ["find_by_id"]


async def test_update_keeps_absent_optional_fields():
    repo = _FakeCourses(_stored())
    course = await course_catalog.update_course(
        IDENTITY, "1",
        {"title": "New", "description": "New desc", "materialsNeeded": "Ink", "userId": 2},
        repo,
    )
    assert course.title == "New"
    assert course.materials_needed == "Ink"
    assert course.estimated_time == "2 hours"
    assert course.user_id == 2
    assert repo.calls == ["find_by_id", "update"]


# ─── get / delete ────────────────────────────────────────────────

async def test_get_non_numeric_id_skips_repository():
    repo = _FakeCourses(_stored())
    with pytest.raises(ResourceNotFoundError):
        await course_catalog.get_course("one", repo)
    assert repo.calls == []


async def test_delete_missing_course_is_404():
    repo = _FakeCourses()
    with pytest.raises(ResourceNotFoundError):
        await course_catalog.delete_course(IDENTITY, "1", repo)
    assert "delete" not in repo.calls


async def test_delete_existing_course():
    repo = _FakeCourses(_stored())
    await course_catalog.delete_course(IDENTITY, "1", repo)
    assert repo.rows == {}
