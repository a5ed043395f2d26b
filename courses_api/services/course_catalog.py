"""Course Catalog — CRUD orchestration for courses.

Invariants:
    - create: identity (already verified by the gate) -> validation -> insert
    - update: identity -> existence -> validation -> update
      (an unknown id is 404 even when the payload is invalid)
    - delete: identity -> existence -> delete
    - reads are anonymous and unfiltered
    - Ownership (user_id) is recorded but never compared to the caller

Design Decisions:
    - The caller's VerifiedIdentity is an explicit parameter, used for audit
      logging only; any authenticated user may change any course
    - Raw path ids are parsed here: anything that is not a run of digits
      within the INTEGER column range cannot name a course, so it is reported
      as 404 (not 400); leading zeros are allowed, so "007" names course 7
    - Update leaves optional fields untouched when their key is absent
"""

import logging
import re
from typing import Any, Mapping, Sequence

from courses_api.core.domain_types import CourseId, VerifiedIdentity
from courses_api.core.errors import ResourceNotFoundError
from courses_api.core.field_validation import check_payload
from courses_api.core.repository_protocols import CourseLike, CourseRepository
from courses_api.core.rule_sets import COURSE_RULES

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_MAX_COURSE_ID = 2**31 - 1

_REQUIRED_FIELDS = (
    ("title", "title"),
    ("description", "description"),
)
_OPTIONAL_FIELDS = (
    ("estimatedTime", "estimated_time"),
    ("materialsNeeded", "materials_needed"),
)


def parse_course_id(raw_id: str) -> CourseId | None:
    if _DIGITS.fullmatch(raw_id) is None:
        return None
    course_id = int(raw_id)
    if course_id > _MAX_COURSE_ID:
        return None
    return CourseId(course_id)


def course_fields(payload: Mapping[str, Any], partial: bool) -> dict[str, Any]:
    """Map a validated camelCase payload onto Course column names.

    With partial=True, optional keys missing from the payload are omitted so
    an update keeps the stored value; otherwise they default to None.
    """
    fields = {column: payload[key] for key, column in _REQUIRED_FIELDS}
    for key, column in _OPTIONAL_FIELDS:
        if key in payload:
            fields[column] = payload[key]
        elif not partial:
            fields[column] = None
    fields["user_id"] = int(payload["userId"])
    return fields


async def list_courses(courses: CourseRepository) -> Sequence[CourseLike]:
    return await courses.find_all()


async def get_course(raw_id: str, courses: CourseRepository) -> CourseLike:
    course_id = parse_course_id(raw_id)
    course = await courses.find_by_id(course_id) if course_id is not None else None
    if course is None:
        raise ResourceNotFoundError("Course", raw_id)
    return course


async def create_course(
    identity: VerifiedIdentity,
    payload: Mapping[str, Any],
    courses: CourseRepository,
) -> CourseLike:
    error = check_payload(payload, COURSE_RULES)
    if error:
        raise error
    course = await courses.create(course_fields(payload, partial=False))
    logger.info(
        "Course created",
        extra={"user_id": identity.user_id, "course_id": course.id},
    )
    return course


async def update_course(
    identity: VerifiedIdentity,
    raw_id: str,
    payload: Mapping[str, Any],
    courses: CourseRepository,
) -> CourseLike:
    course = await get_course(raw_id, courses)
    error = check_payload(payload, COURSE_RULES)
    if error:
        raise error
    course = await courses.update(course, course_fields(payload, partial=True))
    logger.info(
        "Course updated",
        extra={"user_id": identity.user_id, "course_id": course.id},
    )
    return course


async def delete_course(
    identity: VerifiedIdentity, raw_id: str, courses: CourseRepository,
) -> None:
    course = await get_course(raw_id, courses)
    course_id = course.id
    await courses.delete(course)
    logger.info(
        "Course deleted",
        extra={"user_id": identity.user_id, "course_id": course_id},
    )
