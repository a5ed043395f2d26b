"""Course Routes — anonymous reads, authenticated writes.

Invariants:
    - GET /courses and GET /courses/{id} never touch the authentication gate
    - POST/PUT/DELETE resolve the identity before anything else runs
    - PUT and DELETE answer 204 with an empty body

Design Decisions:
    - course_id arrives as a raw string; services.course_catalog decides
      whether it can name a course (non-numeric ids are 404, not 400)
"""

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from courses_api.api.dependencies import (
    get_course_repository, read_json_payload, require_identity,
)
from courses_api.core.domain_types import VerifiedIdentity
from courses_api.infrastructure.repositories import SqlCourseRepository
from courses_api.schemas.course import CourseResponse
from courses_api.schemas.message import MessageResponse
from courses_api.services import course_catalog

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
async def list_courses(
    courses: SqlCourseRepository = Depends(get_course_repository),
):
    rows = await course_catalog.list_courses(courses)
    return [CourseResponse.model_validate(row) for row in rows]


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(
    course_id: str,
    courses: SqlCourseRepository = Depends(get_course_repository),
):
    course = await course_catalog.get_course(course_id, courses)
    return CourseResponse.model_validate(course)


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_course(
    identity: VerifiedIdentity = Depends(require_identity),
    payload: dict[str, Any] = Depends(read_json_payload),
    courses: SqlCourseRepository = Depends(get_course_repository),
):
    await course_catalog.create_course(identity, payload, courses)
    return MessageResponse(message="Successfully created course.")


@router.put("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_course(
    course_id: str,
    identity: VerifiedIdentity = Depends(require_identity),
    payload: dict[str, Any] = Depends(read_json_payload),
    courses: SqlCourseRepository = Depends(get_course_repository),
):
    await course_catalog.update_course(identity, course_id, payload, courses)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(
    course_id: str,
    identity: VerifiedIdentity = Depends(require_identity),
    courses: SqlCourseRepository = Depends(get_course_repository),
):
    await course_catalog.delete_course(identity, course_id, courses)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
