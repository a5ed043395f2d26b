"""Course Schemas — public shape of a Course."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CourseResponse(BaseModel):
    """Course as returned by GET /courses and GET /courses/{id}."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    title: str
    description: str
    estimated_time: str | None = None
    materials_needed: str | None = None
    user_id: int
