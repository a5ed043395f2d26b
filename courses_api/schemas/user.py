"""User Schemas — public projection of a User (password excluded)."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserResponse(BaseModel):
    """User as returned by GET /users."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    first_name: str
    last_name: str
    email_address: str
