"""Root — welcome message for the API."""

from fastapi import APIRouter

from courses_api.schemas.message import MessageResponse

router = APIRouter(tags=["root"])


@router.get("/", response_model=MessageResponse)
async def welcome():
    return MessageResponse(message="Welcome to the Course Catalog API")
