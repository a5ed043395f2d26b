"""Message Schema — plain acknowledgement body shared by several endpoints."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
