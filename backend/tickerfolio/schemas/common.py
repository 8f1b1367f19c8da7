"""Common response schemas used across the API."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Simple message response, also the body of every error response.

    Attributes:
        message: The response message
    """

    message: str
