"""Schemas for account settings endpoints."""

from pydantic import BaseModel


class UserSettings(BaseModel):
    """Account details shown on the settings page."""

    id: int
    username: str
    email: str

    model_config = {"from_attributes": True}


class DeleteAccountResponse(BaseModel):
    message: str
    deleted: bool
