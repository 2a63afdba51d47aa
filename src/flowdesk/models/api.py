"""API response schemas."""

from pydantic import BaseModel


class GitUser(BaseModel):
    name: str | None = None
    email: str | None = None
