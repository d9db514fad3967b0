"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class RequestIdentity(BaseModel):
    """
    Identity of the caller for the request in flight.

    Attached to ``request.state.identity`` by the session guard once the
    credential has been refreshed and the account checked, and read by
    route handlers to decide whose data they touch.
    """

    user_id: str = Field(..., description="ID of the authenticated user")

    model_config = {"frozen": True}


class SearchQuery(BaseModel):
    """Filter and pagination options shared by the search endpoints."""

    name: str | None = Field(None, description="Case-insensitive substring of the name")
    tag: str | None = Field(None, description="Only records carrying this tag")
    author: str | None = Field(None, description="Only records created by this user")
    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    limit: int = Field(default=20, ge=1, le=100, description="Records per page")
