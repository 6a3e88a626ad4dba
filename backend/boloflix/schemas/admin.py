"""Schemas for the admin password gate."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AdminVerifyRequest(BaseModel):
    """Password typed into the admin page."""

    password: str = Field(..., min_length=1)


class AdminVerifyResponse(BaseModel):
    """Outcome of the password check.

    ``accessToken`` is only present on success and must be sent as a Bearer
    token to the admin endpoints.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    access_token: str | None = None
    token_type: str | None = None
