"""Pydantic v2 request/response schemas for subscription endpoints.

Request bodies arrive in camelCase from the web client (``customerName``)
and are exposed here under the store's snake_case names. Responses are
plain snake_case, matching the table columns.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    PlainSerializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

# Stored as NUMERIC(10, 2); the web client reads it back as a JSON number.
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class _SubscriptionInput(BaseModel):
    """camelCase input; blank optional text is treated as absent."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @field_validator("customer_email", "flavor_preference", mode="before", check_fields=False)
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SubscriptionCreate(_SubscriptionInput):
    """Checkout payload for a new subscription."""

    customer_name: str = Field(..., min_length=1, max_length=255)
    customer_email: EmailStr | None = None
    plan_title: str = Field(..., min_length=1, max_length=100)
    plan_price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    flavor_preference: str | None = None
    delivery_day: str = Field(..., min_length=1, max_length=50)
    delivery_time: str = Field(..., min_length=1, max_length=50)


class SubscriptionUpdate(_SubscriptionInput):
    """Partial patch of the editable fields. All fields optional.

    ``id`` and ``created_at`` are not part of the schema, so they can never
    be patched; unknown keys are dropped. A blank email or flavor clears it.
    """

    customer_name: str | None = Field(None, min_length=1, max_length=255)
    customer_email: EmailStr | None = None
    plan_title: str | None = Field(None, min_length=1, max_length=100)
    plan_price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    flavor_preference: str | None = None
    delivery_day: str | None = Field(None, min_length=1, max_length=50)
    delivery_time: str | None = Field(None, min_length=1, max_length=50)

    @model_validator(mode="after")
    def _required_columns_not_null(self) -> "SubscriptionUpdate":
        for name in ("customer_name", "plan_title", "plan_price", "delivery_day", "delivery_time"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class SubscriptionResponse(BaseModel):
    """A persisted subscription row."""

    id: int
    created_at: datetime
    customer_name: str
    customer_email: str | None = None
    plan_title: str
    plan_price: Price
    flavor_preference: str | None = None
    delivery_day: str
    delivery_time: str

    model_config = ConfigDict(from_attributes=True)


class SubscriptionEnvelope(BaseModel):
    """Confirmation message plus the affected row."""

    message: str
    data: SubscriptionResponse


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
