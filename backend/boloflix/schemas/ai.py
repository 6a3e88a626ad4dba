"""Schemas for the AI-backed marketing endpoints.

The same models describe the JSON shape requested from the LLM and the body
returned to the web client, so field names are camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class QuizAnswers(_CamelModel):
    """Answers from the onboarding quiz."""

    vibe: str = Field(..., min_length=1)
    moment: str = Field(..., min_length=1)
    fruits: str = Field(..., min_length=1)


class AvailabilityRequest(_CamelModel):
    day: str = Field(..., min_length=1)
    time: str = Field(..., min_length=1)


class WelcomeRequest(_CamelModel):
    plan_title: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    delivery_day: str = Field(..., min_length=1)


class CakeCreation(_CamelModel):
    """A cake assembled in the "create your own" section. Any part may be unset."""

    base: str | None = None
    filling: str | None = None
    topping: str | None = None


# ---------------------------------------------------------------------------
# Shapes requested from the LLM
# ---------------------------------------------------------------------------


class TasteProfile(_CamelModel):
    profile_description: str
    cake_suggestion: str


class DeliveryAvailability(_CamelModel):
    available: bool
    message: str


class WelcomeMessage(_CamelModel):
    message: str


class BusinessModelCanvas(_CamelModel):
    """The nine blocks of a Business Model Canvas, each a short list."""

    key_partners: list[str]
    key_activities: list[str]
    key_resources: list[str]
    value_propositions: list[str]
    customer_relationships: list[str]
    channels: list[str]
    customer_segments: list[str]
    cost_structure: list[str]
    revenue_streams: list[str]


class Testimonial(_CamelModel):
    quote: str
    author: str
    favorite_cake: str


class GeneratedCake(_CamelModel):
    cake_name: str
    description: str


class CakeOfTheMonth(_CamelModel):
    cake_name: str
    description: str
    flavor_notes: list[str]


# ---------------------------------------------------------------------------
# Response wrappers
# ---------------------------------------------------------------------------


class PitchResponse(_CamelModel):
    pitch: str


class CanvasResponse(_CamelModel):
    canvas: BusinessModelCanvas


class EstimateResponse(_CamelModel):
    estimate: str


class TestimonialsResponse(_CamelModel):
    testimonials: list[Testimonial]


class GeneratedCakeResponse(_CamelModel):
    cake: GeneratedCake


class CakeOfTheMonthResponse(_CamelModel):
    cake: CakeOfTheMonth
