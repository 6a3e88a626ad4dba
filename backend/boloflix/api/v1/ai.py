"""AI-backed marketing endpoints used by the landing page."""

from fastapi import APIRouter, Depends

from boloflix.api.deps import get_ai_proxy
from boloflix.schemas.ai import (
    AvailabilityRequest,
    CakeCreation,
    CakeOfTheMonthResponse,
    CanvasResponse,
    DeliveryAvailability,
    EstimateResponse,
    GeneratedCakeResponse,
    PitchResponse,
    QuizAnswers,
    TasteProfile,
    TestimonialsResponse,
    WelcomeMessage,
    WelcomeRequest,
)
from boloflix.services import marketing
from boloflix.services.ai_proxy import AIProxy

router = APIRouter(tags=["ai"])


@router.post("/taste-profile", response_model=TasteProfile, summary="Summarize quiz answers")
async def taste_profile(body: QuizAnswers, proxy: AIProxy = Depends(get_ai_proxy)) -> TasteProfile:
    return await marketing.generate_taste_profile(proxy, body)


@router.post(
    "/check-availability",
    response_model=DeliveryAvailability,
    summary="Simulate a delivery slot check",
)
async def check_availability(
    body: AvailabilityRequest, proxy: AIProxy = Depends(get_ai_proxy)
) -> DeliveryAvailability:
    return await marketing.check_delivery_availability(proxy, body)


@router.post("/welcome-message", response_model=WelcomeMessage, summary="Welcome a new subscriber")
async def welcome_message(body: WelcomeRequest, proxy: AIProxy = Depends(get_ai_proxy)) -> WelcomeMessage:
    """Always 200: falls back to a fixed message if the model is unavailable."""
    return await marketing.generate_welcome_message(proxy, body)


@router.get("/investor-pitch", response_model=PitchResponse)
async def investor_pitch(proxy: AIProxy = Depends(get_ai_proxy)) -> PitchResponse:
    return PitchResponse(pitch=await marketing.generate_investor_pitch(proxy))


@router.get("/business-model-canvas", response_model=CanvasResponse)
async def business_model_canvas(proxy: AIProxy = Depends(get_ai_proxy)) -> CanvasResponse:
    return CanvasResponse(canvas=await marketing.generate_business_model_canvas(proxy))


@router.get("/financial-estimate", response_model=EstimateResponse)
async def financial_estimate(proxy: AIProxy = Depends(get_ai_proxy)) -> EstimateResponse:
    return EstimateResponse(estimate=await marketing.generate_financial_estimate(proxy))


@router.get("/testimonials", response_model=TestimonialsResponse)
async def testimonials(proxy: AIProxy = Depends(get_ai_proxy)) -> TestimonialsResponse:
    return TestimonialsResponse(testimonials=await marketing.generate_testimonials(proxy))


@router.post("/custom-cake-description", response_model=GeneratedCakeResponse)
async def custom_cake_description(
    body: CakeCreation, proxy: AIProxy = Depends(get_ai_proxy)
) -> GeneratedCakeResponse:
    return GeneratedCakeResponse(cake=await marketing.generate_custom_cake(proxy, body))


@router.get("/cake-of-the-month", response_model=CakeOfTheMonthResponse)
async def cake_of_the_month(proxy: AIProxy = Depends(get_ai_proxy)) -> CakeOfTheMonthResponse:
    return CakeOfTheMonthResponse(cake=await marketing.generate_cake_of_the_month(proxy))
