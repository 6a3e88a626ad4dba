"""AI-generated marketing content: one function per generator.

Each function renders its prompt, asks the proxy for the matching shape and
returns the parsed result. They are independent single round trips.
"""

import logging

from boloflix.errors import UpstreamError
from boloflix.schemas.ai import (
    AvailabilityRequest,
    BusinessModelCanvas,
    CakeCreation,
    CakeOfTheMonth,
    DeliveryAvailability,
    GeneratedCake,
    QuizAnswers,
    TasteProfile,
    Testimonial,
    WelcomeMessage,
    WelcomeRequest,
)
from boloflix.services import prompts
from boloflix.services.ai_proxy import AIProxy

logger = logging.getLogger(__name__)

UNSPECIFIED_PART = "surpresa do confeiteiro"


async def generate_taste_profile(proxy: AIProxy, answers: QuizAnswers) -> TasteProfile:
    prompt = prompts.TASTE_PROFILE.format(vibe=answers.vibe, moment=answers.moment, fruits=answers.fruits)
    return await proxy.complete(prompt, TasteProfile, context="gerar seu perfil de sabor")


async def check_delivery_availability(proxy: AIProxy, request: AvailabilityRequest) -> DeliveryAvailability:
    """Simulated capacity check; nothing is reserved."""
    prompt = prompts.DELIVERY_AVAILABILITY.format(day=request.day, time=request.time)
    return await proxy.complete(prompt, DeliveryAvailability, context="verificar a disponibilidade")


async def generate_welcome_message(proxy: AIProxy, request: WelcomeRequest) -> WelcomeMessage:
    """Personalized welcome text for a new subscriber.

    Never fails: when the model is unavailable a fixed message is used so the
    checkout flow is not blocked.
    """
    values = {
        "customer_name": request.customer_name,
        "plan_title": request.plan_title,
        "delivery_day": request.delivery_day,
    }
    try:
        return await proxy.complete(
            prompts.WELCOME_MESSAGE.format(**values),
            WelcomeMessage,
            context="gerar a mensagem de boas-vindas",
        )
    except UpstreamError:
        logger.warning("Using fallback welcome message for %s", request.customer_name)
        return WelcomeMessage(message=prompts.WELCOME_FALLBACK.format(**values))


async def generate_investor_pitch(proxy: AIProxy) -> str:
    return await proxy.complete(prompts.INVESTOR_PITCH, context="gerar o pitch para investidores")


async def generate_business_model_canvas(proxy: AIProxy) -> BusinessModelCanvas:
    return await proxy.complete(
        prompts.BUSINESS_MODEL_CANVAS,
        BusinessModelCanvas,
        context="gerar o Business Model Canvas",
    )


async def generate_financial_estimate(proxy: AIProxy) -> str:
    return await proxy.complete(prompts.FINANCIAL_ESTIMATE, context="gerar a estimativa financeira")


async def generate_testimonials(proxy: AIProxy) -> list[Testimonial]:
    return await proxy.complete(prompts.TESTIMONIALS, list[Testimonial], context="gerar os depoimentos")


async def generate_custom_cake(proxy: AIProxy, creation: CakeCreation) -> GeneratedCake:
    prompt = prompts.CUSTOM_CAKE.format(
        base=creation.base or UNSPECIFIED_PART,
        filling=creation.filling or UNSPECIFIED_PART,
        topping=creation.topping or UNSPECIFIED_PART,
    )
    return await proxy.complete(prompt, GeneratedCake, context="gerar a descrição do seu bolo")


async def generate_cake_of_the_month(proxy: AIProxy) -> CakeOfTheMonth:
    return await proxy.complete(prompts.CAKE_OF_THE_MONTH, CakeOfTheMonth, context="gerar o bolo do mês")
