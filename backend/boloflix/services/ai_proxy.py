"""Thin client around the generative model used for marketing copy.

A call sends one prompt and returns either the raw text or, when a response
shape is given, the reply validated against that shape. Any provider error
or unparsable reply becomes an ``UpstreamError`` carrying a friendly message;
the provider detail only goes to the log.
"""

import logging
import os
import re
from typing import Any, TypeVar, overload

import litellm
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_litellm import ChatLiteLLM
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from boloflix.config import Settings
from boloflix.errors import UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL)

RATE_LIMIT_MESSAGE = (
    "Parece que atingimos nosso limite de doçura por agora! "
    "Por favor, tente novamente mais tarde."
)


def kitchen_error_message(context: str) -> str:
    """Client-facing message for a failed generation."""
    return f"Oops! Tivemos um probleminha na cozinha ao {context}. Por favor, tente novamente."


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```), if any."""
    match = _FENCE_RE.match(text)
    return match.group(1) if match else text.strip()


def _is_rate_limited(exc: Exception) -> bool:
    return isinstance(exc, litellm.RateLimitError) or getattr(exc, "status_code", None) == 429


def build_llm(settings: Settings) -> ChatLiteLLM:
    """Create the LiteLLM chat model configured by ``settings``."""
    # LiteLLM reads provider keys from the environment
    if settings.gemini_api_key:
        os.environ["GEMINI_API_KEY"] = settings.gemini_api_key

    return ChatLiteLLM(
        model=settings.default_llm_model,
        temperature=settings.llm_temperature,
        max_tokens=2048,
    )


class AIProxy:
    """Forwards prompts to the configured chat model.

    Args:
        settings: Application settings (model name, API key).
        llm: Chat model to use. Built from ``settings`` when omitted; tests
            pass a fake.
    """

    def __init__(self, settings: Settings, llm: BaseChatModel | None = None) -> None:
        self._settings = settings
        self._llm = llm if llm is not None else build_llm(settings)

    @overload
    async def complete(self, prompt: str, shape: None = None, *, context: str = ...) -> str: ...

    @overload
    async def complete(self, prompt: str, shape: type[T], *, context: str = ...) -> T: ...

    async def complete(self, prompt: str, shape: Any = None, *, context: str = "preparar sua resposta") -> Any:
        """Send ``prompt`` and return the reply.

        Args:
            prompt: Fully rendered prompt text.
            shape: Optional type (pydantic model, ``list[Model]``...) the reply
                must parse as. JSON output is requested from the model when set.
            context: Short description of the action, used in the error message.

        Raises:
            UpstreamError: If the model call fails or the reply does not match
                ``shape``.
        """
        call_kwargs: dict[str, Any] = {}
        if shape is not None:
            call_kwargs["response_format"] = {"type": "json_object"}

        try:
            reply = await self._llm.ainvoke([HumanMessage(content=prompt)], **call_kwargs)
        except Exception as exc:
            if _is_rate_limited(exc):
                logger.warning("LLM rate limit hit while trying to %s: %s", context, exc)
                raise UpstreamError(RATE_LIMIT_MESSAGE) from exc
            logger.exception("LLM call failed while trying to %s", context)
            raise UpstreamError(kitchen_error_message(context)) from exc

        text = reply.content if isinstance(reply.content, str) else str(reply.content)
        if shape is None:
            return text.strip()

        try:
            return TypeAdapter(shape).validate_json(strip_code_fences(text))
        except PydanticValidationError as exc:
            logger.error("LLM reply did not match %s while trying to %s: %r", shape, context, text[:500])
            raise UpstreamError(kitchen_error_message(context)) from exc
