"""Domain exceptions and the handlers that turn them into JSON responses.

Every error reaches the client as ``{"message": "..."}``. Upstream detail
(database driver errors, LLM provider errors) is logged, never returned.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BoloFlixError(Exception):
    """Base class for errors with a client-safe message and HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Erro interno no servidor."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BoloFlixError):
    """Required input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Dados inválidos."


class AuthenticationError(BoloFlixError):
    """Admin credentials were rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Acesso não autorizado."


class NotFoundError(BoloFlixError):
    """The requested row does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Assinatura não encontrada."


class PersistenceError(BoloFlixError):
    """The database rejected or failed to execute a statement."""

    default_message = "Erro ao acessar o banco de dados."


class UpstreamError(BoloFlixError):
    """An external service (LLM, email) failed or returned unusable data."""

    default_message = "Oops! Tivemos um probleminha na cozinha. Por favor, tente novamente."


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Build a readable message naming each offending body field."""
    missing: list[str] = []
    invalid: list[str] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        if error.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append(f"{field} ({error.get('msg', 'inválido')})")

    parts = []
    if missing:
        parts.append("Campos obrigatórios ausentes: " + ", ".join(missing))
    if invalid:
        parts.append("Campos inválidos: " + ", ".join(invalid))
    return ". ".join(parts) or "Dados inválidos."


async def boloflix_error_handler(request: Request, exc: BoloFlixError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": _format_validation_errors(exc)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (auth, 404 routes) with the same body shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain, HTTP and request-validation handlers to ``app``."""
    app.add_exception_handler(BoloFlixError, boloflix_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
