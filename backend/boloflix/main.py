"""BoloFlix FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from boloflix.api.v1.admin import router as admin_router
from boloflix.api.v1.ai import router as ai_router
from boloflix.api.v1.subscriptions import router as subscriptions_router
from boloflix.config import get_settings
from boloflix.errors import register_error_handlers

# Configure root logger so all boloflix.* loggers output to stderr.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    from boloflix.database import create_tables, engine

    # Startup
    missing = settings.missing_secrets()
    if missing:
        logger.warning("Starting without: %s", ", ".join(name.upper() for name in missing))
    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ensured")
    yield
    # Shutdown: dispose engine connections
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Backend for the BoloFlix cake subscription site.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(subscriptions_router)
app.include_router(admin_router)
app.include_router(ai_router)


@app.get("/", response_class=PlainTextResponse, tags=["root"])
async def root() -> str:
    """Liveness check."""
    return "🎂 Cozinha da BoloFlix está aberta e funcionando!"


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("boloflix.main:app", host=settings.host, port=settings.port)
