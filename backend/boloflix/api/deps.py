"""Shared API dependencies: single import point for all routers.

Services are built from the injected ``Settings`` rather than read from
module globals, so tests can override any of them::

    app.dependency_overrides[get_notifier] = lambda: Notifier(settings, transport)
"""

from fastapi import Depends

from boloflix.auth.dependencies import require_admin
from boloflix.config import Settings, get_settings
from boloflix.database import get_db
from boloflix.services.ai_proxy import AIProxy
from boloflix.services.notifier import Notifier


def get_notifier(settings: Settings = Depends(get_settings)) -> Notifier:
    return Notifier(settings)


def get_ai_proxy(settings: Settings = Depends(get_settings)) -> AIProxy:
    return AIProxy(settings)


__all__ = [
    "get_ai_proxy",
    "get_db",
    "get_notifier",
    "get_settings",
    "require_admin",
]
