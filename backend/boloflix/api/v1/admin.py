"""Admin password gate."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from boloflix.api.deps import get_settings
from boloflix.auth.dependencies import verify_admin_password
from boloflix.auth.jwt import create_admin_token
from boloflix.config import Settings
from boloflix.schemas.admin import AdminVerifyRequest, AdminVerifyResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/verify",
    response_model=AdminVerifyResponse,
    responses={401: {"model": AdminVerifyResponse}},
    summary="Check the admin password and issue an access token",
)
async def verify_admin(
    body: AdminVerifyRequest,
    settings: Settings = Depends(get_settings),
) -> AdminVerifyResponse | JSONResponse:
    """Return ``{success: true, accessToken}`` when the password matches, else 401."""
    if not verify_admin_password(settings, body.password):
        logger.warning("Rejected admin password attempt")
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"success": False})

    logger.info("Admin access granted")
    return AdminVerifyResponse(
        success=True,
        access_token=create_admin_token(settings),
        token_type="bearer",
    )
