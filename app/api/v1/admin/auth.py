# ============================================================================
# FILE: app/api/v1/admin/auth.py
# Owner login - exchanges the configured credentials for an access token
# ============================================================================
from fastapi import APIRouter, HTTPException, status
import logging

from app.api.dependencies import authenticate_admin, create_access_token
from app.config.settings import settings
from app.schemas.admin import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest):
    """
    Login with the owner email and password.

    Returns a JWT access token for the admin routes.
    """
    if not authenticate_admin(body.email, body.password):
        logger.warning(f"Failed admin login for {body.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": settings.ADMIN_EMAIL.strip().lower()})
    logger.info(f"Admin logged in: {body.email}")

    return TokenResponse(
        access_token=access_token,
        expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        email=settings.ADMIN_EMAIL
    )
