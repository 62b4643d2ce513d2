# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Verifies Supabase access tokens (HS256, audience "authenticated").
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.auth.models import AuthUser
from app.dependencies import SettingsDep
from app.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through AuthenticationError too
security = HTTPBearer(auto_error=False)

TOKEN_AUDIENCE = "authenticated"


def decode_access_token(token: str, secret: str) -> AuthUser:
    """
    Verify a token and build the AuthUser it describes.

    Raises:
        AuthenticationError: If the token is expired, forged or incomplete
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            audience=TOKEN_AUDIENCE,
        )
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise AuthenticationError("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise AuthenticationError(f"Invalid token: {e}")

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid token: missing user ID")

    try:
        user_uuid = UUID(user_id)
    except ValueError:
        raise AuthenticationError("Invalid token: malformed user ID")

    return AuthUser(id=user_uuid, email=payload.get("email"), role=payload.get("role"))


async def get_current_user(
    settings: SettingsDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthUser:
    """
    Extract and validate the user from the Bearer token.

    Raises:
        AuthenticationError: 401 if the header is missing or the token invalid
    """
    if credentials is None:
        raise AuthenticationError("Missing bearer token")

    user = decode_access_token(credentials.credentials, settings.SUPABASE_JWT_SECRET)
    logger.debug(f"Authenticated user: {user.id}")
    return user
