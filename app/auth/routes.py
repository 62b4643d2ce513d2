# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Mounted at /api/auth.
# Sign-in is delegated to Supabase Auth; tokens it issues are verified by
# app.auth.dependencies.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, LoginRequest, LoginResponse, UserResponse
from app.dependencies import SupabaseDep
from app.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, client: SupabaseDep) -> LoginResponse:
    """
    Sign in with email and password.

    Returns:
        LoginResponse: Access token to send as `Authorization: Bearer <token>`

    Raises:
        401: If the credentials are rejected
    """
    try:
        result = client.auth.sign_in_with_password(
            {"email": request.email, "password": request.password}
        )
    except Exception as e:
        logger.warning(f"Login failed for {request.email}: {e}")
        raise AuthenticationError("Invalid email or password") from e

    session = result.session
    if session is None or result.user is None:
        raise AuthenticationError("Invalid email or password")

    return LoginResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_in=session.expires_in,
        user=AuthUser(id=result.user.id, email=result.user.email, role=result.user.role),
    )


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    client: SupabaseDep,
    user: AuthUser = Depends(get_current_user),
) -> UserResponse:
    """
    Get the current user's profile.

    Falls back to the token claims when no `users` row exists yet.
    """
    try:
        response = (
            client.table("users")
            .select("*")
            .eq("id", str(user.id))
            .limit(1)
            .execute()
        )
        if response.data:
            row = response.data[0]
            return UserResponse(
                id=user.id,
                email=row.get("email") or user.email,
                full_name=row.get("full_name"),
                role=row.get("role") or user.role,
            )
    except Exception as e:
        logger.warning(f"Could not fetch user profile: {e}")

    return UserResponse(id=user.id, email=user.email, role=user.role)


@router.get("/verify")
async def verify_token(user: AuthUser = Depends(get_current_user)) -> dict:
    """Confirm that the current token is valid."""
    return {
        "valid": True,
        "user_id": str(user.id),
        "email": user.email,
    }
