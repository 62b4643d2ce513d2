# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Token verification and the /api/auth routes, backed by Supabase Auth.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
# =============================================================================

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, UserResponse

__all__ = [
    "get_current_user",
    "AuthUser",
    "UserResponse",
]
