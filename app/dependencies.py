# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request
from supabase import Client

from app.config import Settings
from lib.supabase_client import SupabaseClient


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_supabase_client() -> Client:
    """
    Get the process-wide Supabase client.

    Raises DatabaseError if the server has not connected yet.
    """
    return SupabaseClient.get_client()


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SupabaseDep = Annotated[Client, Depends(get_supabase_client)]
