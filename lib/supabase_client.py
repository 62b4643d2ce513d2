# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# Holds the process-wide Supabase client. The server bootstrap calls
# connect() once before it starts listening; routers and services reuse the
# same client through get_client().
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   client.table("employees").select("*").execute()
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from supabase import Client, create_client

from app.exceptions import DatabaseConnectionError, DatabaseError

if TYPE_CHECKING:
    from app.config import Settings

logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a machine-readable code and, where possible, a hint on how to
    fix the problem.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Singleton holder for the Supabase client.

    All methods are class methods; the client is created by connect() and
    shared by every request afterwards.
    """

    _instance: Client | None = None

    @classmethod
    def connect(cls, settings: Settings) -> Client:
        """
        Create the client and prove the database is reachable.

        Runs a one-row query against settings.DATABASE_PROBE_TABLE.

        Returns:
            Client: The connected Supabase client

        Raises:
            DatabaseConnectionError: If the client can't be created or the
                probe query fails
        """
        try:
            client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)
        except Exception as e:
            raise DatabaseConnectionError(
                str(SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY",
                ))
            ) from e

        try:
            client.table(settings.DATABASE_PROBE_TABLE).select("id").limit(1).execute()
        except Exception as e:
            raise DatabaseConnectionError(
                str(SupabaseClientError(
                    message=f"Database probe failed: {e}",
                    code="PROBE_FAILED",
                    suggestion=f"Check that table '{settings.DATABASE_PROBE_TABLE}' exists and is reachable",
                ))
            ) from e

        cls._instance = client
        logger.info(f"Connected to database '{settings.DATABASE_NAME}'")
        return client

    @classmethod
    def get_client(cls) -> Client:
        """
        Get the connected client.

        Raises:
            DatabaseError: If connect() has not succeeded yet
        """
        if cls._instance is None:
            raise DatabaseError("Database connection has not been established")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the current client (used by tests)."""
        cls._instance = None
