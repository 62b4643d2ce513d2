# =============================================================================
# app/server.py - Server Bootstrap
# =============================================================================
# Startup is strictly two-phase:
#   1. connect to the database
#   2. bind the listening socket and serve
# If phase 1 fails the process exits with status 1 and never binds a port.
#
# Usage:
#   employee-assessment-api
#   python -m app.server
# =============================================================================

import logging
import socket
import sys

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError
from supabase import Client

from app.config import Settings, get_settings
from app.exceptions import DatabaseConnectionError
from app.main import configure_logging, create_app
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

EXIT_STARTUP_FAILURE = 1


def connect_database(settings: Settings) -> Client:
    """
    Phase 1: establish the process-wide database connection.

    Raises:
        DatabaseConnectionError: If the database can't be reached
    """
    logger.info(f"Connecting to database '{settings.DATABASE_NAME}'...")
    return SupabaseClient.connect(settings)


def log_startup_banner(settings: Settings) -> None:
    logger.info(f"Server is running at http://localhost:{settings.PORT}")
    logger.info(f"CORS enabled for: {settings.cors_description}")
    logger.info(f"Database: {settings.DATABASE_NAME}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")


def create_server(app: FastAPI, settings: Settings) -> tuple[uvicorn.Server, socket.socket]:
    """
    Phase 2a: bind HOST:PORT and announce.

    Returns the server and its bound socket; nothing is accepted until
    the server runs.
    """
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        access_log=False,
        log_config=None,
    )
    sock = config.bind_socket()
    log_startup_banner(settings)
    return uvicorn.Server(config), sock


def serve(app: FastAPI, settings: Settings) -> None:
    """
    Phase 2: bind, announce, then hand the socket to uvicorn.

    Blocks until the server shuts down.
    """
    server, sock = create_server(app, settings)
    server.run(sockets=[sock])


def main() -> None:
    """Start the API: connect first, listen only on success."""
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Failed to start server: invalid configuration\n{e}")
        logger.error("Please check your environment variables and .env file")
        sys.exit(EXIT_STARTUP_FAILURE)

    configure_logging(settings)

    try:
        connect_database(settings)
    except DatabaseConnectionError as e:
        logger.error(f"Failed to start server: {e.message}")
        logger.error("Please check your database connection and environment variables")
        sys.exit(EXIT_STARTUP_FAILURE)

    serve(create_app(settings), settings)


if __name__ == "__main__":
    main()
