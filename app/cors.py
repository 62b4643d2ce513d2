# =============================================================================
# app/cors.py - Origin Policy
# =============================================================================
# Decides which browser origins may call the API. The decision itself is a
# pure predicate; OriginPolicyMiddleware plugs it into Starlette's
# CORSMiddleware so allowed requests keep the standard CORS headers
# (credentials included) while rejected ones go through the error translator.
# =============================================================================

from collections.abc import Iterable

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

from app.exceptions import OriginNotAllowedError, error_response


def is_origin_allowed(
    origin: str | None,
    allowed_origins: Iterable[str],
    preview_suffix: str = "",
) -> bool:
    """
    Return True if a request from `origin` may proceed.

    - No origin (curl, mobile apps, server-to-server): allowed
    - Origin ending with the preview suffix: allowed
    - Origin listed verbatim in allowed_origins: allowed
    """
    if not origin:
        return True

    if preview_suffix and origin.endswith(preview_suffix):
        return True

    return origin in allowed_origins


class OriginPolicyMiddleware(CORSMiddleware):
    """
    CORSMiddleware with the origin check replaced by is_origin_allowed().

    Requests from a disallowed origin, preflight or not, are answered with
    the translated OriginNotAllowedError instead of reaching the app.
    """

    def __init__(
        self,
        app: ASGIApp,
        allowed_origins: list[str],
        preview_suffix: str = "",
    ) -> None:
        super().__init__(
            app,
            allow_origins=allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        self.allowed_origins = tuple(allowed_origins)
        self.preview_suffix = preview_suffix

    def is_allowed_origin(self, origin: str) -> bool:
        return is_origin_allowed(origin, self.allowed_origins, self.preview_suffix)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if not self.is_allowed_origin(origin):
                response = error_response(OriginNotAllowedError(origin))
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)
