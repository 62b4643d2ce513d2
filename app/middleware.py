# =============================================================================
# app/middleware.py - Gateway Middleware
# =============================================================================
# - AccessLogMiddleware: one "dev"-style log line per request
# - ErrorTranslationMiddleware: last-resort conversion of failures to JSON
# - BodySizeLimitMiddleware: rejects oversized bodies before routing
#
# Order is set in app/main.py; the origin policy lives in app/cors.py.
# =============================================================================

import logging
import time

from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.exceptions import PayloadTooLargeError, error_response, log_unrendered_error

access_logger = logging.getLogger("app.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    Log every request as `METHOD path STATUS latency ms - length`.

    Purely a side effect; the response is passed through untouched.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        access_logger.info(
            "%s %s %d %.3f ms - %s",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            response.headers.get("content-length", "-"),
        )
        return response


class ErrorTranslationMiddleware:
    """
    Catch anything the routers and exception handlers did not handle.

    Sits inside the origin policy so error responses still carry CORS headers.
    Once the response has started nothing more can be sent; the failure is
    only logged.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as exc:
            if response_started:
                log_unrendered_error(exc)
                return
            response = error_response(exc)
            await response(scope, receive, send)


class BodySizeLimitMiddleware:
    """
    Reject request bodies larger than `max_body_size` bytes.

    A declared Content-Length over the limit fails immediately. Otherwise the
    body is buffered up to the limit and replayed to the app, so no route sees
    a partial oversized body.
    """

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_size:
            raise PayloadTooLargeError(self.max_body_size)

        chunks: list[bytes] = []
        size = 0
        pending: Message | None = None

        while True:
            message = await receive()
            if message["type"] != "http.request":
                # Client went away; hand the disconnect on after the body.
                pending = message
                break
            chunk = message.get("body", b"")
            size += len(chunk)
            if size > self.max_body_size:
                raise PayloadTooLargeError(self.max_body_size)
            chunks.append(chunk)
            if not message.get("more_body", False):
                break

        body = b"".join(chunks)
        body_sent = False

        async def replay_receive() -> Message:
            nonlocal body_sent, pending
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            if pending is not None:
                message, pending = pending, None
                return message
            return await receive()

        await self.app(scope, replay_receive, send)
