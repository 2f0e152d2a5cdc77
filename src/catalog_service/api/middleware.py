"""Request logging middleware.

Plain ASGI middleware rather than BaseHTTPMiddleware so the request body
can be observed without consuming it.
"""

import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class RequestLoggingMiddleware:
    """Log ``[METHOD] status path`` once each response has been sent."""

    def __init__(self, app: ASGIApp, log_bodies: bool = True) -> None:
        self.app = app
        self.log_bodies = log_bodies

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope["method"]
        path = scope["path"]
        capture = self.log_bodies and method in BODY_METHODS
        body = bytearray()
        status_code = 500

        async def receive_wrapper() -> Message:
            message = await receive()
            if capture and message["type"] == "http.request":
                body.extend(message.get("body", b""))
            return message

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive_wrapper, send_wrapper)
        finally:
            logger.info("[%s] %s %s", method, status_code, path)
            if capture and body:
                logger.info("Body: %s", body.decode("utf-8", errors="replace"))
