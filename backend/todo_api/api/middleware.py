"""Request Middleware — JSON body size limit.

Invariants:
    - A declared Content-Length over the limit gets 413 before the body is read
    - Bodies without Content-Length (chunked) are counted as they stream in and
      get 413 once the count passes the limit; the handler never runs
    - Accepted chunked bodies are replayed to the app unchanged

Design Decisions:
    - Pure ASGI middleware instead of BaseHTTPMiddleware: the limit has to sit
      on receive(), which BaseHTTPMiddleware does not expose
    - Chunked bodies buffered up to the limit only, so memory stays bounded
"""

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class BodySizeLimitMiddleware:
    """Reject oversized request bodies with 413."""

    def __init__(self, app: ASGIApp, *, max_body_bytes: int) -> None:
        self.app = app
        self._max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None:
            if declared.isdigit() and int(declared) > self._max_body_bytes:
                await self._reject(scope, receive, send)
                return
            await self.app(scope, receive, send)
            return

        buffered: list[Message] = []
        size = 0
        while True:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            size += len(message.get("body", b""))
            if size > self._max_body_bytes:
                await self._reject(scope, receive, send)
                return
            if not message.get("more_body", False):
                break

        async def replay() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content={"message": "Request body too large"},
        )
        await response(scope, receive, send)
