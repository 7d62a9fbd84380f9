"""
Request Logging Middleware.

Drives RequestLogger hooks for every HTTP request and WebSocket
connection passing through the application.
"""

import inspect

from fastapi.exception_handlers import http_exception_handler
from loguru import logger
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import HTTPConnection, Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from starlette.websockets import WebSocketDisconnect

from request_logger.config import get_settings
from request_logger.logger import LoggerOptions, RequestLogger
from request_logger.utils.log import configure_logging
from request_logger.utils.payload import ApiResponse

log = logger.bind(module="RequestLogger")


def _is_json(headers: Headers) -> bool:
    content_type = headers.get("content-type", "").split(";")[0].strip().lower()
    return content_type == "application/json" or content_type.endswith("+json")


class RequestLoggingMiddleware:
    """
    Middleware to log HTTP requests and WebSocket upgrades.

    Implemented as pure ASGI middleware so WebSocket scopes and
    streamed bodies are seen too.
    """

    def __init__(self, app: ASGIApp, request_logger: RequestLogger | None = None):
        self.app = app
        self.request_logger = request_logger or RequestLogger()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        hooks = self.request_logger
        store = scope.setdefault("state", {})
        hooks.on_request(store)

        connection = HTTPConnection(scope)
        if scope["type"] == "http":
            wrapped_send = self._wrap_http_send(connection, store, send)
        else:
            wrapped_send = self._wrap_websocket_send(connection, store, send)

        hooks.on_before_handle(store)
        try:
            await self.app(scope, receive, wrapped_send)
        except WebSocketDisconnect:
            # Client closed the socket; not a request failure
            raise
        except Exception as exc:
            hooks.on_error(connection, store, exc)
            raise

    def _wrap_http_send(self, connection: HTTPConnection, store: dict, send: Send) -> Send:
        max_body_bytes = self.request_logger.options.max_body_bytes
        status_code: int | None = None
        inspect_body = False
        body = bytearray()

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code, inspect_body

            try:
                if message["type"] == "http.response.start":
                    status_code = message["status"]
                    inspect_body = _is_json(Headers(raw=message.get("headers", [])))

                elif message["type"] == "http.response.body":
                    if inspect_body:
                        chunk = message.get("body", b"")
                        if len(body) + len(chunk) > max_body_bytes:
                            inspect_body = False
                            body.clear()
                        else:
                            body.extend(chunk)

                    if not message.get("more_body", False):
                        response = ApiResponse.from_body(bytes(body), status_code)
                        self.request_logger.on_after_handle(connection, store, response)
            except Exception as e:
                log.warning(f"Failed to log response for {connection.url.path}: {e}")
            finally:
                await send(message)

        return send_wrapper

    def _wrap_websocket_send(self, connection: HTTPConnection, store: dict, send: Send) -> Send:
        async def send_wrapper(message: Message) -> None:
            try:
                if message["type"] == "websocket.accept":
                    self.request_logger.on_after_handle(connection, store)
            except Exception as e:
                log.warning(f"Failed to log websocket for {connection.url.path}: {e}")
            finally:
                await send(message)

        return send_wrapper


def _handles_http_exception(key) -> bool:
    # Status-code handlers receive HTTPExceptions, except 500 which
    # ServerErrorMiddleware runs outside the logging middleware
    if isinstance(key, int):
        return key != 500
    return isinstance(key, type) and issubclass(key, StarletteHTTPException)


def _wrap_exception_handler(request_logger: RequestLogger, handler):
    async def log_http_exception(request: Request, exc: StarletteHTTPException):
        """Log the HTTP error, then delegate to the wrapped handler."""
        store = request.scope.setdefault("state", {})
        request_logger.on_error(request, store, exc)

        response = handler(request, exc)
        if inspect.isawaitable(response):
            response = await response
        return response

    return log_http_exception


def create_logger(app, options: LoggerOptions | None = None):
    """
    Attach request logging to an application.

    Installs RequestLoggingMiddleware and routes HTTPExceptions raised by
    handlers through the error hook before the app's own handler builds
    the response. Must be called before the application starts.

    Args:
        app: FastAPI (or Starlette) application instance
        options: Logger options (defaults to environment settings)

    Returns:
        The same application instance
    """
    request_logger = RequestLogger(options or LoggerOptions.from_settings())
    app.add_middleware(RequestLoggingMiddleware, request_logger=request_logger)

    handlers = dict(app.exception_handlers)
    handlers.setdefault(StarletteHTTPException, http_exception_handler)
    for key, handler in handlers.items():
        if _handles_http_exception(key):
            app.add_exception_handler(key, _wrap_exception_handler(request_logger, handler))

    app.state.request_logger = request_logger
    return app


def setup_logging(app, options: LoggerOptions | None = None):
    """
    Configure loguru and request logging from environment settings.

    Args:
        app: FastAPI application instance
        options: Logger options overriding the settings-derived ones

    Returns:
        The same application instance
    """
    configure_logging(get_settings().log_level)
    options = options or LoggerOptions.from_settings()
    return create_logger(app, options)
