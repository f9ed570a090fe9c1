"""FastAPI server exposing rendered metrics on /metrics"""
import inspect
import time
from typing import Any, Awaitable, Callable, Union
from fastapi import Depends, FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import Config
from logging_config import get_logger, log_metrics_render
from middleware.security import BasicAuthGuard, RequestLoggingMiddleware


logger = get_logger(__name__)

CONTENT_TYPE = "text/plain; version=0.0.4"

RenderCallback = Callable[[Request, Any], Union[str, Awaitable[str]]]


class MetricsServer:
    """Serve the text produced by a render callback in Prometheus exposition format.

    The callback receives the incoming request and the options object given
    at construction and returns the body, either directly or as an awaitable.
    Any exception it raises becomes a 500 whose body is the error text.
    """

    def __init__(self, config: Config, render_metrics: RenderCallback, options: Any = None):
        self.config = config
        self.render_metrics = render_metrics
        self.options = options
        self.app = FastAPI(
            title=config.service_name,
            version=config.service_version,
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
            redirect_slashes=False
        )
        self.auth_guard = BasicAuthGuard(config.basic_auth_username, config.basic_auth_password)

        self._setup_middleware()
        self._setup_exception_handlers()
        self._setup_routes()

    def _setup_middleware(self):
        if self.config.enable_request_logging:
            self.app.add_middleware(RequestLoggingMiddleware)

    def _setup_exception_handlers(self):
        """404, 405 and 401 are answered with an empty body"""

        @self.app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))

    def _setup_routes(self):

        @self.app.api_route('/metrics', methods=self.config.metrics_methods, response_class=Response)
        async def get_metrics(request: Request, _auth: None = Depends(self.auth_guard)):
            """Serve metrics in Prometheus format"""
            return await self._render(request)

    async def _render(self, request: Request) -> Response:
        start_time = time.time()
        try:
            body = self.render_metrics(request, self.options)
            if inspect.isawaitable(body):
                body = await body
            if not isinstance(body, str):
                raise TypeError(f"render callback returned {type(body).__name__}, expected str")
        except Exception as e:
            logger.warning(
                "Internal server error",
                error=str(e),
                error_type=type(e).__name__,
                event_type="render_error",
                exc_info=True
            )
            return Response(content=str(e), status_code=500, media_type="text/plain")

        log_metrics_render(logger, len(body), time.time() - start_time)
        return Response(content=body, headers={"Content-Type": CONTENT_TYPE})

    def get_app(self) -> FastAPI:
        """Get the FastAPI application"""
        return self.app
