"""Security helpers for the metrics endpoint"""
import secrets
import time
from typing import Optional
from fastapi import Depends, HTTPException, Request, Response
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from logging_config import get_logger


logger = get_logger(__name__)

_basic = HTTPBasic(auto_error=False)


class BasicAuthGuard:
    """Dependency checking HTTP Basic credentials when they are configured"""

    def __init__(self, username: Optional[str] = None, password: Optional[str] = None):
        self.username = username
        self.password = password or ""

    @property
    def enabled(self) -> bool:
        return bool(self.username)

    def __call__(self, request: Request, credentials: Optional[HTTPBasicCredentials] = Depends(_basic)) -> None:
        if not self.enabled:
            return

        if credentials is not None:
            username_ok = secrets.compare_digest(credentials.username.encode(), self.username.encode())
            password_ok = secrets.compare_digest(credentials.password.encode(), self.password.encode())
            if username_ok and password_ok:
                return

        logger.warning(
            "Rejected metrics request",
            client_ip=request.client.host if request.client else None,
            credentials_supplied=credentials is not None,
            event_type="auth_failure"
        )
        raise HTTPException(status_code=401, headers={"WWW-Authenticate": "Basic"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Log HTTP requests"""
        start_time = time.time()

        logger.debug(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else None,
            event_type="http_request_start"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time_seconds=round(process_time, 3),
                event_type="http_request_error",
                exc_info=True
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "HTTP request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time_seconds=round(process_time, 3),
            client_ip=request.client.host if request.client else None,
            event_type="http_request_complete"
        )
        return response
