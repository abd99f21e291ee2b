"""
Structured logging for the employee service

This module provides:
- JSON formatting (console rendering for local runs)
- Correlation IDs per request
- Service context on every entry
- Request logging middleware
"""
import sys
import time
import uuid
import logging
import structlog
from typing import Optional
from contextvars import ContextVar
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Context variables for request tracking
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

CORRELATION_HEADER = "x-correlation-id"


def configure_logging(
    service_name: str,
    environment: str = "development",
    log_level: str = "INFO",
    json_logs: bool = True,
    include_stdlib: bool = True
):
    """Configure structured logging for the service"""

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_context(service_name, environment),
        add_correlation_id,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper())
        ),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if include_stdlib:
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, log_level.upper()),
        )

        # Reduce noise from some libraries
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)


def add_service_context(service_name: str, environment: str):
    """Add service context to all log entries"""
    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        event_dict["environment"] = environment
        return event_dict
    return processor


def add_correlation_id(logger, method_name, event_dict):
    """Add correlation ID to log entries"""
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: str):
    correlation_id_var.set(correlation_id)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request and tag it with a correlation ID"""

    def __init__(self, app, service_name: str):
        super().__init__(app)
        self.service_name = service_name
        self.logger = structlog.get_logger()

    async def dispatch(self, request: Request, call_next):
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or
            request.headers.get("x-request-id") or
            generate_correlation_id()
        )

        set_correlation_id(correlation_id)

        start_time = time.time()

        self.logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            query_params=dict(request.query_params),
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id

            duration = time.time() - start_time
            self.logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
                response_size=response.headers.get("content-length"),
            )

            return response

        except Exception as e:
            duration = time.time() - start_time
            self.logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round(duration * 1000, 2),
                error_type=type(e).__name__,
                error_message=str(e),
                exc_info=True,
            )
            raise
