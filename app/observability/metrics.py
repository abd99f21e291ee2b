"""
Prometheus metrics for the employee service

Covers HTTP request metrics and database operation metrics, collected in a
registry private to this service.
"""
import re
import time
from functools import wraps
from prometheus_client import (
    Counter, Histogram, Gauge, Info,
    CollectorRegistry, generate_latest,
    CONTENT_TYPE_LATEST
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

service_registry = CollectorRegistry()

# HTTP Metrics
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code', 'service'],
    registry=service_registry
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint', 'service'],
    registry=service_registry
)

http_requests_in_progress = Gauge(
    'http_requests_in_progress',
    'HTTP requests currently being processed',
    ['service'],
    registry=service_registry
)

# Database Metrics
db_operations_total = Counter(
    'db_operations_total',
    'Total database operations',
    ['operation', 'table', 'service'],
    registry=service_registry
)

db_operation_duration_seconds = Histogram(
    'db_operation_duration_seconds',
    'Database operation duration in seconds',
    ['operation', 'table', 'service'],
    registry=service_registry
)

service_info = Info(
    'service',
    'Service information',
    registry=service_registry
)

errors_total = Counter(
    'errors_total',
    'Total errors',
    ['error_type', 'service'],
    registry=service_registry
)

_ID_SEGMENT = re.compile(r'/\d+')


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect HTTP metrics"""

    def __init__(self, app, service_name: str):
        super().__init__(app)
        self.service_name = service_name

    async def dispatch(self, request: Request, call_next):
        if request.url.path == "/metrics":
            return await call_next(request)

        endpoint = self._get_endpoint_pattern(request)
        http_requests_in_progress.labels(service=self.service_name).inc()
        start_time = time.time()

        try:
            response = await call_next(request)

            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=response.status_code,
                service=self.service_name
            ).inc()

            return response

        except Exception as e:
            errors_total.labels(
                error_type=type(e).__name__,
                service=self.service_name
            ).inc()
            raise

        finally:
            http_request_duration_seconds.labels(
                method=request.method,
                endpoint=endpoint,
                service=self.service_name
            ).observe(time.time() - start_time)
            http_requests_in_progress.labels(service=self.service_name).dec()

    def _get_endpoint_pattern(self, request: Request) -> str:
        """Collapse numeric path segments so /employees/7 becomes /employees/{id}"""
        return _ID_SEGMENT.sub('/{id}', request.url.path)


def track_db_operation(operation: str, table: str, service_name: str):
    """Decorator to count and time async database operations"""
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                errors_total.labels(
                    error_type=f"db_{type(e).__name__}",
                    service=service_name
                ).inc()
                raise

            db_operations_total.labels(
                operation=operation,
                table=table,
                service=service_name
            ).inc()
            db_operation_duration_seconds.labels(
                operation=operation,
                table=table,
                service=service_name
            ).observe(time.time() - start_time)

            return result

        return wrapper
    return decorator


def set_service_info(service_name: str, version: str, **kwargs):
    service_info.info({
        'service': service_name,
        'version': version,
        **kwargs
    })


def get_metrics() -> str:
    """Get metrics in Prometheus format"""
    return generate_latest(service_registry).decode('utf-8')


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
