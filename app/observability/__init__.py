"""Logging, metrics and health checks for the employee service."""

from .logging import (
    configure_logging,
    LoggingMiddleware,
    set_correlation_id,
    generate_correlation_id,
    CORRELATION_HEADER,
)

from .metrics import (
    MetricsMiddleware,
    track_db_operation,
    set_service_info,
    get_metrics,
    get_metrics_content_type,
)

from .health import (
    HealthStatus,
    HealthCheck,
    HealthReport,
    HealthChecker,
    database_health_check,
)

__all__ = [
    # Logging
    "configure_logging",
    "LoggingMiddleware",
    "set_correlation_id",
    "generate_correlation_id",
    "CORRELATION_HEADER",

    # Metrics
    "MetricsMiddleware",
    "track_db_operation",
    "set_service_info",
    "get_metrics",
    "get_metrics_content_type",

    # Health
    "HealthStatus",
    "HealthCheck",
    "HealthReport",
    "HealthChecker",
    "database_health_check",
]
