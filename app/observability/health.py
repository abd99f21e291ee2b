"""
Health checks for the employee service

Aggregates named async checks into a single report for the /health endpoint.
"""
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession


class HealthStatus(str, Enum):
    """Health check status"""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class HealthCheck:
    """Individual health check result"""
    name: str
    status: HealthStatus
    message: str
    duration_ms: float = 0.0
    details: Optional[Dict[str, Any]] = None


@dataclass
class HealthReport:
    """Overall health report"""
    status: HealthStatus
    service: str
    version: str
    uptime_seconds: float
    checks: List[HealthCheck]

    def to_dict(self) -> Dict[str, Any]:
        report = asdict(self)
        report["status"] = self.status.value
        for check in report["checks"]:
            check["status"] = check["status"].value
        return report


CheckFunc = Callable[[], Awaitable[HealthCheck]]


class HealthChecker:
    """Runs registered checks and folds them into one status"""

    def __init__(self, service_name: str, service_version: str = "0.1.0"):
        self.service_name = service_name
        self.service_version = service_version
        self.start_time = time.time()

    async def run_check(self, name: str, check_func: CheckFunc) -> HealthCheck:
        start_time = time.time()

        try:
            result = await check_func()
        except Exception as e:
            result = HealthCheck(
                name=name,
                status=HealthStatus.UNHEALTHY,
                message=f"Check failed: {str(e)}",
                details={"error": str(e), "error_type": type(e).__name__}
            )

        result.duration_ms = round((time.time() - start_time) * 1000, 2)
        return result

    async def get_health_report(self, checks: Dict[str, CheckFunc]) -> HealthReport:
        results = [await self.run_check(name, func) for name, func in checks.items()]

        return HealthReport(
            status=self._determine_overall_status(results),
            service=self.service_name,
            version=self.service_version,
            uptime_seconds=round(time.time() - self.start_time, 2),
            checks=results,
        )

    def _determine_overall_status(self, checks: List[HealthCheck]) -> HealthStatus:
        statuses = [check.status for check in checks]

        if HealthStatus.UNHEALTHY in statuses:
            return HealthStatus.UNHEALTHY
        if HealthStatus.DEGRADED in statuses:
            return HealthStatus.DEGRADED
        return HealthStatus.HEALTHY


def database_health_check(session: AsyncSession) -> CheckFunc:
    """Build a check that runs SELECT 1 on the given session"""
    async def check() -> HealthCheck:
        await session.execute(text("SELECT 1"))
        return HealthCheck(
            name="database",
            status=HealthStatus.HEALTHY,
            message="Database connection successful",
        )
    return check
