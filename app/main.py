"""Employee API - CRUD operations for employees."""

from contextlib import asynccontextmanager
from typing import Annotated, List

import structlog
from fastapi import Depends, FastAPI, Path, Request, status
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app import __version__
from app.config import ENVIRONMENT, LOG_JSON, LOG_LEVEL, SERVICE_NAME
from app.db import get_db, init_db
from app.exceptions import EmployeeNotFoundError
from app.observability import (
    HealthChecker,
    HealthStatus,
    LoggingMiddleware,
    MetricsMiddleware,
    configure_logging,
    database_health_check,
    get_metrics,
    get_metrics_content_type,
    set_service_info,
)
from app.repository import EmployeeRepository
from app.schemas import EmployeeIn, EmployeeOut
from app.service import EmployeeService

logger = structlog.get_logger(__name__)

# Bounds of the employees.id Integer column; anything outside is a 422.
EMPLOYEE_ID_MIN = -2**31
EMPLOYEE_ID_MAX = 2**31 - 1

EmployeeId = Annotated[int, Path(ge=EMPLOYEE_ID_MIN, le=EMPLOYEE_ID_MAX)]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    configure_logging(
        service_name=SERVICE_NAME,
        environment=ENVIRONMENT,
        log_level=LOG_LEVEL,
        json_logs=LOG_JSON,
    )
    set_service_info(SERVICE_NAME, app.version, environment=ENVIRONMENT)

    logger.info("Starting employee-api")
    await init_db()
    yield
    logger.info("Shutting down employee-api")


app = FastAPI(
    title=SERVICE_NAME,
    description="Employee management service with full CRUD operations",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(LoggingMiddleware, service_name=SERVICE_NAME)
app.add_middleware(MetricsMiddleware, service_name=SERVICE_NAME)

health_checker = HealthChecker(service_name=SERVICE_NAME, service_version=__version__)


@app.exception_handler(EmployeeNotFoundError)
async def employee_not_found_handler(request: Request, exc: EmployeeNotFoundError):
    logger.warning(
        "Employee not found",
        employee_id=exc.employee_id,
        path=request.url.path
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message}
    )


def get_employee_service(session: AsyncSession = Depends(get_db)) -> EmployeeService:
    return EmployeeService(EmployeeRepository(session))


@app.get("/health")
async def health_check(session: AsyncSession = Depends(get_db)):
    report = await health_checker.get_health_report(
        {"database": database_health_check(session)}
    )
    status_code = (
        status.HTTP_200_OK if report.status == HealthStatus.HEALTHY
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(status_code=status_code, content=report.to_dict())


@app.get("/metrics")
async def get_service_metrics():
    return Response(content=get_metrics(), media_type=get_metrics_content_type())


@app.get("/employees", response_model=List[EmployeeOut])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """List all employees."""
    return await service.list_employees()


@app.post("/employees", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service)
):
    """Create a new employee. Any id in the body is ignored."""
    return await service.create_employee(employee)


@app.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service)
):
    """Get a single employee by ID."""
    return await service.get_employee(employee_id)


# Answers 201 rather than 200 on success, same as create.
@app.put("/employees/{employee_id}", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def update_employee(
    employee_id: EmployeeId,
    employee: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service)
):
    """Replace every field of an employee except its id."""
    return await service.update_employee(employee_id, employee)


@app.delete("/employees/{employee_id}", response_model=EmployeeOut)
async def delete_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service)
):
    """Delete an employee and return its last state."""
    return await service.delete_employee(employee_id)
