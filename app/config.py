"""
Service configuration.
All settings come from environment variables and are read once at import.
"""
import os

# -----------------------------------------------------------------------------
# Service
# -----------------------------------------------------------------------------
SERVICE_NAME = os.getenv("SERVICE_NAME", "employee-api")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "true").lower() == "true"

# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------
# DATABASE_URL wins when set (e.g. sqlite+aiosqlite:///./employees.db for local
# runs); otherwise the URL is assembled from the POSTGRES_* parts.
DB_URL_TEMPLATE = "postgresql+asyncpg://{user}:{pwd}@{host}:{port}/{db}"


def get_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return DB_URL_TEMPLATE.format(
        user=os.getenv("POSTGRES_USER", "hr"),
        pwd=os.getenv("POSTGRES_PASSWORD", "hr"),
        host=os.getenv("POSTGRES_HOST", "postgres"),
        port=os.getenv("POSTGRES_PORT", "5432"),
        db=os.getenv("POSTGRES_DB", "hr"),
    )


DATABASE_URL = get_database_url()
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
