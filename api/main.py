"""
Asana Backup Agent API - Main Application
Exports Asana projects to Google Sheets in Google Drive on demand
"""
import sys
from pathlib import Path
from contextlib import asynccontextmanager

# Add parent directory to path for src imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI

from src.utils.logger import setup_logger, configure_logging
from api.dependencies import AppState
from api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from api.routers import health, backup

logger = setup_logger(__name__)


# ============================================
# APPLICATION LIFECYCLE
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    Configuration is read once here and shared read-only by every request.
    Missing credentials are not fatal at startup; /test reports them.
    """
    config = AppState.get_config()
    configure_logging(config.logging.level)

    missing = [key for key, present in config.configured_flags().items() if not present]
    if missing:
        logger.warning(f"[WARNING] Missing configuration: {', '.join(missing)}")

    logger.info(f"Asana Backup Agent running on port {config.server.port}")
    yield
    logger.info("Shutting down Asana Backup Agent")


# ============================================
# APPLICATION SETUP
# ============================================

app = FastAPI(
    title="Asana Backup Agent",
    description="Backs up Asana projects to Google Sheets in Google Drive",
    version="1.0.0",
    lifespan=lifespan
)

# Add middleware in reverse order (last added = first executed)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(ErrorHandlingMiddleware)


# ============================================
# INCLUDE ROUTERS
# ============================================

app.include_router(health.router)        # Liveness probe
app.include_router(backup.router)        # Backup trigger and configuration check


# ============================================
# MAIN ENTRY POINT
# ============================================

if __name__ == "__main__":
    import uvicorn

    config = AppState.get_config()
    uvicorn.run(
        "api.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=False,
        log_level="info"
    )
