"""
API Router for Asana Backups

Endpoints:
- POST /backup-asana - Run a full backup synchronously and return the summary
- GET /test - Report which required settings are configured
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_config, get_backup_service_factory, BackupServiceFactory
from api.exceptions import BackupResponse, ConfigurationStatusResponse, create_error_response
from src.utils.config import Config
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(tags=["Backup"])


@router.post("/backup-asana", response_model=BackupResponse)
async def backup_asana(
    config: Config = Depends(get_config),
    service_factory: BackupServiceFactory = Depends(get_backup_service_factory)
):
    """
    Back up every project of the configured Asana workspace to Google Drive

    The connection stays open for the whole run. Per-project failures are
    reported inside the summary; anything else returns 500.
    """
    service = None
    try:
        service = service_factory(config)
        summary = await service.run_backup()
        return BackupResponse(summary=summary.to_response())
    except Exception as e:
        logger.error(f"Backup failed: {e}", exc_info=True)
        return create_error_response(error=str(e))
    finally:
        if service is not None:
            await service.close()


@router.get("/test", response_model=ConfigurationStatusResponse)
async def configuration_status(config: Config = Depends(get_config)):
    """Report presence of the four required settings without revealing them"""
    return ConfigurationStatusResponse(configured=config.configured_flags())
