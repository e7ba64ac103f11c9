"""
API Dependencies
Provides shared dependencies for FastAPI routers using dependency injection
"""
from typing import Callable, Optional

from src.utils.config import load_config, Config
from src.utils.logger import setup_logger
from src.services.backup import BackupService

logger = setup_logger(__name__)

BackupServiceFactory = Callable[[Config], BackupService]


# ============================================
# APPLICATION STATE (Singleton Pattern)
# ============================================

class AppState:
    """Application state holder for singleton instances"""
    _config: Optional[Config] = None

    @classmethod
    def get_config(cls) -> Config:
        """Get or create config singleton"""
        if cls._config is None:
            cls._config = load_config()
            logger.info("[OK] Configuration loaded")
        return cls._config

    @classmethod
    def set_config(cls, config: Optional[Config]) -> None:
        """Install a config (startup, tests); ``None`` forces a reload on next use"""
        cls._config = config


# ============================================
# FASTAPI DEPENDENCIES
# ============================================

def get_config() -> Config:
    """Configuration loaded once at startup"""
    return AppState.get_config()


def get_backup_service_factory() -> BackupServiceFactory:
    """
    Factory that builds a BackupService for one request.

    Clients are built per run so missing credentials fail the request, not startup.
    """
    return BackupService.from_config
