"""
Configuration management
"""
import os
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel


# ============================================
# CONFIGURATION DEFAULTS
# ============================================

class ConfigDefaults:
    """Default configuration values as constants"""

    # Asana defaults
    ASANA_BASE_URL = "https://app.asana.com/api/1.0"
    ASANA_PAGE_SIZE = 100
    ASANA_TIMEOUT_SECONDS = 30.0

    # Google defaults
    GOOGLE_SCOPES = [
        "https://www.googleapis.com/auth/drive",
        "https://www.googleapis.com/auth/spreadsheets",
    ]

    # Logging defaults
    LOGGING_LEVEL_INFO = "INFO"

    # Server defaults
    SERVER_HOST_DEFAULT = "0.0.0.0"
    SERVER_PORT_DEFAULT = 3000


# ============================================
# CONFIGURATION MODELS
# ============================================

class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = ConfigDefaults.LOGGING_LEVEL_INFO


class ServerConfig(BaseModel):
    """Server configuration"""
    host: str = ConfigDefaults.SERVER_HOST_DEFAULT
    port: int = ConfigDefaults.SERVER_PORT_DEFAULT


class Config(BaseModel):
    """
    Main configuration

    The four credential fields are optional here: a missing value is only an
    error once a backup actually needs it.
    """
    asana_access_token: Optional[str] = None
    asana_workspace_id: Optional[str] = None
    asana_base_url: str = ConfigDefaults.ASANA_BASE_URL
    google_drive_folder_id: Optional[str] = None
    google_service_account_key: Optional[str] = None
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()

    def configured_flags(self) -> Dict[str, bool]:
        """Report which required values are present, without exposing them."""
        return {
            "asana": bool(self.asana_access_token),
            "workspace": bool(self.asana_workspace_id),
            "drive": bool(self.google_drive_folder_id),
            "serviceAccount": bool(self.google_service_account_key),
        }


def load_config(env_file: Optional[str] = None) -> Config:
    """
    Load configuration from environment variables (and a .env file if present).
    """
    load_dotenv(env_file)

    return Config(
        asana_access_token=os.getenv("ASANA_ACCESS_TOKEN") or None,
        asana_workspace_id=os.getenv("ASANA_WORKSPACE_ID") or None,
        asana_base_url=os.getenv("ASANA_BASE_URL") or ConfigDefaults.ASANA_BASE_URL,
        google_drive_folder_id=os.getenv("GOOGLE_DRIVE_FOLDER_ID") or None,
        google_service_account_key=os.getenv("GOOGLE_SERVICE_ACCOUNT_KEY") or None,
        server=ServerConfig(
            host=os.getenv("HOST") or ConfigDefaults.SERVER_HOST_DEFAULT,
            port=int(os.getenv("PORT") or ConfigDefaults.SERVER_PORT_DEFAULT),
        ),
        logging=LoggingConfig(
            level=os.getenv("LOG_LEVEL") or ConfigDefaults.LOGGING_LEVEL_INFO,
        ),
    )
