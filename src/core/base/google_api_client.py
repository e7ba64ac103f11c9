"""
Base Google API Client
Provides common functionality for the Google API clients (Drive, Sheets)
"""
import asyncio
import json
from abc import ABC, abstractmethod
from typing import List, Optional, Any

from google.oauth2 import service_account

from ...integrations.base_exceptions import ConfigurationException
from ...utils.logger import setup_logger
from ...utils.config import Config, ConfigDefaults

logger = setup_logger(__name__)


def load_service_account_credentials(
    key_json: Optional[str],
    scopes: Optional[List[str]] = None
) -> service_account.Credentials:
    """
    Build service-account credentials from the JSON key blob.

    Raises:
        ConfigurationException: if the blob is missing or not a valid key
    """
    if not key_json:
        raise ConfigurationException(
            "GOOGLE_SERVICE_ACCOUNT_KEY is not configured",
            service_name="Google"
        )

    try:
        info = json.loads(key_json)
        return service_account.Credentials.from_service_account_info(
            info,
            scopes=scopes or ConfigDefaults.GOOGLE_SCOPES
        )
    except (ValueError, KeyError) as e:
        raise ConfigurationException(
            f"Invalid Google service account key: {e}",
            service_name="Google",
            cause=e
        ) from e


class BaseGoogleAPIClient(ABC):
    """
    Abstract base class for Google API clients

    Provides common functionality:
    - Service-account credential loading from config
    - Service initialization
    - Running blocking ``execute()`` calls off the event loop

    Subclasses must implement:
    - _build_service(): Build the specific Google API service
    - _get_service_name(): Return the service name for logging
    """

    def __init__(self, config: Config, credentials: Optional[Any] = None):
        """
        Initialize Google API client

        Args:
            config: Configuration object
            credentials: Google credentials (if None, built from the service account key in config)
        """
        self.config = config
        self.credentials = credentials or load_service_account_credentials(
            config.google_service_account_key
        )
        self.service = self._build_service()
        logger.debug(f"[OK] {self._get_service_name()} API service initialized")

    @abstractmethod
    def _build_service(self) -> Any:
        """
        Build the specific Google API service

        Example:
            return build('drive', 'v3', credentials=self.credentials)
        """
        pass

    @abstractmethod
    def _get_service_name(self) -> str:
        """
        Get the service name for logging (e.g., "Google Drive", "Google Sheets")
        """
        pass

    async def _execute(self, request: Any) -> Any:
        """Execute a googleapiclient request in a worker thread."""
        return await asyncio.to_thread(request.execute)
