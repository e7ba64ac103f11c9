"""
Google Drive API Client
Provides the folder and file-placement calls used by backups
"""
from typing import List, Dict, Any, Optional

from googleapiclient.discovery import build

from ...utils.logger import setup_logger
from ..base import BaseGoogleAPIClient

logger = setup_logger(__name__)

# Constants
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"


def escape_query_value(value: str) -> str:
    """Escape a literal for use inside single quotes in a Drive query."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


class GoogleDriveClient(BaseGoogleAPIClient):
    """
    Google Drive API client

    Provides methods to interact with Google Drive:
    - Search folders by name and parent
    - Create folders
    - Add a parent to an existing file
    """

    def _build_service(self) -> Any:
        """Build Google Drive API service"""
        return build('drive', 'v3', credentials=self.credentials, cache_discovery=False)

    def _get_service_name(self) -> str:
        """Get service name"""
        return "Google Drive"

    # =========================================================================
    # Folders
    # =========================================================================

    async def find_folders(self, name: str, parent_id: str) -> List[Dict[str, Any]]:
        """
        Find non-trashed folders with an exact name directly under a parent

        Args:
            name: Folder name
            parent_id: Parent folder ID

        Returns:
            Matching folders (``id``, ``name``) in Drive's result order
        """
        q = (
            f"name = '{escape_query_value(name)}' "
            f"and '{escape_query_value(parent_id)}' in parents "
            f"and mimeType = '{FOLDER_MIME_TYPE}' "
            f"and trashed = false"
        )

        try:
            results = await self._execute(
                self.service.files().list(
                    q=q,
                    fields="files(id, name)",
                    spaces="drive",
                    supportsAllDrives=True,
                    includeItemsFromAllDrives=True
                )
            )
        except Exception as e:
            logger.error(f"[GoogleDriveClient] Failed to search folder '{name}': {e}")
            raise

        return results.get('files', [])

    async def create_folder(self, name: str, parent_id: Optional[str] = None) -> str:
        """
        Create a folder

        Args:
            name: Folder name
            parent_id: Optional parent folder ID

        Returns:
            ID of the new folder
        """
        body: Dict[str, Any] = {'name': name, 'mimeType': FOLDER_MIME_TYPE}
        if parent_id:
            body['parents'] = [parent_id]

        try:
            folder = await self._execute(
                self.service.files().create(
                    body=body,
                    fields='id',
                    supportsAllDrives=True
                )
            )
        except Exception as e:
            logger.error(f"[GoogleDriveClient] Failed to create folder '{name}': {e}")
            raise

        logger.info(f"[GoogleDriveClient] Created folder '{name}' ({folder['id']})")
        return folder['id']

    # =========================================================================
    # Files
    # =========================================================================

    async def add_parent(self, file_id: str, parent_id: str) -> Dict[str, Any]:
        """
        Add a parent folder to a file

        Args:
            file_id: File ID
            parent_id: Folder to add as parent

        Returns:
            Updated file metadata (``id``, ``parents``)
        """
        try:
            return await self._execute(
                self.service.files().update(
                    fileId=file_id,
                    addParents=parent_id,
                    fields='id, parents',
                    supportsAllDrives=True
                )
            )
        except Exception as e:
            logger.error(f"[GoogleDriveClient] Failed to move {file_id} into {parent_id}: {e}")
            raise
