"""
Google Drive Backup Store

Writes Asana project snapshots into Google Drive: one folder per project,
one two-tab spreadsheet per backup run.
"""
from typing import Optional, Any, Sequence

from ...utils.logger import setup_logger
from ...utils.config import Config
from ...utils.datetime import utc_timestamp
from ...core.base import load_service_account_credentials
from ...core.drive import GoogleDriveClient
from ...core.sheets import GoogleSheetsClient
from ..asana.schemas import AsanaProject, AsanaTask
from .rows import TASK_HEADERS, tasks_sheet_values, project_info_rows

logger = setup_logger(__name__)

TASKS_SHEET_ID = 0
TASKS_SHEET_TITLE = 'Tasks'
PROJECT_INFO_SHEET_ID = 1
PROJECT_INFO_SHEET_TITLE = 'Project Info'

HEADER_BACKGROUND = {'red': 0.2, 'green': 0.6, 'blue': 0.86}
HEADER_FOREGROUND = {'red': 1, 'green': 1, 'blue': 1}


class DriveBackupStore:
    """
    Destination store for backups (Google Drive + Google Sheets).

    Every call is awaited in order. Nothing is rolled back: if a step of
    ``create_tasks_document`` fails, the partially written spreadsheet stays
    in Drive and the error propagates.
    """

    def __init__(
        self,
        config: Config,
        credentials: Optional[Any] = None,
        drive_client: Optional[GoogleDriveClient] = None,
        sheets_client: Optional[GoogleSheetsClient] = None
    ):
        self.config = config
        if drive_client is None or sheets_client is None:
            credentials = credentials or load_service_account_credentials(
                config.google_service_account_key
            )
        self.drive = drive_client or GoogleDriveClient(config, credentials)
        self.sheets = sheets_client or GoogleSheetsClient(config, credentials)

    async def find_or_create_folder(self, name: str, parent_id: str) -> str:
        """
        Return the ID of the folder ``name`` under ``parent_id``, creating it if needed.

        When several folders share the name, the first one Drive lists wins.
        There is no locking: two concurrent runs can both miss and both create.
        """
        folders = await self.drive.find_folders(name, parent_id)
        if folders:
            logger.debug(f"[DriveBackupStore] Reusing folder '{name}' ({folders[0]['id']})")
            return folders[0]['id']

        return await self.drive.create_folder(name, parent_id)

    async def create_tasks_document(
        self,
        title: str,
        folder_id: str,
        project: AsanaProject,
        tasks: Sequence[AsanaTask]
    ) -> str:
        """
        Create the backup spreadsheet for one project

        Args:
            title: Spreadsheet title
            folder_id: Destination folder
            project: Project snapshot
            tasks: All tasks of the project

        Returns:
            The spreadsheet ID
        """
        spreadsheet_id = await self.sheets.create_spreadsheet(
            title,
            sheets=[
                {
                    'properties': {
                        'sheetId': TASKS_SHEET_ID,
                        'title': TASKS_SHEET_TITLE,
                        'gridProperties': {'frozenRowCount': 1}
                    }
                },
                {
                    'properties': {
                        'sheetId': PROJECT_INFO_SHEET_ID,
                        'title': PROJECT_INFO_SHEET_TITLE
                    }
                },
            ]
        )

        await self.drive.add_parent(spreadsheet_id, folder_id)

        await self.sheets.update_values(
            spreadsheet_id,
            f"{TASKS_SHEET_TITLE}!A1",
            tasks_sheet_values(tasks)
        )

        await self.sheets.update_values(
            spreadsheet_id,
            f"'{PROJECT_INFO_SHEET_TITLE}'!A1",
            project_info_rows(project, tasks, backup_timestamp=utc_timestamp())
        )

        await self.sheets.batch_update(spreadsheet_id, self._header_format_requests())

        logger.info(
            f"[DriveBackupStore] Wrote '{title}' ({spreadsheet_id}) with {len(tasks)} tasks"
        )
        return spreadsheet_id

    @staticmethod
    def _header_format_requests() -> list:
        """Bold, colored header row and auto-sized columns on the Tasks sheet."""
        return [
            {
                'repeatCell': {
                    'range': {
                        'sheetId': TASKS_SHEET_ID,
                        'startRowIndex': 0,
                        'endRowIndex': 1
                    },
                    'cell': {
                        'userEnteredFormat': {
                            'backgroundColor': HEADER_BACKGROUND,
                            'textFormat': {'bold': True, 'foregroundColor': HEADER_FOREGROUND}
                        }
                    },
                    'fields': 'userEnteredFormat(backgroundColor,textFormat)'
                }
            },
            {
                'autoResizeDimensions': {
                    'dimensions': {
                        'sheetId': TASKS_SHEET_ID,
                        'dimension': 'COLUMNS',
                        'startIndex': 0,
                        'endIndex': len(TASK_HEADERS)
                    }
                }
            },
        ]
