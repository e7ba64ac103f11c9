"""
Google Sheets API Client
"""
from typing import List, Dict, Any

from googleapiclient.discovery import build

from ...utils.logger import setup_logger
from ..base import BaseGoogleAPIClient

logger = setup_logger(__name__)


class GoogleSheetsClient(BaseGoogleAPIClient):
    """
    Google Sheets API v4 client

    Thin async wrappers over spreadsheets.create, values.update and batchUpdate.
    """

    def _build_service(self) -> Any:
        """Build Google Sheets API service"""
        return build('sheets', 'v4', credentials=self.credentials, cache_discovery=False)

    def _get_service_name(self) -> str:
        """Get service name"""
        return "Google Sheets"

    async def create_spreadsheet(self, title: str, sheets: List[Dict[str, Any]]) -> str:
        """
        Create a spreadsheet

        Args:
            title: Spreadsheet title
            sheets: Sheet definitions (``{"properties": {...}}``)

        Returns:
            The new spreadsheet ID
        """
        body = {'properties': {'title': title}, 'sheets': sheets}
        try:
            spreadsheet = await self._execute(
                self.service.spreadsheets().create(body=body, fields='spreadsheetId')
            )
        except Exception as e:
            logger.error(f"[GoogleSheetsClient] Failed to create spreadsheet '{title}': {e}")
            raise

        return spreadsheet['spreadsheetId']

    async def update_values(
        self,
        spreadsheet_id: str,
        range_name: str,
        values: List[List[Any]],
        value_input_option: str = 'RAW'
    ) -> Dict[str, Any]:
        """
        Write a block of values starting at ``range_name`` (A1 notation)
        """
        try:
            return await self._execute(
                self.service.spreadsheets().values().update(
                    spreadsheetId=spreadsheet_id,
                    range=range_name,
                    valueInputOption=value_input_option,
                    body={'values': values}
                )
            )
        except Exception as e:
            logger.error(f"[GoogleSheetsClient] Failed to write {range_name} in {spreadsheet_id}: {e}")
            raise

    async def batch_update(self, spreadsheet_id: str, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Apply a list of spreadsheet update requests"""
        try:
            return await self._execute(
                self.service.spreadsheets().batchUpdate(
                    spreadsheetId=spreadsheet_id,
                    body={'requests': requests}
                )
            )
        except Exception as e:
            logger.error(f"[GoogleSheetsClient] batchUpdate failed for {spreadsheet_id}: {e}")
            raise
