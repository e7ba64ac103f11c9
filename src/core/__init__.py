"""
Core business logic modules

Google API clients authenticated with a service account.
"""

from .drive.google_client import GoogleDriveClient
from .sheets.google_client import GoogleSheetsClient

__all__ = [
    'GoogleDriveClient',
    'GoogleSheetsClient',
]
