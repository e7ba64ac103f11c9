"""
Google Drive Core Module

Low-level client for Google Drive API operations.
"""
from .google_client import GoogleDriveClient, FOLDER_MIME_TYPE, escape_query_value

__all__ = ['GoogleDriveClient', 'FOLDER_MIME_TYPE', 'escape_query_value']
