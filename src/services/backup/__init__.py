"""
Backup Services

Orchestration of Asana → Google Drive backups.
"""
from .service import BackupService, backup_folder_name, backup_document_name
from .models import BackupResult, BackupSummary
from .exceptions import BackupFailedException

__all__ = [
    "BackupService",
    "backup_folder_name",
    "backup_document_name",
    "BackupResult",
    "BackupSummary",
    "BackupFailedException",
]
