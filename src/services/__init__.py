"""
Services - Business logic built on top of the integrations

Active Services:
- BackupService: Asana → Google Drive backup orchestration
"""

from .backup import BackupService, BackupResult, BackupSummary

__all__ = ["BackupService", "BackupResult", "BackupSummary"]
