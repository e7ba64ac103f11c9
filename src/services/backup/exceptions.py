"""
Backup Exceptions
"""
from src.integrations.base_exceptions import OperationFailedException


class BackupFailedException(OperationFailedException):
    """Raised when writing one project's backup to the destination store fails."""

    def __init__(self, project_name: str, cause: Exception):
        self.project_name = project_name
        super().__init__(
            f"Failed to backup {project_name}: {cause}",
            service_name="Backup",
            cause=cause
        )
