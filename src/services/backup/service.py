"""
Backup Service - orchestrates one Asana → Google Drive backup run

For every project in the workspace, one at a time:
1. fetch all of its tasks from Asana
2. find or create "<project> - Asana Backup" under the root Drive folder
3. write a new "Backup_<date>" spreadsheet into that folder

A failure in steps 1-3 is recorded for that project and the loop moves on.
Anything failing outside the loop (config, project listing) aborts the run.
"""
from typing import Optional, List

from src.utils.logger import setup_logger
from src.utils.config import Config
from src.utils.datetime import utc_now, utc_timestamp, utc_date
from src.integrations.base_exceptions import ConfigurationException
from src.integrations.asana import AsanaClient, AsanaProject, AsanaTask
from src.integrations.google_drive import DriveBackupStore

from .exceptions import BackupFailedException
from .models import BackupResult, BackupSummary

logger = setup_logger(__name__)

FOLDER_SUFFIX = " - Asana Backup"
DOCUMENT_PREFIX = "Backup_"


def backup_folder_name(project_name: Optional[str]) -> str:
    return f"{project_name}{FOLDER_SUFFIX}"


def backup_document_name(date: str) -> str:
    return f"{DOCUMENT_PREFIX}{date}"


class BackupService:
    """
    Backup orchestrator.

    Usage:
        service = BackupService.from_config(config)
        try:
            summary = await service.run_backup()
        finally:
            await service.close()
    """

    def __init__(self, config: Config, source: AsanaClient, store: DriveBackupStore):
        self.config = config
        self.source = source
        self.store = store

    @classmethod
    def from_config(cls, config: Config) -> "BackupService":
        """
        Build the service and its clients from configuration.

        Raises:
            ConfigurationException: if a required setting is missing
        """
        missing = [key for key, present in config.configured_flags().items() if not present]
        if missing:
            raise ConfigurationException(
                f"Missing configuration: {', '.join(missing)}",
                service_name="Backup"
            )

        return cls(
            config=config,
            source=AsanaClient.from_config(config),
            store=DriveBackupStore(config),
        )

    async def close(self):
        await self.source.close()

    async def run_backup(
        self,
        workspace_id: Optional[str] = None,
        root_folder_id: Optional[str] = None
    ) -> BackupSummary:
        """
        Back up every project of a workspace

        Args:
            workspace_id: Asana workspace (defaults to config)
            root_folder_id: Drive folder holding the per-project folders (defaults to config)

        Returns:
            Summary of the run with one result per project
        """
        workspace_id = workspace_id or self.config.asana_workspace_id
        root_folder_id = root_folder_id or self.config.google_drive_folder_id
        if not workspace_id or not root_folder_id:
            raise ConfigurationException(
                "Asana workspace and Drive root folder are required",
                service_name="Backup"
            )

        logger.info("Starting Asana backup process", workspace_id=workspace_id)

        projects = await self.source.list_projects(workspace_id)
        logger.info(f"Found {len(projects)} projects")

        results: List[BackupResult] = []
        for project in projects:
            try:
                tasks = await self.source.list_tasks(project.gid)
                result = await self._backup_project(project, tasks, root_folder_id)
                results.append(result)
                logger.info(f"Successfully backed up: {project.name}", tasks=len(tasks))
            except Exception as e:
                logger.error(f"Error backing up project {project.name}: {e}")
                results.append(BackupResult.failure(project.name, str(e)))

        summary = BackupSummary.from_results(
            timestamp=utc_timestamp(),
            total_projects=len(projects),
            results=results,
        )
        logger.info(
            "Backup completed",
            total=summary.total_projects,
            successful=summary.successful,
            failed=summary.failed
        )
        return summary

    async def _backup_project(
        self,
        project: AsanaProject,
        tasks: List[AsanaTask],
        root_folder_id: str
    ) -> BackupResult:
        """Write one project's folder and spreadsheet."""
        try:
            folder_id = await self.store.find_or_create_folder(
                backup_folder_name(project.name), root_folder_id
            )

            date = utc_date(utc_now())
            spreadsheet_id = await self.store.create_tasks_document(
                backup_document_name(date), folder_id, project, tasks
            )
        except Exception as e:
            raise BackupFailedException(project.name, e) from e

        return BackupResult.success(
            project=project.name,
            tasks_count=len(tasks),
            folder_id=folder_id,
            spreadsheet_id=spreadsheet_id,
            timestamp=date,
        )
