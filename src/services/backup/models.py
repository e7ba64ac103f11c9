"""
Backup Result Models

In-memory outcome of one backup run. Field aliases match the JSON returned
by the HTTP API.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

BackupStatus = Literal["success", "failed"]


class BackupResult(BaseModel):
    """Outcome for a single project."""
    model_config = ConfigDict(populate_by_name=True)

    project: Optional[str] = None
    status: BackupStatus
    tasks_count: Optional[int] = Field(default=None, alias="tasksCount")
    folder_id: Optional[str] = Field(default=None, alias="folderId")
    spreadsheet_id: Optional[str] = Field(default=None, alias="spreadsheetId")
    timestamp: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(
        cls,
        project: Optional[str],
        tasks_count: int,
        folder_id: str,
        spreadsheet_id: str,
        timestamp: str
    ) -> "BackupResult":
        return cls(
            project=project,
            status="success",
            tasks_count=tasks_count,
            folder_id=folder_id,
            spreadsheet_id=spreadsheet_id,
            timestamp=timestamp,
        )

    @classmethod
    def failure(cls, project: Optional[str], error: str) -> "BackupResult":
        return cls(project=project, status="failed", error=error)


class BackupSummary(BaseModel):
    """Aggregate of every project's result for one run."""
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str
    total_projects: int = Field(alias="totalProjects")
    successful: int
    failed: int
    results: List[BackupResult] = Field(default_factory=list)

    @classmethod
    def from_results(cls, timestamp: str, total_projects: int, results: List[BackupResult]) -> "BackupSummary":
        return cls(
            timestamp=timestamp,
            total_projects=total_projects,
            successful=len([r for r in results if r.status == "success"]),
            failed=len([r for r in results if r.status == "failed"]),
            results=results,
        )

    def to_response(self) -> dict:
        """JSON-ready dict with camelCase keys and unset fields left out."""
        return self.model_dump(by_alias=True, exclude_none=True)
