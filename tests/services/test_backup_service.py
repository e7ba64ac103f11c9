"""Tests for the backup orchestrator."""
import re
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.core.drive import GoogleDriveClient
from src.core.sheets import GoogleSheetsClient
from src.integrations.asana import SourceUnavailableException
from src.integrations.base_exceptions import ConfigurationException
from src.integrations.google_drive import DriveBackupStore
from src.services.backup import (
    BackupService,
    BackupFailedException,
    backup_folder_name,
    backup_document_name,
)


def _mock_source(projects, tasks_by_gid):
    source = MagicMock()
    source.list_projects = AsyncMock(return_value=projects)

    async def list_tasks(gid):
        value = tasks_by_gid[gid]
        if isinstance(value, Exception):
            raise value
        return value

    source.list_tasks = AsyncMock(side_effect=list_tasks)
    source.close = AsyncMock()
    return source


def _mock_store():
    store = MagicMock()
    store.find_or_create_folder = AsyncMock(side_effect=lambda name, parent: f"folder:{name}")
    store.create_tasks_document = AsyncMock(side_effect=lambda title, folder, project, tasks: f"sheet:{project.gid}")
    return store


def test_names():
    assert backup_folder_name("Alpha") == "Alpha - Asana Backup"
    assert backup_document_name("2024-03-01") == "Backup_2024-03-01"


@pytest.mark.asyncio
async def test_run_backup_processes_projects_in_order(test_config, make_project, make_task):
    projects = [make_project(gid="p-1", name="Alpha"), make_project(gid="p-2", name="Beta")]
    source = _mock_source(projects, {"p-1": [make_task()], "p-2": []})
    store = _mock_store()
    service = BackupService(test_config, source=source, store=store)

    summary = await service.run_backup()

    source.list_projects.assert_awaited_once_with("ws-1")
    assert [c.args[0] for c in source.list_tasks.await_args_list] == ["p-1", "p-2"]
    assert [c.args for c in store.find_or_create_folder.await_args_list] == [
        ("Alpha - Asana Backup", "root-folder"),
        ("Beta - Asana Backup", "root-folder"),
    ]
    title = store.create_tasks_document.await_args_list[0].args[0]
    assert re.fullmatch(r"Backup_\d{4}-\d{2}-\d{2}", title)

    assert (summary.total_projects, summary.successful, summary.failed) == (2, 2, 0)
    alpha = summary.results[0]
    assert alpha.status == "success"
    assert alpha.tasks_count == 1
    assert alpha.folder_id == "folder:Alpha - Asana Backup"
    assert alpha.spreadsheet_id == "sheet:p-1"
    assert alpha.timestamp == title[len("Backup_"):]


@pytest.mark.asyncio
async def test_task_fetch_failure_is_isolated(test_config, make_project, make_task):
    projects = [make_project(gid=f"p-{i}", name=f"Project {i}") for i in range(4)]
    tasks = {f"p-{i}": [make_task()] for i in range(4)}
    tasks["p-2"] = SourceUnavailableException("Asana API error (500) on /projects/p-2/tasks", status_code=500)
    service = BackupService(test_config, source=_mock_source(projects, tasks), store=_mock_store())

    summary = await service.run_backup()

    assert summary.total_projects == 4
    assert summary.successful == 3
    assert summary.failed == 1
    assert [r.project for r in summary.results] == [p.name for p in projects]
    failed = summary.results[2]
    assert failed.status == "failed"
    assert failed.error == "Asana API error (500) on /projects/p-2/tasks"
    assert failed.spreadsheet_id is None


@pytest.mark.asyncio
async def test_store_failure_is_wrapped_and_isolated(test_config, make_project):
    projects = [make_project(gid="p-1", name="Alpha"), make_project(gid="p-2", name="Beta")]
    store = _mock_store()
    store.create_tasks_document.side_effect = [RuntimeError("quota exceeded"), "sheet-2"]
    service = BackupService(test_config, source=_mock_source(projects, {"p-1": [], "p-2": []}), store=store)

    summary = await service.run_backup()

    assert (summary.successful, summary.failed) == (1, 1)
    assert summary.results[0].error == "Failed to backup Alpha: quota exceeded"
    assert summary.results[1].spreadsheet_id == "sheet-2"


@pytest.mark.asyncio
async def test_backup_project_raises_backup_failed(test_config, make_project):
    store = _mock_store()
    store.find_or_create_folder.side_effect = RuntimeError("forbidden")
    service = BackupService(test_config, source=_mock_source([], {}), store=store)

    with pytest.raises(BackupFailedException) as exc_info:
        await service._backup_project(make_project(), [], "root-folder")

    assert str(exc_info.value) == "Failed to backup Alpha: forbidden"
    assert isinstance(exc_info.value.cause, RuntimeError)


@pytest.mark.asyncio
async def test_project_listing_failure_aborts_run(test_config):
    source = _mock_source([], {})
    source.list_projects.side_effect = SourceUnavailableException("Asana API error (401) on /workspaces/ws-1/projects")
    store = _mock_store()
    service = BackupService(test_config, source=source, store=store)

    with pytest.raises(SourceUnavailableException):
        await service.run_backup()

    store.find_or_create_folder.assert_not_awaited()


@pytest.mark.asyncio
async def test_explicit_workspace_and_folder_override_config(test_config, make_project):
    source = _mock_source([make_project()], {"p-1": []})
    store = _mock_store()
    service = BackupService(test_config, source=source, store=store)

    await service.run_backup(workspace_id="ws-other", root_folder_id="folder-other")

    source.list_projects.assert_awaited_once_with("ws-other")
    assert store.find_or_create_folder.await_args.args[1] == "folder-other"


@pytest.mark.asyncio
async def test_empty_workspace(test_config):
    service = BackupService(test_config, source=_mock_source([], {}), store=_mock_store())

    summary = await service.run_backup()

    assert summary.to_response()["totalProjects"] == 0
    assert summary.results == []
    assert summary.timestamp.endswith("Z")


def test_from_config_reports_missing_settings(test_config):
    config = test_config.model_copy(update={"asana_access_token": None, "google_drive_folder_id": None})

    with pytest.raises(ConfigurationException) as exc_info:
        BackupService.from_config(config)

    assert "asana" in str(exc_info.value)
    assert "drive" in str(exc_info.value)


def test_summary_response_uses_camel_case(test_config):
    from src.services.backup import BackupResult, BackupSummary

    summary = BackupSummary.from_results(
        timestamp="2024-03-01T00:00:00.000Z",
        total_projects=2,
        results=[
            BackupResult.success("Alpha", 3, "f-1", "s-1", "2024-03-01"),
            BackupResult.failure("Beta", "boom"),
        ],
    )

    assert summary.to_response() == {
        "timestamp": "2024-03-01T00:00:00.000Z",
        "totalProjects": 2,
        "successful": 1,
        "failed": 1,
        "results": [
            {
                "project": "Alpha",
                "status": "success",
                "tasksCount": 3,
                "folderId": "f-1",
                "spreadsheetId": "s-1",
                "timestamp": "2024-03-01",
            },
            {"project": "Beta", "status": "failed", "error": "boom"},
        ],
    }


@pytest.mark.asyncio
async def test_end_to_end_alpha_and_beta(test_config, make_project, make_task):
    """Alpha has one completed task, Beta has none; both land in Drive."""
    projects = [make_project(gid="p-alpha", name="Alpha"), make_project(gid="p-beta", name="Beta")]
    source = _mock_source(projects, {
        "p-alpha": [make_task(name="Launch", completed=True)],
        "p-beta": [],
    })

    drive_service = MagicMock()
    drive_service.files.return_value.list.return_value.execute.return_value = {'files': []}
    drive_service.files.return_value.create.return_value.execute.side_effect = [{'id': 'f-alpha'}, {'id': 'f-beta'}]

    sheets_service = MagicMock()
    sheets_service.spreadsheets.return_value.create.return_value.execute.side_effect = [
        {'spreadsheetId': 's-alpha'},
        {'spreadsheetId': 's-beta'},
    ]
    written = {}

    def record_update(spreadsheetId, range, valueInputOption, body):
        written[(spreadsheetId, range)] = body['values']
        return MagicMock()

    sheets_service.spreadsheets.return_value.values.return_value.update.side_effect = record_update

    with patch("src.core.drive.google_client.build", return_value=drive_service), \
            patch("src.core.sheets.google_client.build", return_value=sheets_service):
        store = DriveBackupStore(
            test_config,
            drive_client=GoogleDriveClient(test_config, credentials=MagicMock()),
            sheets_client=GoogleSheetsClient(test_config, credentials=MagicMock()),
        )

    summary = await BackupService(test_config, source=source, store=store).run_backup()

    assert (summary.total_projects, summary.successful, summary.failed) == (2, 2, 0)
    assert [r.spreadsheet_id for r in summary.results] == ["s-alpha", "s-beta"]
    assert [r.folder_id for r in summary.results] == ["f-alpha", "f-beta"]

    alpha_tasks = written[("s-alpha", "Tasks!A1")]
    assert len(alpha_tasks) == 2
    assert alpha_tasks[1][1] == "Completed"
    assert len(written[("s-beta", "Tasks!A1")]) == 1
