"""Tests for the command line entry point."""
from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from main import cli
from src.integrations.base_exceptions import ConfigurationException
from src.services.backup import BackupResult, BackupSummary


def _summary(*results):
    return BackupSummary.from_results(
        timestamp="2024-03-01T00:00:00.000Z",
        total_projects=len(results),
        results=list(results),
    )


def _patched_service(run_backup):
    service = MagicMock()
    service.run_backup = run_backup
    service.close = AsyncMock()
    return service


def test_backup_prints_summary(test_config):
    service = _patched_service(AsyncMock(return_value=_summary(
        BackupResult.success("Alpha", 4, "f-1", "s-1", "2024-03-01"),
    )))

    with patch("src.utils.config.load_config", return_value=test_config), \
            patch("src.services.backup.BackupService.from_config", return_value=service):
        result = CliRunner().invoke(cli, ["backup", "--workspace", "ws-9", "--folder", "root-9"])

    assert result.exit_code == 0
    assert "Alpha" in result.output
    assert "Successful: 1" in result.output
    service.run_backup.assert_awaited_once_with(workspace_id="ws-9", root_folder_id="root-9")
    service.close.assert_awaited_once()


def test_backup_exits_nonzero_when_a_project_failed(test_config):
    service = _patched_service(AsyncMock(return_value=_summary(
        BackupResult.success("Alpha", 1, "f-1", "s-1", "2024-03-01"),
        BackupResult.failure("Beta", "Failed to backup Beta: boom"),
    )))

    with patch("src.utils.config.load_config", return_value=test_config), \
            patch("src.services.backup.BackupService.from_config", return_value=service):
        result = CliRunner().invoke(cli, ["backup"])

    assert result.exit_code == 1
    assert "Failed: 1" in result.output


def test_backup_reports_missing_configuration(test_config):
    with patch("src.utils.config.load_config", return_value=test_config), \
            patch("src.services.backup.BackupService.from_config",
                  side_effect=ConfigurationException("Missing configuration: asana")):
        result = CliRunner().invoke(cli, ["backup"])

    assert result.exit_code == 1
    assert "Missing configuration: asana" in result.output
