"""
Pytest configuration and fixtures
"""
import pytest

from src.utils.config import Config
from src.integrations.asana.schemas import AsanaProject, AsanaTask


@pytest.fixture
def test_config():
    """Test configuration with every required setting present"""
    return Config(
        asana_access_token="test_token",
        asana_workspace_id="ws-1",
        asana_base_url="https://asana.test/api/1.0",
        google_drive_folder_id="root-folder",
        google_service_account_key='{"type": "service_account"}',
    )


@pytest.fixture
def make_project():
    """Build an AsanaProject from keyword overrides"""
    def _make(**overrides):
        data = {
            "gid": "p-1",
            "name": "Alpha",
            "created_at": "2024-01-01T00:00:00.000Z",
            "modified_at": "2024-02-01T00:00:00.000Z",
            "archived": False,
            "notes": "",
            "owner": {"gid": "u-1", "name": "Ada"},
        }
        data.update(overrides)
        return AsanaProject.model_validate(data)
    return _make


@pytest.fixture
def make_task():
    """Build an AsanaTask from keyword overrides"""
    def _make(**overrides):
        data = {"gid": "t-1", "name": "Write report", "completed": False}
        data.update(overrides)
        return AsanaTask.model_validate(data)
    return _make
