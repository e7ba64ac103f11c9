"""
Asana API Client

Async wrapper over the Asana REST API for the read-only calls the backup
needs: listing a workspace's projects and paging through a project's tasks.
"""
from typing import Optional, Dict, Any, List

import httpx

from src.utils.logger import setup_logger
from src.utils.config import Config, ConfigDefaults

from .exceptions import SourceUnavailableException, AsanaAuthenticationException
from .schemas import AsanaProject, AsanaTask

logger = setup_logger(__name__)

PROJECT_OPT_FIELDS = "name,created_at,modified_at,archived,notes,owner.name"
TASK_OPT_FIELDS = (
    "name,completed,completed_at,due_on,due_at,assignee.name,notes,"
    "tags.name,custom_fields,created_at,modified_at,permalink_url"
)


class AsanaClient:
    """
    Asana REST API client.

    Uses a Personal Access Token (bearer auth). Every failure, whether
    network, auth or HTTP status, surfaces as ``SourceUnavailableException``.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: str = ConfigDefaults.ASANA_BASE_URL,
        page_size: int = ConfigDefaults.ASANA_PAGE_SIZE,
        timeout: float = ConfigDefaults.ASANA_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Asana client.

        Args:
            access_token: Asana Personal Access Token
            base_url: API root, e.g. https://app.asana.com/api/1.0
            page_size: Tasks requested per page
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "AsanaClient":
        return cls(
            access_token=config.asana_access_token,
            base_url=config.asana_base_url,
            **kwargs
        )

    @property
    def is_configured(self) -> bool:
        """Check if Asana is configured with a token."""
        return bool(self.access_token)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if not self.access_token:
            raise AsanaAuthenticationException()

        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.access_token}",
                    "Accept": "application/json",
                },
                timeout=self.timeout,
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "AsanaClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET a path and return the decoded JSON envelope."""
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"[AsanaClient] GET {path} failed with status {status_code}")
            raise SourceUnavailableException(
                f"Asana API error ({status_code}) on {path}",
                status_code=status_code,
                cause=e
            ) from e
        except httpx.RequestError as e:
            logger.error(f"[AsanaClient] GET {path} failed: {e}")
            raise SourceUnavailableException(
                f"Asana request to {path} failed: {e}",
                cause=e
            ) from e
        except ValueError as e:
            logger.error(f"[AsanaClient] GET {path} returned a non-JSON body")
            raise SourceUnavailableException(
                f"Asana returned an invalid response on {path}",
                status_code=response.status_code,
                cause=e
            ) from e

    # Project Operations

    async def list_projects(self, workspace_id: str) -> List[AsanaProject]:
        """List all projects in a workspace (single call)."""
        payload = await self._get(
            f"/workspaces/{workspace_id}/projects",
            {"opt_fields": PROJECT_OPT_FIELDS}
        )
        projects = [AsanaProject.model_validate(item) for item in payload.get("data") or []]
        logger.debug(f"[AsanaClient] Workspace {workspace_id}: {len(projects)} projects")
        return projects

    # Task Operations

    async def list_tasks(self, project_id: str) -> List[AsanaTask]:
        """
        List every task in a project, following ``next_page.offset`` tokens.

        Pages are fetched one at a time and concatenated in order. Paging
        stops after the first response without a continuation token. If any
        page fails the error propagates and nothing is returned.

        Args:
            project_id: Project GID

        Returns:
            All tasks of the project
        """
        tasks: List[AsanaTask] = []
        offset: Optional[str] = None
        pages = 0

        while True:
            params: Dict[str, Any] = {
                "opt_fields": TASK_OPT_FIELDS,
                "limit": self.page_size,
            }
            if offset:
                params["offset"] = offset

            payload = await self._get(f"/projects/{project_id}/tasks", params)
            tasks.extend(AsanaTask.model_validate(item) for item in payload.get("data") or [])
            pages += 1

            next_page = payload.get("next_page") or {}
            offset = next_page.get("offset")
            if not offset:
                break

        logger.debug(f"[AsanaClient] Project {project_id}: {len(tasks)} tasks in {pages} page(s)")
        return tasks
