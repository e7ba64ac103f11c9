"""
Asana Data Schemas

Pydantic models for the subset of Asana project and task fields the backup
exports. Values are kept as Asana returns them (timestamps stay ISO strings);
defaults for absent values are applied only when rows are projected.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AsanaModel(BaseModel):
    """Base for Asana payloads: unknown fields are ignored."""
    model_config = ConfigDict(extra="ignore")


class AsanaUser(AsanaModel):
    gid: Optional[str] = None
    name: Optional[str] = None


class AsanaTag(AsanaModel):
    gid: Optional[str] = None
    name: Optional[str] = None


class AsanaProject(AsanaModel):
    """A project snapshot from ``GET /workspaces/{gid}/projects``."""
    gid: str
    name: Optional[str] = None
    created_at: Optional[str] = None
    modified_at: Optional[str] = None
    archived: Optional[bool] = False
    notes: Optional[str] = None
    owner: Optional[AsanaUser] = None


class AsanaTask(AsanaModel):
    """A task snapshot from ``GET /projects/{gid}/tasks``."""
    gid: Optional[str] = None
    name: Optional[str] = None
    completed: Optional[bool] = False
    completed_at: Optional[str] = None
    due_on: Optional[str] = None
    due_at: Optional[str] = None
    assignee: Optional[AsanaUser] = None
    notes: Optional[str] = None
    tags: Optional[List[AsanaTag]] = Field(default_factory=list)
    custom_fields: Optional[List[Dict[str, Any]]] = Field(default_factory=list)
    created_at: Optional[str] = None
    modified_at: Optional[str] = None
    permalink_url: Optional[str] = None
