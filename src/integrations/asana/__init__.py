"""
Asana Integration Package

Read-only access to Asana projects and tasks for backups.
"""
from .client import AsanaClient
from .exceptions import (
    SourceUnavailableException,
    AsanaAuthenticationException,
)
from .schemas import AsanaProject, AsanaTask, AsanaTag, AsanaUser

__all__ = [
    'AsanaClient',
    'SourceUnavailableException',
    'AsanaAuthenticationException',
    'AsanaProject',
    'AsanaTask',
    'AsanaTag',
    'AsanaUser',
]
