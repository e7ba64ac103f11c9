"""
Base Integration Exceptions

Shared exception hierarchy for the Asana source and the Google destination.

Usage:
    from src.integrations.base_exceptions import (
        IntegrationServiceException,
        ServiceUnavailableException,
        ConfigurationException,
        OperationFailedException,
    )
"""
from typing import Optional, Dict, Any


class IntegrationServiceException(Exception):
    """
    Root of every error raised by an integration.

    ``str(exc)`` is the bare message; the HTTP API and the CLI report it verbatim.
    """

    def __init__(
        self,
        message: str,
        service_name: str = "Integration",
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.service_name = service_name
        self.details = details or {}
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(service={self.service_name}, message={self.message})"


class ServiceUnavailableException(IntegrationServiceException):
    """A remote service could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        self.status_code = status_code
        super().__init__(message, **kwargs)


class ConfigurationException(IntegrationServiceException):
    """A required setting is missing or unusable (token, folder ID, key JSON)."""


class OperationFailedException(IntegrationServiceException):
    """A multi-step operation against a service did not complete."""
