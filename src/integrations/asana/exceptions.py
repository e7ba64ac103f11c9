"""
Asana Integration Exceptions
"""
from ..base_exceptions import ServiceUnavailableException


class SourceUnavailableException(ServiceUnavailableException):
    """Raised on any network, auth or HTTP error talking to Asana."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("service_name", "Asana")
        super().__init__(message, **kwargs)


class AsanaAuthenticationException(SourceUnavailableException):
    """Raised when no usable access token is configured."""

    def __init__(self, message: str = "No Asana access token configured"):
        super().__init__(message)
