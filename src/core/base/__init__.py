"""
Base classes for core functionality
"""
from .google_api_client import BaseGoogleAPIClient, load_service_account_credentials

__all__ = ['BaseGoogleAPIClient', 'load_service_account_credentials']
