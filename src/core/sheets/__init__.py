"""
Google Sheets Core Module

Low-level client for Google Sheets API operations.
"""
from .google_client import GoogleSheetsClient

__all__ = ['GoogleSheetsClient']
