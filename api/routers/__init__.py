"""
API Routers - Modular organization of API endpoints
"""
from . import health, backup

__all__ = ["health", "backup"]
