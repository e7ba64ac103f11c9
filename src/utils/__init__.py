"""
Utility modules - Shared utilities for the application

This module should NEVER import from other src modules (core, integrations, services)
to maintain the import hierarchy and prevent circular dependencies.
"""

# ============================================
# CONFIGURATION
# ============================================
from .config import Config, ConfigDefaults, load_config

# ============================================
# LOGGING
# ============================================
from .logger import setup_logger, configure_logging

# ============================================
# DATE/TIME
# ============================================
from .datetime import utc_now, utc_timestamp, utc_date

__all__ = [
    "Config",
    "ConfigDefaults",
    "load_config",
    "setup_logger",
    "configure_logging",
    "utc_now",
    "utc_timestamp",
    "utc_date",
]
