"""
Utility modules for Resume Ingest.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Keyword vocabularies and lifecycle constants
"""

from resume_ingest.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from resume_ingest.utils.constants import (
    SECTION_NAMES,
    SUPPORTED_RESUME_TYPES,
)
from resume_ingest.utils.logger import (
    setup_logging,
    get_logger,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "SECTION_NAMES",
    "SUPPORTED_RESUME_TYPES",
    # Logger
    "setup_logging",
    "get_logger",
    "log",
]
