"""
=================================
Core infrastructure for querykit.
=================================

This package provides configuration management and logging setup used by
the execution layer and by applications embedding the statement builders.

Modules:
    config: Configuration management from environment variables
    logger: Centralized logging configuration and utilities

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Target database: {config.database_url}")
"""

__version__ = "1.0.0"
__all__ = ['get_logger', 'setup_logging', 'config', 'Config']

from core.config import Config, config
from core.logger import get_logger, setup_logging
