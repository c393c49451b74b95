"""
======================================
Configuration management for querykit.
======================================

Loads configuration from environment variables (.env file) and provides a
Config singleton for the execution and logging layers. The statement
builders themselves take no configuration: everything they need is passed
to the builder methods.

Environment Variables:
    QUERYKIT_DATABASE_URL: SQLAlchemy URL of the target database (default: sqlite://)
    QUERYKIT_ECHO_SQL: Log every statement SQLAlchemy executes (default: false)
    QUERYKIT_LOG_LEVEL: Level used by core.logger.setup_logging (default: INFO)
    QUERYKIT_LOG_FILE: Optional log file name

Example:
    >>> from core.config import config
    >>>
    >>> engine_url = config.database_url
    >>> print(f"Logging at {config.log_level}")
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class DatabaseConfig:
    """Database settings for the execution layer.

    Attributes:
        url: SQLAlchemy database URL
        echo: Enable SQLAlchemy statement logging
    """

    url: str
    echo: bool = False


@dataclass
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Logging level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name, written under log_dir
        log_dir: Directory for log files
    """

    level: str
    log_file: Optional[str]
    log_dir: Path


class Config:
    """Centralized configuration manager.

    Attributes:
        db: DatabaseConfig instance
        logging: LoggingConfig instance

    Example:
        >>> config = Config()
        >>> print(config.database_url)
        sqlite://
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.db = DatabaseConfig(
            url=os.getenv('QUERYKIT_DATABASE_URL', 'sqlite://'),
            echo=_env_flag('QUERYKIT_ECHO_SQL')
        )

        project_root = Path(__file__).parent.parent
        self.logging = LoggingConfig(
            level=os.getenv('QUERYKIT_LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('QUERYKIT_LOG_FILE') or None,
            log_dir=project_root / 'logs'
        )

    @property
    def database_url(self) -> str:
        """Get the SQLAlchemy database URL."""
        return self.db.url

    @property
    def echo_sql(self) -> bool:
        """Get whether SQLAlchemy should echo statements."""
        return self.db.echo

    @property
    def log_level(self) -> str:
        """Get the logging level name."""
        return self.logging.level


# Global configuration instance
config = Config()
