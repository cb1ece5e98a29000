# Path: dto_link/config_loader.py
"""
Configuration Loader for dto_link

Loads configuration from a .env file and the process environment.
Singleton pattern ensures consistent configuration across all components.

All configuration comes from environment variables prefixed DTO_LINK_.
The perfect-match threshold is a fixed constant and is not
configurable here.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import NAME_MATCHER_DEFAULT


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_ENVIRONMENT: str = 'development'
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_NAME_MATCHER: str = NAME_MATCHER_DEFAULT


class ConfigLoader:
    """
    Singleton configuration loader for dto_link.

    Loads configuration from environment variables with type
    conversion and defaults.

    Example:
        config = ConfigLoader()
        matcher_name = config.get('name_matcher')   # 'default' or 'strict'
        log_dir = config.get('log_dir')             # Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        found in the project root (the directory above this package).
        """
        if ConfigLoader._initialized:
            return

        project_root = Path(__file__).resolve().parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT
            # ================================================================
            'environment': self._get_env('DTO_LINK_ENVIRONMENT', DEFAULT_ENVIRONMENT),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('DTO_LINK_LOG_DIR'),
            'log_level': self._get_env('DTO_LINK_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('DTO_LINK_LOG_CONSOLE', True),

            # ================================================================
            # DECODER CONFIGURATION
            # ================================================================
            'name_matcher': self._get_env('DTO_LINK_NAME_MATCHER', DEFAULT_NAME_MATCHER),
            'descriptor_dir': self._get_path('DTO_LINK_DESCRIPTOR_DIR'),
            'fail_on_errors': self._get_bool('DTO_LINK_FAIL_ON_ERRORS', True),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if value is None or value == '':
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"name_matcher={self._config.get('name_matcher')})"
        )


__all__ = ['ConfigLoader']
