"""Settings of the configuration manager itself.

This module holds the tunables of the manager's worker pool and shutdown
behaviour. They can be:
- Left at their defaults
- Loaded from environment variables (optionally with a custom prefix)
- Validated before a manager is built from them
"""

import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from loguru import logger


DEFAULT_ENV_PREFIX = "CONFIGMANAGER_"


@dataclass
class ManagerSettings:
    """Worker pool and lifecycle settings."""

    shutdown_timeout: float = 5.0
    max_workers: Optional[int] = None
    thread_name_prefix: str = "ConfigManager-Worker"

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> "ManagerSettings":
        """Build settings from defaults overridden by environment variables."""
        settings = cls()
        settings.load_from_env(prefix=prefix)
        return settings

    def load_from_env(self, prefix: str = DEFAULT_ENV_PREFIX) -> None:
        """Load settings from environment variables.

        Args:
            prefix: Prefix for environment variables (e.g., "CONFIGMANAGER_")

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env_vars = os.environ

        logger.info(f"Loading manager settings from environment variables with prefix={prefix}")

        mapping = {
            f"{prefix}SHUTDOWN_TIMEOUT": "shutdown_timeout",
            f"{prefix}MAX_WORKERS": "max_workers",
            f"{prefix}THREAD_NAME_PREFIX": "thread_name_prefix",
        }

        for env_key, attr_name in mapping.items():
            if env_key in env_vars:
                value = env_vars[env_key]
                # Type conversion
                if attr_name == "shutdown_timeout":
                    value = float(value)
                elif attr_name == "max_workers":
                    value = int(value) if value else None
                setattr(self, attr_name, value)

    def validate(self) -> Dict[str, List[str]]:
        """Validate current settings.

        Returns:
            Dictionary with validation errors by field
        """
        errors: Dict[str, List[str]] = {
            "shutdown_timeout": [],
            "max_workers": [],
            "thread_name_prefix": [],
        }

        if self.shutdown_timeout < 0:
            errors["shutdown_timeout"].append("Shutdown timeout cannot be negative")
        if self.max_workers is not None and self.max_workers < 1:
            errors["max_workers"].append("Max workers must be at least 1")
        if not self.thread_name_prefix:
            errors["thread_name_prefix"].append("Thread name prefix is required")

        # Remove empty error lists
        errors = {k: v for k, v in errors.items() if v}

        return errors
