"""Settings of the configuration manager.

Responsibilities:
- Worker pool sizing and naming
- Shutdown drain bound
- Settings loading from environment variables
"""

from .settings import DEFAULT_ENV_PREFIX, ManagerSettings

__all__ = [
    "DEFAULT_ENV_PREFIX",
    "ManagerSettings",
]
