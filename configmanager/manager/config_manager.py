"""Configuration manager facade.

This module provides the object applications read configuration through.
It can:
- Merge defaults, properties and environment variables into one mapping
- Read values as strings or as typed values
- Apply batches of changes asynchronously and notify listeners
- Swap or refresh the active configuration source at runtime
"""

import atexit
from concurrent.futures import Future
from threading import Lock
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import dotenv
from loguru import logger

from ..alteration import ConfigurationAlteration, ConfigurationChangeListener, ListenerRegistry
from ..config import ManagerSettings
from ..exceptions import CoercionError, InvalidArgumentError, InvalidStateError
from ..sources import AnnotatedConfiguration, ConfigurationSource, StaticConfiguration
from .coercion import coerce, resolve_value_type
from .worker_pool import WorkerPool


class ConfigManager:
    """Runtime configuration manager.

    Features:
    - One active configuration source at a time, replaceable at runtime
    - Thread-safe asynchronous alterations on a shared worker pool
    - Change listeners notified with each applied batch
    - Optional process-wide instance for global access

    Every read merges the active source again (no cached view), so reads
    cost O(number of keys).

    Usage:
        # Explicit instance
        manager = ConfigManager(ConfigManager.create_custom_configuration(CacheConfig))
        ttl = manager.get_typed_config_value("cache_ttl", ValueType.INTEGER, 3600)

        # Process-wide instance
        manager = ConfigManager.get_instance()
        manager.alter_configuration_async("cache_ttl", "60").result()
    """

    _instance: Optional["ConfigManager"] = None
    _lock: Lock = Lock()

    def __init__(
        self,
        configuration: ConfigurationSource | None = None,
        settings: ManagerSettings | None = None,
    ):
        """Initialize the manager.

        Args:
            configuration: Active source (defaults to an empty StaticConfiguration)
            settings: Worker pool and shutdown settings
        """
        self.settings = settings or ManagerSettings()
        errors = self.settings.validate()
        if errors:
            raise InvalidArgumentError(f"Invalid manager settings: {errors}")

        self._configuration = configuration or StaticConfiguration({})
        self._listeners = ListenerRegistry()
        self._worker_pool = WorkerPool(
            max_workers=self.settings.max_workers,
            thread_name_prefix=self.settings.thread_name_prefix,
        )
        self._is_shutdown = False
        self._shutdown_lock = Lock()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get or create the process-wide manager.

        The first call loads a .env file, reads ManagerSettings from the
        environment and registers shutdown() to run at interpreter exit.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    dotenv.load_dotenv()
                    instance = cls(settings=ManagerSettings.from_env())
                    atexit.register(instance.shutdown)
                    cls._instance = instance
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Shut down and drop the process-wide manager (mainly for testing)."""
        with cls._lock:
            if cls._instance is not None:
                atexit.unregister(cls._instance.shutdown)
                cls._instance.shutdown()
            cls._instance = None

    # Reads

    def get_configuration_map(self) -> Dict[str, str]:
        """Get the merged configuration as a new dict."""
        return self._configuration.to_map()

    def get_configuration_snapshot(self) -> Mapping[str, str]:
        """Get a read-only snapshot of the merged configuration."""
        return MappingProxyType(self.get_configuration_map())

    def get_config_value(self, key: str, default: str | None = None) -> str | None:
        """Get a configuration value, or ``default`` if the key is not set."""
        if not key:
            return default
        return self.get_configuration_map().get(key, default)

    def get_typed_config_value(self, key: str, value_type: Any, default: Any = None) -> Any:
        """Get a configuration value converted to ``value_type``.

        Args:
            key: Configuration key
            value_type: A ValueType, its name, or one of str, int, float, bool
            default: Returned when the key is missing, the type is unsupported
                or the value cannot be converted

        Returns:
            The converted value or ``default``
        """
        if not key or value_type is None:
            return default

        value = self.get_config_value(key)
        if value is None:
            return default

        resolved = resolve_value_type(value_type)
        if resolved is None:
            logger.warning(f"Unsupported type: {value_type!r}, returning default")
            return default

        try:
            return coerce(value, resolved)
        except CoercionError:
            logger.warning(
                f"Failed to parse '{value}' as {resolved.value} for key '{key}', returning default"
            )
            return default

    def has_config_value(self, key: str) -> bool:
        return bool(key) and key in self.get_configuration_map()

    def get_configuration_size(self) -> int:
        return len(self.get_configuration_map())

    # Alterations

    def alter_configuration(self) -> ConfigurationAlteration:
        """Create an alteration bound to the active source.

        Raises:
            InvalidStateError: If the manager has been shut down
        """
        self._check_not_shutdown()
        configuration = self._configuration
        return ConfigurationAlteration(
            configuration.get_config_map(),
            self._worker_pool,
            self._listeners.snapshot(),
            properties=configuration.property_store,
        )

    def alter_configuration_async(self, key: str, value: Any) -> "Future[None]":
        """Set a single configuration value asynchronously.

        An empty key yields an already failed future; nothing is scheduled.
        """
        self._check_not_shutdown()
        if not key:
            return _failed_future(InvalidArgumentError("Config key cannot be None or empty"))
        return self.alter_configuration().set_config_value(key, value).apply()

    def alter_configuration_many_async(self, changes: Mapping[str, Any] | None) -> "Future[None]":
        """Apply a batch of configuration changes asynchronously.

        No changes yields an already completed future; nothing is scheduled.
        """
        self._check_not_shutdown()
        if not changes:
            return _completed_future()

        alteration = self.alter_configuration()
        for key, value in changes.items():
            alteration.set_config_value(key, value)
        return alteration.apply()

    # Sources

    def set_configuration(self, configuration: ConfigurationSource) -> None:
        """Replace the active configuration source."""
        if configuration is None:
            raise InvalidArgumentError("Configuration cannot be None")
        self._configuration = configuration
        logger.info(f"Configuration set to: {type(configuration).__name__}")

    def get_current_configuration(self) -> ConfigurationSource:
        return self._configuration

    def refresh(self) -> None:
        """Rebuild the defaults of an annotated source. Static sources are left as is."""
        configuration = self._configuration
        if isinstance(configuration, AnnotatedConfiguration):
            configuration.refresh()
            logger.info("Configuration refreshed")
        else:
            logger.warning(
                f"Refresh is only supported for AnnotatedConfiguration, not {type(configuration).__name__}"
            )

    @staticmethod
    def create_basic_configuration(initial_map: Mapping[str, str]) -> StaticConfiguration:
        return StaticConfiguration(initial_map)

    @staticmethod
    def create_custom_configuration(
        *descriptors: Any,
        initial_map: Mapping[str, str] | None = None,
    ) -> AnnotatedConfiguration:
        return AnnotatedConfiguration(*descriptors, initial_map=initial_map)

    # Listeners

    def add_configuration_change_listener(self, listener: ConfigurationChangeListener) -> None:
        if listener is not None:
            self._listeners.add(listener)
            logger.debug("Added configuration change listener")

    def remove_configuration_change_listener(self, listener: ConfigurationChangeListener) -> None:
        if listener is not None:
            self._listeners.remove(listener)
            logger.debug("Removed configuration change listener")

    def clear_configuration_change_listeners(self) -> None:
        self._listeners.clear()
        logger.debug("Cleared all configuration change listeners")

    def get_listener_count(self) -> int:
        return len(self._listeners)

    # Lifecycle

    def shutdown(self) -> None:
        """Stop accepting alterations and drain the worker pool.

        Waits up to ``settings.shutdown_timeout`` for in-flight alterations,
        then cancels queued ones and waits once more. Calling it again is a
        no-op.
        """
        with self._shutdown_lock:
            if self._is_shutdown:
                return
            self._is_shutdown = True

        timeout = self.settings.shutdown_timeout
        if not self._worker_pool.drain(timeout):
            logger.warning("Worker pool did not terminate in time, forcing shutdown")
            if not self._worker_pool.terminate(timeout):
                logger.error("Worker pool did not terminate after forced shutdown")
        logger.info("ConfigManager shutdown complete")

    def is_shutdown(self) -> bool:
        return self._is_shutdown

    def _check_not_shutdown(self) -> None:
        if self._is_shutdown:
            raise InvalidStateError("ConfigManager has been shutdown")

    def __enter__(self) -> "ConfigManager":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} configuration={self._configuration!r} shutdown={self._is_shutdown}>"


def _failed_future(error: BaseException) -> "Future[None]":
    future: Future[None] = Future()
    future.set_exception(error)
    return future


def _completed_future() -> "Future[None]":
    future: Future[None] = Future()
    future.set_result(None)
    return future


# Convenience function for global access
def get_config_manager() -> ConfigManager:
    """Get the process-wide configuration manager.

    Returns:
        ConfigManager singleton instance
    """
    return ConfigManager.get_instance()
