from concurrent.futures import Executor, Future
from threading import Lock
from types import MappingProxyType
from typing import Any, Dict, Iterable, MutableMapping

from loguru import logger

from ..exceptions import AlterationApplyError, InvalidArgumentError
from ..properties import PropertyStore
from .listeners import ConfigurationChangeListener, notify_listeners


class ConfigurationAlteration:
    """Staged batch of configuration writes, applied asynchronously.

    Usage:
        future = (
            manager.alter_configuration()
            .set_config_value("cache_ttl", "60")
            .set_config_value("cache.enabled", False)
            .apply()
        )
        future.result()

    ``apply()`` snapshots the pending changes and submits one unit of work
    that writes the batch into the target map, mirrors it into the property
    store and then notifies the listeners captured when the alteration was
    created. Failures are delivered only through the returned future.
    """

    def __init__(
        self,
        target_config_map: MutableMapping[str, str],
        executor: Executor,
        listeners: Iterable[ConfigurationChangeListener] | None = None,
        properties: PropertyStore | None = None,
    ):
        """Initialize the alteration.

        Args:
            target_config_map: Base map the changes are written to
            executor: Executor running the apply work
            listeners: Listeners to notify, copied at construction
            properties: Property store to mirror changes into (defaults to the process-wide one)
        """
        if target_config_map is None:
            raise InvalidArgumentError("Target config map cannot be None")
        if executor is None:
            raise InvalidArgumentError("Executor cannot be None")

        self._target_config_map = target_config_map
        self._executor = executor
        self._listeners = tuple(listeners or ())
        self._properties = properties if properties is not None else PropertyStore.get_instance()
        self._pending_changes: Dict[str, str | None] = {}
        self._pending_lock = Lock()
        self._applied = False

    def set_config_value(self, key: str, value: Any) -> "ConfigurationAlteration":
        """Stage a change.

        Non-string values are converted to strings. A None value is staged as
        is and makes the future returned by apply() fail.
        """
        if not key:
            raise InvalidArgumentError("Config key cannot be None or empty")
        with self._pending_lock:
            self._pending_changes[key] = _to_config_string(value)
        return self

    def get_pending_changes(self) -> Dict[str, str | None]:
        """Get a copy of the staged changes."""
        with self._pending_lock:
            return dict(self._pending_changes)

    def clear(self) -> None:
        """Discard staged changes. Has no effect once apply() has been called."""
        with self._pending_lock:
            if self._applied:
                logger.debug("Ignoring clear() on an applied alteration")
                return
            self._pending_changes.clear()

    def apply(self) -> "Future[None]":
        """Apply the staged changes asynchronously."""
        with self._pending_lock:
            self._applied = True
            snapshot = dict(self._pending_changes)
        try:
            return self._executor.submit(self._apply_changes, snapshot)
        except RuntimeError as e:
            logger.error(f"Could not schedule configuration changes: {e}")
            future: Future[None] = Future()
            error = AlterationApplyError("Failed to apply configuration changes")
            error.__cause__ = e
            future.set_exception(error)
            return future

    def _apply_changes(self, snapshot: Dict[str, str | None]) -> None:
        try:
            changes = dict(snapshot)
            missing = sorted(k for k, v in changes.items() if v is None)
            if missing:
                raise InvalidArgumentError(f"Config values cannot be None: {', '.join(missing)}")

            self._target_config_map.update(changes)
            # Mirror into properties so direct readers of the store see the change
            self._properties.update(changes)
        except Exception as e:
            logger.error(f"Failed to apply configuration changes: {e}")
            raise AlterationApplyError("Failed to apply configuration changes") from e

        logger.debug(f"Applied {len(changes)} configuration changes")
        notify_listeners(self._listeners, MappingProxyType(changes))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} pending={len(self.get_pending_changes())}>"


def _to_config_string(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
