"""Process-wide property store.

Properties are an in-process key-value layer, distinct from environment
variables. Configuration sources read them as a merge layer and applied
alterations write to them, so code that reads properties directly sees the
same values.
"""

from threading import Lock
from typing import Dict, Mapping, Optional


class PropertyStore:
    """Thread-safe string key-value store.

    Usage:
        # Process-wide instance
        properties = PropertyStore.get_instance()
        properties.set("cache.enabled", "true")

        # Isolated instance, e.g. for tests
        properties = PropertyStore({"k": "v"})
    """

    _instance: Optional["PropertyStore"] = None
    _lock: Lock = Lock()

    def __init__(self, initial: Mapping[str, str] | None = None):
        """Initialize the store with optional initial properties."""
        self._properties: Dict[str, str] = dict(initial or {})
        self._change_lock = Lock()

    @classmethod
    def get_instance(cls) -> "PropertyStore":
        """Get or create the process-wide store."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the process-wide store (mainly for testing)."""
        with cls._lock:
            cls._instance = None

    def get(self, key: str, default: str | None = None) -> str | None:
        with self._change_lock:
            return self._properties.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set a property. Keys and values are stored as strings."""
        with self._change_lock:
            self._properties[str(key)] = str(value)

    def update(self, values: Mapping[str, str]) -> None:
        """Set several properties under a single lock acquisition."""
        with self._change_lock:
            for key, value in values.items():
                self._properties[str(key)] = str(value)

    def remove(self, key: str) -> str | None:
        with self._change_lock:
            return self._properties.pop(key, None)

    def clear(self) -> None:
        with self._change_lock:
            self._properties.clear()

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of all properties."""
        with self._change_lock:
            return dict(self._properties)

    def __contains__(self, key: object) -> bool:
        with self._change_lock:
            return key in self._properties

    def __len__(self) -> int:
        with self._change_lock:
            return len(self._properties)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} size={len(self)}>"


def get_properties() -> PropertyStore:
    """Get the process-wide property store."""
    return PropertyStore.get_instance()
