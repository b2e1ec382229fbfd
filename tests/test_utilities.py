from dataclasses import dataclass
from threading import Lock
from typing import List, Mapping

from configmanager import ConfigValue, config_field


class RecordingListener:
    """Change listener that records every batch it receives."""

    def __init__(self):
        """Initialize the listener."""
        self.calls: List[dict] = []
        self._lock = Lock()

    def __call__(self, changes: Mapping[str, str]) -> None:
        with self._lock:
            self.calls.append(dict(changes))

    @property
    def call_count(self) -> int:
        with self._lock:
            return len(self.calls)


class FailingListener:
    """Change listener that raises on every call."""

    def __init__(self, error_message: str = "listener failed"):
        self.error_message = error_message
        self.call_count = 0

    def __call__(self, changes: Mapping[str, str]) -> None:
        self.call_count += 1
        raise RuntimeError(self.error_message)


@dataclass
class CacheConfig:
    """Cache settings declared with dataclass field markers."""

    cacheTtl: str = config_field("3600")
    cacheSize: str = config_field("1000")
    enabled: str = config_field("true", key="cache.enabled")
    evictionPolicy: str = config_field("LRU")
    comment: str = "not a configuration field"


@dataclass
class OverridingCacheConfig:
    """Declares keys already claimed by CacheConfig."""

    cacheTtl: str = config_field("60")
    region: str = config_field("eu-west")


class DatabaseConfig:
    """Database settings registered explicitly."""

    @classmethod
    def describe_defaults(cls):
        return [
            ("dbHost", ConfigValue(default_value="localhost")),
            ("dbPort", ConfigValue(default_value="5432")),
            ("poolSize", ConfigValue(default_value="10", use_field_name_mapping=False)),
            ("password", ConfigValue()),
        ]
