import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping

from ..properties import PropertyStore
from .config_map import ConfigMap


class ConfigurationSource(ABC):
    """Abstract base class for configuration sources.

    A source owns a mutable base map and merges two read-only overlays on top
    of it, lowest to highest precedence:

        base map < properties < environment variables
    """

    _config_map: ConfigMap
    _properties: PropertyStore | None
    _environ: Mapping[str, str] | None

    def __init__(
        self,
        initial_map: Mapping[str, str] | None = None,
        properties: PropertyStore | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize the source.

        Args:
            initial_map: Values to seed the base map with
            properties: Property store to overlay (defaults to the process-wide one)
            environ: Environment to overlay (defaults to os.environ at read time)
        """
        self._config_map = ConfigMap(initial_map)
        self._properties = properties
        self._environ = environ

    def to_map(self) -> Dict[str, str]:
        """Merge base map, properties and environment into a new dict."""
        result = self._config_map.copy()
        result.update(self.get_properties())
        result.update(self.get_env())
        return result

    def get_config_map(self) -> ConfigMap:
        """Get the live base map that alterations write to."""
        return self._config_map

    @property
    def property_store(self) -> PropertyStore:
        if self._properties is not None:
            return self._properties
        return PropertyStore.get_instance()

    def get_properties(self) -> Dict[str, str]:
        """Get a snapshot of the property overlay."""
        return self.property_store.snapshot()

    def get_env(self) -> Dict[str, str]:
        """Get a snapshot of the environment overlay."""
        environ = self._environ if self._environ is not None else os.environ
        return dict(environ)

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description, used in logs."""
        raise NotImplementedError("Subclasses must implement this method.")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.describe()}>"

    def __str__(self) -> str:
        return self.__repr__()
