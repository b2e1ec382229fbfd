from typing import Mapping

from ..exceptions import InvalidArgumentError
from ..properties import PropertyStore
from .base import ConfigurationSource


class StaticConfiguration(ConfigurationSource):
    """Configuration source backed by an explicit map of values."""

    def __init__(
        self,
        initial_map: Mapping[str, str],
        properties: PropertyStore | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        if initial_map is None:
            raise InvalidArgumentError("Initial map cannot be None")
        super().__init__(initial_map, properties=properties, environ=environ)

    def describe(self) -> str:
        return f"size={len(self._config_map)}"
