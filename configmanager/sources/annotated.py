from typing import Any, Dict, Mapping

from loguru import logger

from ..exceptions import InvalidArgumentError
from ..naming import NameMapping
from ..properties import PropertyStore
from ..scanning import AnnotationScanner
from .base import ConfigurationSource


class AnnotatedConfiguration(ConfigurationSource):
    """Configuration source whose defaults come from configuration descriptors.

    Values in ``initial_map`` take precedence over descriptor defaults for the
    same key. Among descriptors, the first to declare a key wins.

    Usage:
        @dataclass
        class CacheConfig:
            cacheTtl: str = config_field("3600")        # key "cache_ttl"
            enabled: str = config_field("true", key="cache.enabled")

        source = AnnotatedConfiguration(CacheConfig, initial_map={"cache_ttl": "60"})
    """

    def __init__(
        self,
        *descriptors: Any,
        initial_map: Mapping[str, str] | None = None,
        name_mapper: NameMapping | None = None,
        properties: PropertyStore | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        if not descriptors:
            raise InvalidArgumentError("At least one configuration descriptor must be provided")

        self._descriptors = tuple(descriptors)
        self._scanner = AnnotationScanner(name_mapper)
        super().__init__(self._build_base(initial_map), properties=properties, environ=environ)

    @property
    def descriptors(self) -> tuple[Any, ...]:
        return self._descriptors

    def _build_base(self, initial_map: Mapping[str, str] | None = None) -> Dict[str, str]:
        """Seed from ``initial_map``, then add descriptor defaults for the remaining keys."""
        base = dict(initial_map or {})
        pairs = self._scanner.scan(self._descriptors, existing=base)
        base.update(pairs)
        logger.debug(f"Scanned {len(self._descriptors)} descriptors, {len(pairs)} defaults")
        return base

    def refresh(self) -> None:
        """Rebuild the base map from descriptor defaults only.

        Values from ``initial_map`` and values written by alterations are discarded.
        """
        self._config_map.replace(self._build_base())

    def describe(self) -> str:
        names = ", ".join(_descriptor_name(d) for d in self._descriptors)
        return f"descriptors=[{names}] size={len(self._config_map)}"


def _descriptor_name(descriptor: Any) -> str:
    if isinstance(descriptor, type):
        return descriptor.__name__
    return type(descriptor).__name__
