import dataclasses
from typing import Any, Container, Iterable, Iterator, Sequence

from loguru import logger

from ..naming import FieldNameMapper, NameMapping
from .markers import CONFIG_VALUE_METADATA, ConfigValue, DescribesDefaults


class AnnotationScanner:
    """Collects configuration defaults from configuration descriptors.

    A descriptor is a class (or an instance) that either implements
    ``describe_defaults()`` (a classmethod when registering the class itself)
    or is a dataclass whose fields were declared with ``config_field()``.

    The first descriptor to claim a key wins: later fields and descriptors
    never override a key that was already emitted or is listed in
    ``existing``.
    """

    name_mapper: NameMapping

    def __init__(self, name_mapper: NameMapping | None = None):
        """Initialize the scanner."""
        self.name_mapper = name_mapper or FieldNameMapper()

    def scan(
        self,
        descriptors: Sequence[Any],
        existing: Container[str] = (),
    ) -> list[tuple[str, str]]:
        """Scan descriptors for defaults.

        Args:
            descriptors: Configuration classes or instances, in precedence order
            existing: Keys already set by the caller, which block defaults

        Returns:
            Ordered list of (key, default_value) pairs
        """
        pairs: list[tuple[str, str]] = []
        seen: set[str] = set()

        for descriptor in descriptors or ():
            if descriptor is None:
                continue
            try:
                members = list(self._iter_members(descriptor))
            except Exception as e:
                logger.warning(f"Skipping configuration descriptor {descriptor!r}: {e}")
                continue

            for field_name, marker in members:
                try:
                    key = self.determine_key(field_name, marker)
                    default_value = marker.default_value
                    if not key or not default_value:
                        continue
                    if key in seen or key in existing:
                        continue
                    seen.add(key)
                    pairs.append((key, str(default_value)))
                except Exception as e:
                    logger.debug(f"Skipping field {field_name!r} of {descriptor!r}: {e}")

        return pairs

    def determine_key(self, field_name: str, marker: ConfigValue) -> str:
        """Resolve the configuration key of a marked field."""
        if marker.key:
            return marker.key

        if marker.use_field_name_mapping:
            return self.name_mapper.map(field_name)

        return field_name

    def _iter_members(self, descriptor: Any) -> Iterator[tuple[str, ConfigValue]]:
        """Yield (field_name, marker) pairs declared by a descriptor."""
        if isinstance(descriptor, DescribesDefaults):
            yield from _checked_members(descriptor.describe_defaults())
            return

        if not dataclasses.is_dataclass(descriptor):
            raise TypeError("not a dataclass and no describe_defaults()")

        for f in dataclasses.fields(descriptor):
            marker = f.metadata.get(CONFIG_VALUE_METADATA)
            if isinstance(marker, ConfigValue):
                yield f.name, marker


def _checked_members(members: Iterable[Any]) -> Iterator[tuple[str, ConfigValue]]:
    for member in members:
        try:
            field_name, marker = member
        except (TypeError, ValueError):
            logger.debug(f"Ignoring malformed member {member!r}")
            continue
        if isinstance(marker, ConfigValue):
            yield field_name, marker
        else:
            logger.debug(f"Ignoring unmarked member {field_name!r}")
