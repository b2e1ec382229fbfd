from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol, runtime_checkable


CONFIG_VALUE_METADATA = "configmanager.config_value"


@dataclass(frozen=True)
class ConfigValue:
    """Marker carrying the configuration key and default of a field."""

    default_value: str = ""
    key: str = ""
    use_field_name_mapping: bool = True


@runtime_checkable
class DescribesDefaults(Protocol):
    """Explicit registration of configuration defaults.

    Implementations return ``(field_name, ConfigValue)`` pairs in the order
    they should be considered by the scanner.
    """

    def describe_defaults(self) -> Iterable[tuple[str, ConfigValue]]:
        ...


def config_field(
    default_value: str = "",
    key: str = "",
    use_field_name_mapping: bool = True,
) -> Any:
    """Declare a dataclass field carrying a ConfigValue marker.

    Usage:
        @dataclass
        class CacheConfig:
            cacheTtl: str = config_field("3600")
            enabled: str = config_field("true", key="cache.enabled")
    """
    marker = ConfigValue(
        default_value=default_value,
        key=key,
        use_field_name_mapping=use_field_name_mapping,
    )
    return field(default=default_value, metadata={CONFIG_VALUE_METADATA: marker})
