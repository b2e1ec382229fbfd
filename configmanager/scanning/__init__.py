from .markers import CONFIG_VALUE_METADATA, ConfigValue, DescribesDefaults, config_field
from .scanner import AnnotationScanner

__all__ = [
    "AnnotationScanner",
    "ConfigValue",
    "CONFIG_VALUE_METADATA",
    "DescribesDefaults",
    "config_field",
]
