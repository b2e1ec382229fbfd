"""Runtime configuration manager.

Merges descriptor defaults, process properties and environment variables
into one mapping and applies runtime changes asynchronously.
"""

from .alteration import ConfigurationAlteration, ConfigurationChangeListener, ListenerRegistry
from .config import ManagerSettings
from .exceptions import (
    AlterationApplyError,
    CoercionError,
    ConfigManagerError,
    InvalidArgumentError,
    InvalidStateError,
)
from .manager import ConfigManager, ValueType, WorkerPool, coerce, get_config_manager
from .naming import FieldNameMapper, NameMapping, name_mapping
from .properties import PropertyStore, get_properties
from .scanning import AnnotationScanner, ConfigValue, DescribesDefaults, config_field
from .sources import (
    AnnotatedConfiguration,
    ConfigMap,
    ConfigurationSource,
    StaticConfiguration,
)

__all__ = [
    "AlterationApplyError",
    "AnnotatedConfiguration",
    "AnnotationScanner",
    "CoercionError",
    "ConfigManager",
    "ConfigManagerError",
    "ConfigMap",
    "ConfigValue",
    "ConfigurationAlteration",
    "ConfigurationChangeListener",
    "ConfigurationSource",
    "DescribesDefaults",
    "FieldNameMapper",
    "InvalidArgumentError",
    "InvalidStateError",
    "ListenerRegistry",
    "ManagerSettings",
    "NameMapping",
    "PropertyStore",
    "StaticConfiguration",
    "ValueType",
    "WorkerPool",
    "coerce",
    "config_field",
    "get_config_manager",
    "get_properties",
    "name_mapping",
]
