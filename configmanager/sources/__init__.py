from .annotated import AnnotatedConfiguration
from .base import ConfigurationSource
from .config_map import ConfigMap
from .static import StaticConfiguration

__all__ = [
    "AnnotatedConfiguration",
    "ConfigMap",
    "ConfigurationSource",
    "StaticConfiguration",
]
