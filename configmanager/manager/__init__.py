from .coercion import ValueType, coerce, resolve_value_type
from .config_manager import ConfigManager, get_config_manager
from .worker_pool import WorkerPool

__all__ = [
    "ConfigManager",
    "ValueType",
    "WorkerPool",
    "coerce",
    "get_config_manager",
    "resolve_value_type",
]
