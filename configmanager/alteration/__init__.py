from .alteration import ConfigurationAlteration
from .listeners import ConfigurationChangeListener, ListenerRegistry, notify_listeners

__all__ = [
    "ConfigurationAlteration",
    "ConfigurationChangeListener",
    "ListenerRegistry",
    "notify_listeners",
]
