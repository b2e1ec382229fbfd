"""Exceptions raised by the configuration manager."""


class ConfigManagerError(Exception):
    """Base class for configuration manager errors."""


class InvalidArgumentError(ConfigManagerError, ValueError):
    """Raised for a missing or empty key, descriptor set or configuration."""


class InvalidStateError(ConfigManagerError, RuntimeError):
    """Raised when an operation is attempted after shutdown."""


class CoercionError(ConfigManagerError, ValueError):
    """Raised when a stored value cannot be converted to the requested type."""


class AlterationApplyError(ConfigManagerError):
    """Raised inside an alteration future when applying changes failed.

    The original exception is available as ``__cause__``.
    """
