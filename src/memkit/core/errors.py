from __future__ import annotations


class ConfigurationError(ValueError):
    """A module received a parameter set it cannot be built from."""


class BindError(ConfigurationError):
    """An input tag could not be resolved against the pool."""
