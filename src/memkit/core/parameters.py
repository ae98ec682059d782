"""
Parameter sets handed to modules at construction.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from memkit.core.errors import ConfigurationError
from memkit.core.pool import InputTag

logger = logging.getLogger(__name__)

_MISSING = object()


class ParameterSet:
    """
    Configuration of a single module: its registered type, its unique name
    and a flat mapping of parameters.
    """

    def __init__(self, module_type: str, module_name: str, parameters: Mapping[str, Any] | None = None) -> None:
        self.module_type = module_type
        self.module_name = module_name
        self._parameters: dict[str, Any] = dict(parameters or {})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type='{self.module_type}', name='{self.module_name}')"

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> ParameterSet:
        """
        Build from ``{"type": ..., "name": ..., "parameters": {...}}``.

        Raises:
            ConfigurationError: If ``type`` or ``name`` is missing.
        """
        for key in ("type", "name"):
            if not data.get(key):
                raise ConfigurationError(f"Module configuration is missing '{key}': {dict(data)}")
        return ParameterSet(str(data["type"]), str(data["name"]), data.get("parameters", {}))

    def exists(self, key: str) -> bool:
        return key in self._parameters

    def get(self, key: str, expected: type, default: Any = _MISSING) -> Any:
        """
        Get a parameter converted to ``expected``.

        Args:
            key: Parameter name.
            expected: ``InputTag``, ``float``, ``int``, ``str`` or ``bool``.
            default: Returned when the key is absent.

        Raises:
            ConfigurationError: If the key is absent and no default is given,
                or the value cannot be read as ``expected``.
        """
        if key not in self._parameters:
            if default is not _MISSING:
                return default
            msg = f"Module '{self.module_name}': missing required parameter '{key}'."
            logger.error(msg)
            raise ConfigurationError(msg)

        value = self._parameters[key]

        if expected is InputTag:
            if isinstance(value, InputTag):
                return InputTag(value.module, value.parameter, value.index)
            if InputTag.is_input_tag(value):
                return InputTag.parse(value)
        elif expected is float:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return float(value)
        elif expected is int:
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        elif isinstance(value, expected):
            return value

        msg = (f"Module '{self.module_name}': parameter '{key}' should be of type "
               f"{expected.__name__}, got {value!r}.")
        logger.error(msg)
        raise ConfigurationError(msg)
