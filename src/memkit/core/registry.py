from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from memkit.core.module import Module

if TYPE_CHECKING:
    from memkit.core.parameters import ParameterSet
    from memkit.core.pool import Pool

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, type[Module]] = {}

def register_module(cls: type[Module]) -> type[Module]:
    """Class decorator to register a module by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls

def create_module(key: str, pool: Pool, parameters: ParameterSet) -> Module:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No module registered for key '{key}'")
    logger.debug(f"Creating module '{parameters.module_name}' of type '{key}'")
    return cls(pool, parameters)

def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
