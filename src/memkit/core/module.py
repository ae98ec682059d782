from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from memkit.core.pool import Pool, Slot, ValueType


class Status(Enum):
    """Outcome of ``Module.work`` for one phase-space point."""
    OK = 0
    NEXT = 1   # skip the remaining modules for this point
    ABORT = 2  # stop the whole run


class Module(ABC):
    """
    Abstract base class for the blocks evaluated at every phase-space point.
    """
    KEY: str = ""

    def __init__(self, pool: Pool, name: str) -> None:
        """
        Args:
            pool: The run's shared pool.
            name: Unique module name, used as the namespace of produced slots.
        """
        self.pool = pool
        self.name = name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"

    def produce(self, name: str, value_type: ValueType, value: Any = None) -> Slot:
        """Allocate an output slot ``<module name>::<name>``."""
        return self.pool.produce(self.name, name, value_type, value)

    @abstractmethod
    def work(self) -> Status:
        """Evaluate the module for the current point."""
        pass

    def dimensions(self) -> int:
        """Number of integration dimensions consumed by this module."""
        return 0
