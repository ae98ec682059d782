"""
Shared Value Pool
=================
Run-scoped store through which modules exchange named, typed values.

Why is this file needed?
------------------------
1. Decoupling: A module never holds a reference to another module. It reads
   values produced by others through an ``InputTag`` and writes its own
   results into slots it produced.
2. Early failure: Tags are resolved once, when the consuming module is built.
   A missing producer or a type mismatch is reported before the first point
   is evaluated.

Classes:
    ValueType: Type of the value stored in a slot.
    Slot: A single named value owned by one module.
    Pool: Mapping (owner, name) -> Slot.
    InputTag: Reference ``module::parameter[/index]`` into the pool.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
import re
from typing import Any, Optional

from memkit.core.errors import BindError, ConfigurationError

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"^(?P<module>[A-Za-z_][\w\-]*)::(?P<parameter>[A-Za-z_][\w\-]*)(?:/(?P<index>\d+))?$")


class ValueType(StrEnum):
    DOUBLE = "double"
    LORENTZ_VECTOR = "LorentzVector"


@dataclass
class Slot:
    """
    A named value in the pool. Array slots hold a sequence of elements of
    ``value_type`` and are addressed with an indexed tag.
    """
    owner: str
    name: str
    value_type: ValueType
    value: Any = None
    array: bool = False
    consumers: list[InputTag] = field(default_factory=list, repr=False, compare=False)

    @property
    def key(self) -> str:
        return f"{self.owner}::{self.name}"


class Pool:
    """
    Registry of every value produced during a run.
    """

    def __init__(self) -> None:
        self._slots: dict[tuple[str, str], Slot] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def produce(
        self,
        owner: str,
        name: str,
        value_type: ValueType,
        value: Any = None,
        array: bool = False
    ) -> Slot:
        """
        Allocate a new slot.

        Args:
            owner: Name of the producing module.
            name: Slot name, unique within the owner's namespace.
            value_type: Type of the stored value (of each element for arrays).
            value: Initial value.
            array: Whether the slot holds a sequence.

        Raises:
            ValueError: If the slot already exists.

        Returns:
            The allocated slot.
        """
        key = (owner, name)
        if key in self._slots:
            raise ValueError(f"Slot '{owner}::{name}' is already produced.")
        slot = Slot(owner=owner, name=name, value_type=value_type, value=value, array=array)
        self._slots[key] = slot
        logger.debug(f"Produced slot '{slot.key}' ({value_type}{'[]' if array else ''})")
        return slot

    def slot(self, owner: str, name: str) -> Slot:
        try:
            return self._slots[(owner, name)]
        except KeyError:
            raise KeyError(f"No slot '{owner}::{name}' in the pool") from None

    def exists(self, owner: str, name: str) -> bool:
        return (owner, name) in self._slots

    def slots(self) -> list[Slot]:
        return list(self._slots.values())

    def keys(self) -> list[str]:
        return [slot.key for slot in self._slots.values()]


@dataclass
class InputTag:
    """
    Reference to a value in the pool: ``module::parameter`` or
    ``module::parameter/index`` for one element of an array slot.
    """
    module: str
    parameter: str
    index: Optional[int] = None
    _slot: Optional[Slot] = field(default=None, init=False, repr=False, compare=False)

    def __str__(self) -> str:
        base = f"{self.module}::{self.parameter}"
        return base if self.index is None else f"{base}/{self.index}"

    @staticmethod
    def is_input_tag(value: Any) -> bool:
        return isinstance(value, str) and _TAG_PATTERN.match(value) is not None

    @classmethod
    def parse(cls, value: str) -> InputTag:
        """
        Parse a tag string.

        Raises:
            ConfigurationError: If ``value`` is not of the form ``module::parameter[/index]``.
        """
        match = _TAG_PATTERN.match(value) if isinstance(value, str) else None
        if match is None:
            raise ConfigurationError(f"'{value}' is not a valid input tag (expected 'module::parameter[/index]').")
        index = match.group("index")
        return cls(match.group("module"), match.group("parameter"), int(index) if index is not None else None)

    @property
    def is_indexed(self) -> bool:
        return self.index is not None

    @property
    def resolved(self) -> bool:
        return self._slot is not None

    def resolve(self, pool: Pool, value_type: ValueType) -> None:
        """
        Bind the tag to its slot. Called once, while the consuming module is built.

        Args:
            pool: The run's pool.
            value_type: Expected type of the referenced value.

        Raises:
            BindError: If the slot does not exist, the index does not match the
                slot layout or points past the end of a filled array, or the value
                type differs.
        """
        if not pool.exists(self.module, self.parameter):
            msg = f"Cannot resolve '{self}': no such value in the pool."
            logger.error(msg)
            raise BindError(msg)

        slot = pool.slot(self.module, self.parameter)
        if self.is_indexed and not slot.array:
            msg = f"Cannot resolve '{self}': '{slot.key}' is not an array."
            logger.error(msg)
            raise BindError(msg)
        if not self.is_indexed and slot.array:
            msg = f"Cannot resolve '{self}': '{slot.key}' is an array, an index is required."
            logger.error(msg)
            raise BindError(msg)
        if slot.value_type != value_type:
            msg = f"Cannot resolve '{self}': expected {value_type}, pool holds {slot.value_type}."
            logger.error(msg)
            raise BindError(msg)
        if self.is_indexed and slot.value is not None and len(slot.value) > 0 and self.index >= len(slot.value):
            msg = f"Cannot resolve '{self}': '{slot.key}' holds only {len(slot.value)} element(s)."
            logger.error(msg)
            raise BindError(msg)

        self._slot = slot
        slot.consumers.append(self)
        logger.debug(f"Resolved '{self}' ({value_type})")

    def get(self) -> Any:
        """Current value of the referenced slot (or array element)."""
        if self._slot is None:
            raise RuntimeError(f"Input tag '{self}' used before resolution.")
        if self.index is None:
            return self._slot.value
        return self._slot.value[self.index]
