"""Core type definitions for motionkit library.

This module defines the fundamental types shared by adapters and the
animation engine that drives them: the property descriptor, the adapter
contract, and the explicit outcome of a delegated adapter call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


@dataclass
class PropertyData:
    """Descriptor for one animatable property.

    Attributes:
        path: Dotted keypath from the owning object to the property
        target: The value actually replaced when the property changes
        target_object: Object through which ``target`` is reached, or None
            when ``target`` itself is replaced wholesale
        current: Last known numeric value
        start: Interpolation start value
        end: Interpolation end value
        parent_path: Keypath of the value written back when
            ``replace_parent`` is set (e.g. the struct holding a field)
        replace_parent: Whether a calculated value replaces the parent value
    """

    path: str
    target: Any = None
    target_object: Any = None
    current: float = 0.0
    start: float = 0.0
    end: float = 0.0
    parent_path: str | None = None
    replace_parent: bool = False

    def __post_init__(self) -> None:
        self.current = float(self.current)
        self.start = float(self.start)
        self.end = float(self.end)

    @property
    def delta(self) -> float:
        """Distance between start and end values."""
        return self.end - self.start


@runtime_checkable
class ValueAdapter(Protocol):
    """Contract every value adapter (and every adapter group) satisfies."""

    name: str
    additive: bool
    additive_weighting: float

    def supports(self, obj: Any) -> bool:
        ...

    def accepts_keypath(self, obj: Any) -> bool:
        ...

    def generate_properties(self, obj: Any, path: str, target: Any) -> list[PropertyData]:
        ...

    def retrieve_value(self, obj: Any, path: str) -> float | None:
        ...

    def update_value(self, obj: Any, new_values: dict[str, float]) -> Any | None:
        ...

    def retrieve_current_object_value(self, prop: PropertyData) -> float | None:
        ...

    def calculate_value(self, prop: PropertyData, new_value: float) -> Any | None:
        ...


class Outcome(str, Enum):
    """Outcome of delegating a call to a single adapter."""

    HANDLED = "handled"
    NOT_HANDLED = "not_handled"
    FAILED = "failed"


@dataclass
class DispatchResult:
    """Result of one delegated adapter call.

    ``value`` is only meaningful for HANDLED results; ``error`` only for
    FAILED ones.
    """

    outcome: Outcome
    value: Any = None
    error: BaseException | None = None
    adapter_name: str | None = None

    @classmethod
    def handled(cls, value: Any, adapter_name: str | None = None) -> DispatchResult:
        return cls(Outcome.HANDLED, value=value, adapter_name=adapter_name)

    @classmethod
    def not_handled(cls) -> DispatchResult:
        return cls(Outcome.NOT_HANDLED)

    @classmethod
    def failed(cls, error: BaseException, adapter_name: str | None = None) -> DispatchResult:
        return cls(Outcome.FAILED, error=error, adapter_name=adapter_name)

    @property
    def is_handled(self) -> bool:
        return self.outcome is Outcome.HANDLED

    @property
    def has_value(self) -> bool:
        """True when the call was handled and produced a value."""
        return self.outcome is Outcome.HANDLED and self.value is not None
