"""Adapter for plain numeric properties."""

from __future__ import annotations

import numbers
from typing import Any

from ..core import keypath
from ..core.casting import to_number
from ..core.exceptions import CastError, GenerationError, KeypathError, RetrievalError
from ..core.types import PropertyData
from .base_adapter import BaseValueAdapter


class NumericAdapter(BaseValueAdapter):
    """Adapter for real-valued scalars (ints, floats, fractions).

    Booleans are not animatable and are not supported.

    Usage:
        adapter = NumericAdapter()
        props = adapter.generate_properties(sprite.alpha, "alpha", sprite)
        adapter.calculate_value(props[0], 0.5)  # -> 0.5
    """

    name = "numeric"

    def supports(self, obj: Any) -> bool:
        return isinstance(obj, numbers.Real) and not isinstance(obj, bool)

    def generate_properties(self, obj: Any, path: str, target: Any) -> list[PropertyData]:
        if not self.supports(obj):
            raise GenerationError(
                "Object is not a number",
                {"path": path, "type": type(obj).__name__},
            )

        value = float(obj)
        owner = None if target is obj else target
        return [
            PropertyData(
                path=path,
                target=obj,
                target_object=owner,
                current=value,
                start=value,
            )
        ]

    def retrieve_value(self, obj: Any, path: str) -> float | None:
        try:
            value = keypath.resolve(obj, path)
        except KeypathError as e:
            raise RetrievalError(f"Cannot resolve '{path}'", {"error": str(e)}) from e

        if not self.supports(value):
            raise RetrievalError(
                "Value at path is not a number",
                {"path": path, "type": type(value).__name__},
            )
        return float(value)

    def update_value(self, obj: Any, new_values: dict[str, float]) -> Any | None:
        # scalars have no fields, the single new value replaces the old one
        if not new_values:
            return None
        return float(next(iter(new_values.values())))

    def retrieve_current_object_value(self, prop: PropertyData) -> float | None:
        value = self._read_owner_value(prop)
        if value is not None:
            return value

        try:
            return to_number(prop.target)
        except CastError:
            return None

    def calculate_value(self, prop: PropertyData, new_value: float) -> Any | None:
        return self.blend(prop, new_value)
