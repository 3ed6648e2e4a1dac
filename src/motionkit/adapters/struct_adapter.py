"""Adapter for immutable value structs.

Value structs are named tuples such as ``Point(x, y)`` or
``Rect(x, y, width, height)``. Their fields cannot be assigned in place, so
every change produces a new struct that replaces the old one on its owner.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any

from ..core import keypath
from ..core.casting import is_struct_value, to_number
from ..core.exceptions import CastError, GenerationError, KeypathError, RetrievalError
from ..core.types import PropertyData
from .base_adapter import BaseValueAdapter

logger = logging.getLogger(__name__)


def _is_numeric_field(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class StructAdapter(BaseValueAdapter):
    """Adapter for named-tuple value structs with numeric fields."""

    name = "struct"

    def supports(self, obj: Any) -> bool:
        return is_struct_value(obj)

    def generate_properties(self, obj: Any, path: str, target: Any) -> list[PropertyData]:
        """Generate one property per numeric field of the struct.

        Args:
            obj: The struct value found at ``path``
            path: Keypath of the struct on ``target`` (empty for a bare struct)
            target: Object owning the struct

        Returns:
            List of property descriptors, one per numeric field

        Raises:
            GenerationError: If obj is not a struct or has no numeric fields
        """
        if not self.supports(obj):
            raise GenerationError(
                "Object is not a value struct",
                {"path": path, "type": type(obj).__name__},
            )

        owner = None if target is obj else target
        properties = []
        for field_name in obj._fields:
            value = getattr(obj, field_name)
            if not _is_numeric_field(value):
                continue
            properties.append(
                PropertyData(
                    path=keypath.join_keypath(path, field_name),
                    target=obj,
                    target_object=owner,
                    current=value,
                    start=value,
                    parent_path=path or None,
                    replace_parent=True,
                )
            )

        if not properties:
            raise GenerationError(
                "Struct has no numeric fields",
                {"path": path, "type": type(obj).__name__},
            )
        return properties

    def retrieve_value(self, obj: Any, path: str) -> float | None:
        try:
            parent, field_name = keypath.resolve_parent(obj, path)
        except KeypathError as e:
            raise RetrievalError(f"Cannot resolve '{path}'", {"error": str(e)}) from e

        if not self.supports(parent) or field_name not in parent._fields:
            raise RetrievalError(
                "Path does not end in a struct field",
                {"path": path, "type": type(parent).__name__},
            )

        value = getattr(parent, field_name)
        if not _is_numeric_field(value):
            raise RetrievalError("Struct field is not numeric", {"path": path})
        return float(value)

    def update_value(self, obj: Any, new_values: dict[str, float]) -> Any | None:
        if not self.supports(obj):
            return None

        changes = {}
        for key, value in new_values.items():
            field_name = keypath.last_component(key)
            if field_name in obj._fields:
                changes[field_name] = value
            else:
                logger.debug(f"struct: ignoring unknown field '{key}' for {type(obj).__name__}")

        if not changes:
            return None
        return obj._replace(**changes)

    def retrieve_current_object_value(self, prop: PropertyData) -> float | None:
        value = self._read_owner_value(prop)
        if value is not None:
            return value

        field_name = keypath.last_component(prop.path)
        if not self.supports(prop.target) or field_name not in prop.target._fields:
            return None
        try:
            return to_number(getattr(prop.target, field_name))
        except CastError:
            return None

    def calculate_value(self, prop: PropertyData, new_value: float) -> Any | None:
        field_name = keypath.last_component(prop.path)
        if not self.supports(prop.target) or field_name not in prop.target._fields:
            return None

        # start from the owner's live struct so sibling fields animated in the
        # same frame are kept
        struct = prop.target
        if prop.target_object is not None and prop.parent_path:
            try:
                live = keypath.resolve(prop.target_object, prop.parent_path)
            except KeypathError:
                live = None
            if type(live) is type(struct):
                struct = live

        return struct._replace(**{field_name: self.blend(prop, new_value)})
