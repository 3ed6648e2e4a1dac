"""Adapter for opaque color values.

Colors are immutable composite values. Their channels are not addressable
through keypaths on the owning object, so the color is always replaced as a
whole.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from ..core import keypath
from ..core.exceptions import GenerationError, KeypathError, RetrievalError
from ..core.types import PropertyData
from .base_adapter import BaseValueAdapter

CHANNELS = ("red", "green", "blue", "alpha")


def _clamp_channel(value: float) -> float:
    return max(min(float(value), 1.0), 0.0)


@dataclass(frozen=True)
class Color:
    """RGBA color with channels in the range 0.0 - 1.0."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _clamp_channel(getattr(self, f.name)))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Create a color from ``#rrggbb`` or ``#rrggbbaa``."""
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        except ValueError as e:
            raise ValueError(f"Invalid hex color: {value!r}") from e
        return cls(*channels)

    def to_hex(self) -> str:
        """Return the color as ``#rrggbbaa``."""
        return "#" + "".join(f"{round(getattr(self, c) * 255):02x}" for c in CHANNELS)


class ColorAdapter(BaseValueAdapter):
    """Adapter for Color values, animated channel by channel."""

    name = "color"

    def supports(self, obj: Any) -> bool:
        return isinstance(obj, Color)

    def accepts_keypath(self, obj: Any) -> bool:
        return False

    def generate_properties(self, obj: Any, path: str, target: Any) -> list[PropertyData]:
        if not self.supports(obj):
            raise GenerationError(
                "Object is not a Color",
                {"path": path, "type": type(obj).__name__},
            )

        owner = None if target is obj else target
        return [
            PropertyData(
                path=keypath.join_keypath(path, channel),
                target=obj,
                target_object=owner,
                current=getattr(obj, channel),
                start=getattr(obj, channel),
                parent_path=path or None,
                replace_parent=True,
            )
            for channel in CHANNELS
        ]

    def retrieve_value(self, obj: Any, path: str) -> float | None:
        try:
            parent, channel = keypath.resolve_parent(obj, path)
        except KeypathError as e:
            raise RetrievalError(f"Cannot resolve '{path}'", {"error": str(e)}) from e

        if not self.supports(parent) or channel not in CHANNELS:
            raise RetrievalError(
                "Path does not end in a color channel",
                {"path": path, "type": type(parent).__name__},
            )
        return getattr(parent, channel)

    def update_value(self, obj: Any, new_values: dict[str, float]) -> Any | None:
        if not self.supports(obj):
            return None

        changes = {}
        for key, value in new_values.items():
            channel = keypath.last_component(key)
            if channel in CHANNELS:
                changes[channel] = _clamp_channel(value)

        if not changes:
            return None
        return replace(obj, **changes)

    def retrieve_current_object_value(self, prop: PropertyData) -> float | None:
        value = self._read_owner_value(prop)
        if value is not None:
            return value

        channel = keypath.last_component(prop.path)
        if not self.supports(prop.target) or channel not in CHANNELS:
            return None
        return getattr(prop.target, channel)

    def calculate_value(self, prop: PropertyData, new_value: float) -> Any | None:
        channel = keypath.last_component(prop.path)
        if not self.supports(prop.target) or channel not in CHANNELS:
            return None

        color = prop.target
        if prop.target_object is not None and prop.parent_path:
            try:
                live = keypath.resolve(prop.target_object, prop.parent_path)
            except KeypathError:
                live = None
            if isinstance(live, Color):
                color = live

        return replace(color, **{channel: _clamp_channel(self.blend(prop, new_value))})
