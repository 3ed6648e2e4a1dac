"""Shared behaviour for concrete value adapters.

BaseValueAdapter carries the additive blending settings every adapter exposes
and the helpers concrete adapters use to read the current value of a property
and blend a newly interpolated value into it.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core import keypath
from ..core.casting import to_number
from ..core.exceptions import CastError, KeypathError
from ..core.types import PropertyData

logger = logging.getLogger(__name__)


class BaseValueAdapter:
    """Base class for adapters handling one family of value shapes.

    Subclasses implement ``supports`` and the property operations. The
    default ``accepts_keypath`` accepts everything.
    """

    name = "base"

    def __init__(self, additive: bool = False, additive_weighting: float = 1.0) -> None:
        self.additive = additive
        self.additive_weighting = additive_weighting

    def supports(self, obj: Any) -> bool:
        raise NotImplementedError

    def accepts_keypath(self, obj: Any) -> bool:
        return True

    def generate_properties(self, obj: Any, path: str, target: Any) -> list[PropertyData]:
        raise NotImplementedError

    def retrieve_value(self, obj: Any, path: str) -> float | None:
        raise NotImplementedError

    def update_value(self, obj: Any, new_values: dict[str, float]) -> Any | None:
        raise NotImplementedError

    def retrieve_current_object_value(self, prop: PropertyData) -> float | None:
        raise NotImplementedError

    def calculate_value(self, prop: PropertyData, new_value: float) -> Any | None:
        raise NotImplementedError

    def _read_owner_value(self, prop: PropertyData) -> float | None:
        """Read a property's live value through its owner, if it has one."""
        if prop.target_object is None or prop.target_object is prop.target:
            return None

        try:
            return to_number(keypath.resolve(prop.target_object, prop.path))
        except (KeypathError, CastError) as e:
            logger.debug(f"{self.name}: cannot read '{prop.path}' from owner: {e}")
            return None

    def blend(self, prop: PropertyData, new_value: float) -> float:
        """Blend an interpolated value according to the additive settings.

        In additive mode the change since the last frame, scaled by
        ``additive_weighting``, is added to the property's current value.
        """
        if not self.additive:
            return new_value

        base = self.retrieve_current_object_value(prop)
        if base is None:
            base = prop.current
        return base + (new_value - prop.current) * self.additive_weighting

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(additive={self.additive}, "
            f"additive_weighting={self.additive_weighting})"
        )
