"""AdapterGroup for composing multiple value adapters.

AdapterGroup lets an animation engine work with one adapter while the
properties it animates belong to many different value shapes. Calls are
delegated to member adapters in the order they were added, and the group's
additive settings are kept in sync on every member.

An AdapterGroup satisfies the same contract as its members, so groups can be
nested inside other groups.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Iterator

from ..core import keypath
from ..core.casting import is_boxed_value, to_number
from ..core.exceptions import CastError, KeypathError, MotionkitError
from ..core.types import DispatchResult, Outcome, PropertyData, ValueAdapter

logger = logging.getLogger(__name__)


def _clamp_weighting(value: float) -> float:
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(min(value, 1.0), 0.0)


class AdapterGroup:
    """Ordered group of value adapters acting as a single adapter.

    Dispatch rules:
    - Most operations go to the first member that supports the object.
    - ``generate_properties`` and ``retrieve_value`` skip members that fail
      and try the next supporting member.
    - ``accepts_keypath`` is false if any supporting member rejects the object.
    - ``calculate_value`` tries further members when a bare boxed value
      target gets no result from the first one.

    Nothing raised by a member escapes a group operation; unsupported objects
    and failures surface as None or an empty list.

    Usage:
        group = AdapterGroup([StructAdapter(), ColorAdapter(), NumericAdapter()])
        group.additive = True
        group.additive_weighting = 0.5

        props = group.generate_properties(sprite.position, "position", sprite)
        new_position = group.calculate_value(props[0], 120.0)
    """

    name = "group"

    def __init__(
        self,
        adapters: Iterable[ValueAdapter] | None = None,
        additive: bool = False,
        additive_weighting: float = 1.0,
    ) -> None:
        """Initialize AdapterGroup.

        Args:
            adapters: Adapters to delegate to, in dispatch order
            additive: Initial additive mode for the group and its members
            additive_weighting: Initial additive weighting, clamped to 0.0 - 1.0
        """
        self._adapters: list[ValueAdapter] = []
        self._additive = additive
        self._additive_weighting = _clamp_weighting(additive_weighting)

        for adapter in adapters or []:
            self.add(adapter)

    @property
    def additive(self) -> bool:
        """Whether members blend values additively."""
        return self._additive

    @additive.setter
    def additive(self, value: bool) -> None:
        self._additive = value
        self._apply_to_all("additive", value)

    @property
    def additive_weighting(self) -> float:
        """Weighting of additive changes, always within 0.0 - 1.0."""
        return self._additive_weighting

    @additive_weighting.setter
    def additive_weighting(self, value: float) -> None:
        self._additive_weighting = _clamp_weighting(value)
        self._apply_to_all("additive_weighting", self._additive_weighting)

    def _apply_to_all(self, attribute: str, value: Any) -> None:
        """Overwrite a shared setting on every member."""
        for adapter in self._adapters:
            setattr(adapter, attribute, value)

    @property
    def adapters(self) -> tuple[ValueAdapter, ...]:
        """Member adapters in dispatch order."""
        return tuple(self._adapters)

    def add(self, adapter: ValueAdapter) -> None:
        """Add an adapter to the end of the group.

        The adapter is given the group's current ``additive`` and
        ``additive_weighting`` values.

        Args:
            adapter: Adapter to add
        """
        adapter.additive = self._additive
        adapter.additive_weighting = self._additive_weighting
        self._adapters.append(adapter)

        logger.debug(f"Added adapter '{adapter.name}' to group (position {len(self._adapters)})")

    # Dispatch

    def _check(self, adapter: ValueAdapter, query: str, obj: Any) -> bool | None:
        """Ask a member a yes/no question; None if the member raised."""
        try:
            return bool(getattr(adapter, query)(obj))
        except Exception as e:
            logger.warning(f"Adapter '{adapter.name}' raised during {query}: {e!r}")
            return None

    def _supports(self, adapter: ValueAdapter, obj: Any) -> bool:
        return self._check(adapter, "supports", obj) is True

    def _attempt(self, adapter: ValueAdapter, operation: str, *args: Any) -> DispatchResult:
        try:
            value = getattr(adapter, operation)(*args)
        except MotionkitError as e:
            if e.raised_by is None:
                e.raised_by = adapter.name
            logger.debug(f"Adapter '{adapter.name}' failed {operation}: {e}")
            return DispatchResult.failed(e, adapter.name)
        except Exception as e:
            logger.warning(f"Adapter '{adapter.name}' raised during {operation}: {e!r}")
            return DispatchResult.failed(e, adapter.name)

        return DispatchResult.handled(value, adapter.name)

    def dispatch(
        self,
        obj: Any,
        operation: str,
        *args: Any,
        continue_on_failure: bool = False,
        continue_on_empty: bool = False,
    ) -> DispatchResult:
        """Delegate an operation to the members that support an object.

        Members are tried in order. The scan stops at the first supporting
        member unless its call failed and ``continue_on_failure`` is set, or
        it returned None and ``continue_on_empty`` is set.

        Args:
            obj: Object members are asked to support
            operation: Name of the adapter method to call
            *args: Arguments for the adapter method
            continue_on_failure: Try the next supporting member after a failure
            continue_on_empty: Try the next supporting member after a None result

        Returns:
            Result of the last member called, or NOT_HANDLED if no member
            supports the object
        """
        result = DispatchResult.not_handled()

        for adapter in self._adapters:
            if not self._supports(adapter, obj):
                continue

            result = self._attempt(adapter, operation, *args)

            if result.outcome is Outcome.FAILED:
                if continue_on_failure:
                    continue
                break

            if result.value is None and continue_on_empty:
                continue
            break

        return result

    # ValueAdapter methods

    def supports(self, obj: Any) -> bool:
        return any(self._supports(adapter, obj) for adapter in self._adapters)

    def accepts_keypath(self, obj: Any) -> bool:
        # a member that raises neither supports nor vetoes
        for adapter in self._adapters:
            if self._check(adapter, "accepts_keypath", obj) is False and self._supports(adapter, obj):
                return False
        return True

    def generate_properties(self, obj: Any, path: str, target: Any) -> list[PropertyData]:
        result = self.dispatch(
            obj, "generate_properties", obj, path, target,
            continue_on_failure=True,
        )
        if result.is_handled:
            return list(result.value or [])
        return []

    def retrieve_value(self, obj: Any, path: str) -> float | None:
        result = self.dispatch(
            obj, "retrieve_value", obj, path,
            continue_on_failure=True,
            continue_on_empty=True,
        )
        if result.has_value:
            return result.value

        # no member could read it, read the path directly
        try:
            return to_number(keypath.resolve(obj, path))
        except (KeypathError, CastError) as e:
            logger.debug(f"Direct retrieval of '{path}' failed: {e}")
            return None

    def update_value(self, obj: Any, new_values: dict[str, float]) -> Any | None:
        if not new_values:
            return None

        result = self.dispatch(obj, "update_value", obj, new_values)
        return result.value if result.is_handled else None

    def retrieve_current_object_value(self, prop: PropertyData) -> float | None:
        if prop.target is None:
            return None

        result = self.dispatch(prop.target, "retrieve_current_object_value", prop)
        return result.value if result.is_handled else None

    def calculate_value(self, prop: PropertyData, new_value: float) -> Any | None:
        target = prop.target
        if target is None:
            return None

        # a bare boxed value is replaced directly, so any member that can
        # produce a value for it may answer
        replaces_target = prop.target_object is None or prop.target_object is target
        result = self.dispatch(
            target, "calculate_value", prop, new_value,
            continue_on_empty=replaces_target and is_boxed_value(target),
        )

        if result.outcome is Outcome.NOT_HANDLED:
            return float(prop.current)
        if result.outcome is Outcome.FAILED:
            return None
        return result.value

    def __len__(self) -> int:
        return len(self._adapters)

    def __iter__(self) -> Iterator[ValueAdapter]:
        return iter(self._adapters)

    def __repr__(self) -> str:
        adapters_str = ", ".join(adapter.name for adapter in self._adapters)
        return (
            f"AdapterGroup([{adapters_str}], additive={self._additive}, "
            f"additive_weighting={self._additive_weighting})"
        )
