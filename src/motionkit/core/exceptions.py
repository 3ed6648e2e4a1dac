"""Custom exceptions for motionkit library."""

from __future__ import annotations

from typing import Any


class MotionkitError(Exception):
    """Base exception for all motionkit errors.

    Errors raised while an adapter group is dispatching are tagged with the
    name of the member adapter that raised them, so a failure recorded in a
    DispatchResult can be traced back through nested groups.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        raised_by: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.raised_by = raised_by

    def __str__(self) -> str:
        text = self.message
        if self.raised_by:
            text = f"[{self.raised_by}] {text}"
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            text = f"{text} ({ctx})"
        return text


class AdapterError(MotionkitError):
    """Error related to adapter operations."""

    pass


class AdapterNotFoundError(AdapterError):
    """Adapter name not known to the registry."""

    def __init__(self, adapter_name: str, available: list[str] | None = None) -> None:
        context: dict[str, Any] = {"adapter_name": adapter_name}
        if available:
            context["available"] = available
        super().__init__(f"Adapter not found: {adapter_name}", context)
        self.adapter_name = adapter_name
        self.available = available or []


class GenerationError(AdapterError):
    """An adapter supports the object but cannot generate properties for the path."""

    pass


class RetrievalError(AdapterError):
    """An adapter supports the object but cannot read a value at the path."""

    pass


class KeypathError(MotionkitError):
    """A keypath segment could not be resolved or assigned."""

    pass


class CastError(MotionkitError):
    """A value could not be converted to a number."""

    pass


class ConfigurationError(MotionkitError):
    """Error in configuration."""

    pass
