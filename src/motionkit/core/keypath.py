"""Dotted keypath resolution for arbitrary Python objects.

A keypath such as ``"frame.origin.x"`` is resolved one segment at a time.
Mapping objects are indexed by key, everything else is read by attribute.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from .exceptions import KeypathError

SEPARATOR = "."


def split_keypath(path: str) -> list[str]:
    """Split a keypath into its segments.

    Raises:
        KeypathError: If the path is empty or contains an empty segment
    """
    if not path:
        raise KeypathError("Keypath is empty")

    components = path.split(SEPARATOR)
    if any(not c for c in components):
        raise KeypathError("Keypath contains an empty segment", {"path": path})
    return components


def join_keypath(*parts: str | None) -> str:
    """Join keypath fragments, skipping empty ones."""
    return SEPARATOR.join(p for p in parts if p)


def last_component(path: str) -> str:
    """Return the final segment of a keypath."""
    return path.rsplit(SEPARATOR, 1)[-1]


def _get_segment(obj: Any, segment: str, path: str) -> Any:
    if isinstance(obj, Mapping):
        try:
            return obj[segment]
        except KeyError as e:
            raise KeypathError(
                f"Key '{segment}' not found",
                {"path": path, "object": type(obj).__name__},
            ) from e

    try:
        return getattr(obj, segment)
    except AttributeError as e:
        raise KeypathError(
            f"Attribute '{segment}' not found",
            {"path": path, "object": type(obj).__name__},
        ) from e


def resolve(obj: Any, path: str) -> Any:
    """Resolve a keypath against an object.

    Args:
        obj: Root object
        path: Dotted keypath

    Returns:
        The value found at the end of the path

    Raises:
        KeypathError: If any segment is missing
    """
    value = obj
    for segment in split_keypath(path):
        value = _get_segment(value, segment, path)
    return value


def resolve_parent(obj: Any, path: str) -> tuple[Any, str]:
    """Resolve everything but the last segment of a keypath.

    Returns:
        Tuple of (parent object, last segment)
    """
    components = split_keypath(path)
    parent = obj
    for segment in components[:-1]:
        parent = _get_segment(parent, segment, path)
    return parent, components[-1]


def assign(obj: Any, path: str, value: Any) -> None:
    """Write a value at a keypath.

    Only the final segment is written; intermediate objects must be mutable
    containers or objects with settable attributes.

    Raises:
        KeypathError: If the path cannot be resolved or written
    """
    parent, segment = resolve_parent(obj, path)

    if isinstance(parent, MutableMapping):
        parent[segment] = value
        return
    if isinstance(parent, Mapping):
        raise KeypathError(
            "Cannot assign into a read-only mapping",
            {"path": path, "object": type(parent).__name__},
        )

    try:
        setattr(parent, segment, value)
    except (AttributeError, TypeError) as e:
        raise KeypathError(
            f"Attribute '{segment}' is not settable",
            {"path": path, "object": type(parent).__name__},
        ) from e
