"""Adapter registry for building adapters and groups by name.

The registry maps adapter names to factories, so adapter groups can be
described in configuration files and built on demand.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..core.config import MotionConfig
from ..core.exceptions import AdapterError, AdapterNotFoundError
from ..core.types import ValueAdapter
from .adapter_group import AdapterGroup
from .color_adapter import ColorAdapter
from .numeric_adapter import NumericAdapter
from .struct_adapter import StructAdapter

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[], ValueAdapter]

# Global registry instance
_registry: AdapterRegistry | None = None


class AdapterRegistry:
    """Central registry of adapter factories.

    Usage:
        registry = get_registry()

        # Register a custom adapter
        registry.register("vector", VectorAdapter)

        # Build a group from configuration
        group = registry.build_group(load_config())
    """

    def __init__(self, with_defaults: bool = True) -> None:
        """Initialize registry.

        Args:
            with_defaults: Register the built-in numeric, struct and color adapters
        """
        self._factories: dict[str, AdapterFactory] = {}

        if with_defaults:
            self.register(NumericAdapter.name, NumericAdapter)
            self.register(StructAdapter.name, StructAdapter)
            self.register(ColorAdapter.name, ColorAdapter)

    def register(
        self,
        name: str,
        factory: AdapterFactory,
        overwrite: bool = False,
    ) -> None:
        """Register an adapter factory.

        Args:
            name: Name used to refer to the adapter in configuration
            factory: Callable returning a new adapter instance
            overwrite: If True, replace an existing registration
        """
        if not overwrite and name in self._factories:
            raise AdapterError(f"Adapter already registered: {name}")

        self._factories[name] = factory
        logger.info(f"Registered adapter: {name}")

    def unregister(self, name: str) -> bool:
        """Unregister an adapter.

        Returns:
            True if adapter was found and unregistered
        """
        if self._factories.pop(name, None) is None:
            return False

        logger.info(f"Unregistered adapter: {name}")
        return True

    def create(self, name: str) -> ValueAdapter:
        """Create a new adapter instance by name.

        Raises:
            AdapterNotFoundError: If no adapter is registered under name
        """
        if name not in self._factories:
            raise AdapterNotFoundError(name, self.names())
        return self._factories[name]()

    def names(self) -> list[str]:
        """Registered adapter names in registration order."""
        return list(self._factories)

    def build_group(self, config: MotionConfig | None = None) -> AdapterGroup:
        """Build an adapter group from configuration.

        Args:
            config: Group configuration (defaults to MotionConfig())

        Returns:
            AdapterGroup with the configured adapters and additive settings
        """
        config = config or MotionConfig()

        group = AdapterGroup(
            additive=config.additive,
            additive_weighting=config.additive_weighting,
        )
        for name in config.adapters:
            group.add(self.create(name))

        logger.debug(f"Built {group!r}")
        return group

    def clear(self) -> None:
        """Remove all registrations."""
        self._factories.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._factories


def get_registry() -> AdapterRegistry:
    """Get the global adapter registry."""
    global _registry

    if _registry is None:
        _registry = AdapterRegistry()

    return _registry


def reset_registry() -> None:
    """Reset the global registry (mainly for testing)."""
    global _registry
    _registry = None
