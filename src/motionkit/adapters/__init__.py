"""Value adapters for motionkit library.

This module provides the adapter classes:
- NumericAdapter: Plain numeric scalars
- StructAdapter: Immutable named-tuple value structs
- ColorAdapter: Opaque RGBA color values
- AdapterGroup: Ordered composition of adapters acting as one adapter
"""

from .base_adapter import BaseValueAdapter
from .numeric_adapter import NumericAdapter
from .struct_adapter import StructAdapter
from .color_adapter import Color, ColorAdapter
from .adapter_group import AdapterGroup
from .registry import AdapterRegistry, get_registry, reset_registry

__all__ = [
    "BaseValueAdapter",
    "NumericAdapter",
    "StructAdapter",
    "Color",
    "ColorAdapter",
    "AdapterGroup",
    "AdapterRegistry",
    "get_registry",
    "reset_registry",
]
