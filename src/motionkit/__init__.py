"""motionkit - Value adapters for generic property animation.

motionkit lets an animation engine read, interpolate and write properties
of arbitrary objects through adapters, without knowing each object's shape.

Quick Start:
    from motionkit.adapters import AdapterGroup, ColorAdapter, NumericAdapter, StructAdapter

    group = AdapterGroup([StructAdapter(), ColorAdapter(), NumericAdapter()])

    value = sprite.position
    for prop in group.generate_properties(value, "position", sprite):
        new_position = group.calculate_value(prop, 120.0)
"""

__version__ = "0.1.0"


# Lazy imports to keep package import light
def get_adapter_group():
    """Get AdapterGroup class."""
    from motionkit.adapters.adapter_group import AdapterGroup
    return AdapterGroup


def get_registry():
    """Get the global adapter registry."""
    from motionkit.adapters.registry import get_registry as _get_registry
    return _get_registry()
