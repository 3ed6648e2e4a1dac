"""Core types and configuration for motionkit library."""

from .types import (
    DispatchResult,
    Outcome,
    PropertyData,
    ValueAdapter,
)
from .config import MotionConfig, load_config
from .exceptions import (
    MotionkitError,
    AdapterError,
    AdapterNotFoundError,
    GenerationError,
    RetrievalError,
    KeypathError,
    CastError,
    ConfigurationError,
)
from .casting import is_boxed_value, is_struct_value, to_number
from .keypath import (
    assign,
    join_keypath,
    last_component,
    resolve,
    resolve_parent,
    split_keypath,
)

__all__ = [
    # Types
    "DispatchResult",
    "Outcome",
    "PropertyData",
    "ValueAdapter",
    # Config
    "MotionConfig",
    "load_config",
    # Exceptions
    "MotionkitError",
    "AdapterError",
    "AdapterNotFoundError",
    "GenerationError",
    "RetrievalError",
    "KeypathError",
    "CastError",
    "ConfigurationError",
    # Casting
    "is_boxed_value",
    "is_struct_value",
    "to_number",
    # Keypaths
    "assign",
    "join_keypath",
    "last_component",
    "resolve",
    "resolve_parent",
    "split_keypath",
]
