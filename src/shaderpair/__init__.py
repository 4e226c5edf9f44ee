"""Vertex/fragment shader pairs with validated binding names."""

from .core import (
    BindingRole,
    ErrorKind,
    MatchMode,
    ShaderPair,
    ShaderStage,
    ShaderValidationError,
    ValidationError,
    ValidationResult,
)
from .loader import ShaderPairLoader

__all__ = [
    "BindingRole",
    "ErrorKind",
    "MatchMode",
    "ShaderPair",
    "ShaderPairLoader",
    "ShaderStage",
    "ShaderValidationError",
    "ValidationError",
    "ValidationResult",
]
