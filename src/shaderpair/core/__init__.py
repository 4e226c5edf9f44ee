"""Shader pair value type, binding roles and validation."""

from .roles import BindingRole, ShaderStage, DEFAULT_BINDING_NAMES, VALIDATION_ORDER
from .validation import (
    ErrorKind,
    MatchMode,
    ShaderValidationError,
    ValidationError,
    ValidationResult,
    validate_sources,
)
from .pair import ShaderPair

__all__ = [
    "BindingRole",
    "DEFAULT_BINDING_NAMES",
    "ErrorKind",
    "MatchMode",
    "ShaderPair",
    "ShaderStage",
    "ShaderValidationError",
    "VALIDATION_ORDER",
    "ValidationError",
    "ValidationResult",
    "validate_sources",
]
