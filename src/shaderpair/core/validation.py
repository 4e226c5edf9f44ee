"""Textual consistency check between binding names and shader sources."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .roles import VALIDATION_ORDER, BindingRole, ShaderStage

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Why a binding failed validation."""

    NAME_NOT_FOUND = "name_not_found"
    UNSET_NAME = "unset_name"


class MatchMode(Enum):
    """How a binding name is searched for inside a source.

    SUBSTRING accepts the name anywhere in the text, so ``normal`` is also
    found inside ``vertexNormal``. IDENTIFIER only accepts the name as a
    whole GLSL identifier.
    """

    SUBSTRING = "substring"
    IDENTIFIER = "identifier"


@dataclass(frozen=True)
class ValidationError:
    """First binding that is not defined by its stage's source.

    Attributes:
        role: Binding role that failed
        stage: Stage whose source was searched
        kind: Failure kind
        name: Registered name at the time of the check (None if unset)
    """

    role: BindingRole
    stage: ShaderStage
    kind: ErrorKind
    name: str | None = None

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.UNSET_NAME:
            return (
                f"Could not validate shader: no name is set for the "
                f"{self.role.value} binding"
            )
        return (
            f"Could not validate shader: the {self.role.value} binding "
            f"'{self.name}' was not found in the {self.stage.value} source"
        )

    def __str__(self) -> str:
        return self.message


class ShaderValidationError(ValueError):
    """Raised when a shader pair is used on a path that requires validity."""

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a shader pair. Truthy only on success."""

    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        """Raise ShaderValidationError if validation failed."""
        if self.error is not None:
            raise ShaderValidationError(self.error)


def source_defines(source: str, name: str, mode: MatchMode = MatchMode.SUBSTRING) -> bool:
    """Check whether a source mentions a binding name.

    Args:
        source: Shader source text
        name: Non-empty binding name
        mode: Matching strategy

    Returns:
        True if the name occurs in the source
    """
    if mode is MatchMode.IDENTIFIER:
        pattern = rf"(?<![A-Za-z0-9_]){re.escape(name)}(?![A-Za-z0-9_])"
        return re.search(pattern, source) is not None
    return name in source


def validate_sources(
    vertex_source: str,
    fragment_source: str,
    binding_names: Mapping[BindingRole, str | None],
    mode: MatchMode = MatchMode.SUBSTRING,
) -> ValidationResult:
    """Check every binding name against the source of its stage.

    Checks run in VALIDATION_ORDER and stop at the first failure.

    Args:
        vertex_source: Vertex stage source
        fragment_source: Fragment stage source
        binding_names: Registered name per role; missing roles count as unset
        mode: Matching strategy

    Returns:
        ValidationResult holding the first failure, if any
    """
    sources = {
        ShaderStage.VERTEX: vertex_source,
        ShaderStage.FRAGMENT: fragment_source,
    }

    for role in VALIDATION_ORDER:
        stage = role.stage
        name = binding_names.get(role)
        logger.debug("Checking %s binding %r in %s source", role.value, name, stage.value)

        # An empty name is trivially a substring of any text
        if not name:
            return ValidationResult(
                ValidationError(role=role, stage=stage, kind=ErrorKind.UNSET_NAME, name=name)
            )

        if not source_defines(sources[stage], name, mode):
            return ValidationResult(
                ValidationError(
                    role=role, stage=stage, kind=ErrorKind.NAME_NOT_FOUND, name=name
                )
            )

    return ValidationResult()
