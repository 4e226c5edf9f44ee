"""Paired vertex/fragment shader sources with their binding names."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..shaders import load_default_sources
from .roles import DEFAULT_BINDING_NAMES, BindingRole
from .validation import MatchMode, ShaderValidationError, ValidationResult, validate_sources


class ShaderPair:
    """A vertex shader and a fragment shader used together.

    Holds the source text of both stages and the name registered for every
    binding role. A renderer compiles vertex() and fragment() and queries
    attribute/uniform locations by the names the role accessors return.

    Instances are read-only after construction. Use replace() to derive a
    pair with different sources or names.
    """

    __slots__ = ("_vertex_source", "_fragment_source", "_binding_names")

    def __init__(
        self,
        vertex_source: str | None = None,
        fragment_source: str | None = None,
        binding_names: Mapping[BindingRole | str, str | None] | None = None,
    ) -> None:
        """Create a shader pair, falling back to the default shaders.

        Args:
            vertex_source: Vertex stage source. Defaults to default.vert.
            fragment_source: Fragment stage source. Defaults to default.frag.
            binding_names: Names overriding the defaults, keyed by BindingRole
                          or role value (e.g. "texture_sampler"). None or ""
                          leaves the role unset.

        Raises:
            TypeError: If a source is not a string
            ValueError: If a binding key is not a known role
        """
        default_vertex, default_fragment = load_default_sources()
        if vertex_source is None:
            vertex_source = default_vertex
        if fragment_source is None:
            fragment_source = default_fragment

        for label, source in (("vertex", vertex_source), ("fragment", fragment_source)):
            if not isinstance(source, str):
                raise TypeError(
                    f"{label} source must be a string, got {type(source).__name__}"
                )

        names: dict[BindingRole, str | None] = dict(DEFAULT_BINDING_NAMES)
        for key, name in (binding_names or {}).items():
            if name is not None and not isinstance(name, str):
                raise TypeError(f"Binding name for {key!r} must be a string")
            names[BindingRole.parse(key)] = name

        self._vertex_source = vertex_source
        self._fragment_source = fragment_source
        self._binding_names = MappingProxyType(names)

    def __repr__(self) -> str:
        return (
            f"ShaderPair(vertex={len(self._vertex_source)} chars, "
            f"fragment={len(self._fragment_source)} chars)"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShaderPair):
            return NotImplemented
        return (
            self._vertex_source == other._vertex_source
            and self._fragment_source == other._fragment_source
            and dict(self._binding_names) == dict(other._binding_names)
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._vertex_source,
                self._fragment_source,
                tuple(sorted((r.value, n or "") for r, n in self._binding_names.items())),
            )
        )

    @property
    def binding_names(self) -> Mapping[BindingRole, str | None]:
        """Read-only view of the name registered for every role."""
        return self._binding_names

    def vertex(self) -> str:
        """Get the vertex shader source."""
        return self._vertex_source

    def fragment(self) -> str:
        """Get the fragment shader source."""
        return self._fragment_source

    def name(self, role: BindingRole | str) -> str | None:
        """Get the name registered for a binding role."""
        return self._binding_names[BindingRole.parse(role)]

    def position(self) -> str | None:
        """Get the vertex position attribute name."""
        return self._binding_names[BindingRole.POSITION]

    def normal(self) -> str | None:
        """Get the vertex normal attribute name."""
        return self._binding_names[BindingRole.NORMAL]

    def color(self) -> str | None:
        """Get the vertex color attribute name."""
        return self._binding_names[BindingRole.COLOR]

    def texture_pos(self) -> str | None:
        """Get the texture coordinate attribute name."""
        return self._binding_names[BindingRole.TEXTURE_POS]

    def lighting(self) -> str | None:
        return self._binding_names[BindingRole.LIGHTING]

    def view(self) -> str | None:
        """Get the view matrix uniform name."""
        return self._binding_names[BindingRole.VIEW]

    def perspective(self) -> str | None:
        """Get the perspective matrix uniform name."""
        return self._binding_names[BindingRole.PERSPECTIVE]

    def object_transform(self) -> str | None:
        """Get the object transform matrix uniform name."""
        return self._binding_names[BindingRole.OBJECT_TRANSFORM]

    def use_object_color(self) -> str | None:
        return self._binding_names[BindingRole.USE_OBJECT_COLOR]

    def object_color(self) -> str | None:
        return self._binding_names[BindingRole.OBJECT_COLOR]

    def object_opacity(self) -> str | None:
        return self._binding_names[BindingRole.OBJECT_OPACITY]

    def normal_uniform(self) -> str | None:
        """Get the normal matrix uniform name."""
        return self._binding_names[BindingRole.NORMAL_UNIFORM]

    def use_texture(self) -> str | None:
        return self._binding_names[BindingRole.USE_TEXTURE]

    def texture_sampler(self) -> str | None:
        """Get the texture sampler uniform name (fragment stage)."""
        return self._binding_names[BindingRole.TEXTURE_SAMPLER]

    def replace(
        self,
        vertex_source: str | None = None,
        fragment_source: str | None = None,
        binding_names: Mapping[BindingRole | str, str | None] | None = None,
    ) -> ShaderPair:
        """Create a new pair with some sources or names changed.

        Arguments left as None keep this pair's values. binding_names is
        merged over this pair's names.
        """
        names: dict[BindingRole | str, str | None] = dict(self._binding_names)
        names.update(binding_names or {})
        return ShaderPair(
            vertex_source=self._vertex_source if vertex_source is None else vertex_source,
            fragment_source=(
                self._fragment_source if fragment_source is None else fragment_source
            ),
            binding_names=names,
        )

    def validate(self, mode: MatchMode = MatchMode.SUBSTRING) -> ValidationResult:
        """Check that both sources define every registered binding name.

        Vertex stage roles are checked first, then the fragment stage
        texture roles. Stops at the first failure.

        Args:
            mode: How names are matched inside the sources

        Returns:
            ValidationResult, truthy on success, otherwise holding the
            ValidationError for the first failing role
        """
        return validate_sources(
            self._vertex_source, self._fragment_source, self._binding_names, mode
        )

    def ensure_valid(self, mode: MatchMode = MatchMode.SUBSTRING) -> ShaderPair:
        """Return self if valid.

        Raises:
            ShaderValidationError: If validation fails
        """
        result = self.validate(mode)
        if result.error is not None:
            raise ShaderValidationError(result.error)
        return self
