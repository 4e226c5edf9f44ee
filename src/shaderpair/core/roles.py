"""Binding roles referenced by the shader pair sources."""

from __future__ import annotations

from enum import Enum


class ShaderStage(Enum):
    """Pipeline stage whose source must define a binding."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"


class BindingRole(Enum):
    """Semantic purpose of a named attribute or uniform."""

    # Attributes
    POSITION = "position"
    NORMAL = "normal"
    COLOR = "color"
    TEXTURE_POS = "texture_pos"
    LIGHTING = "lighting"

    # Vertex stage uniforms
    VIEW = "view"
    PERSPECTIVE = "perspective"
    OBJECT_TRANSFORM = "object_transform"
    USE_OBJECT_COLOR = "use_object_color"
    OBJECT_COLOR = "object_color"
    OBJECT_OPACITY = "object_opacity"
    NORMAL_UNIFORM = "normal_uniform"

    # Fragment stage uniforms
    USE_TEXTURE = "use_texture"
    TEXTURE_SAMPLER = "texture_sampler"

    @property
    def stage(self) -> ShaderStage:
        """Stage whose source is searched for this role's name."""
        if self in FRAGMENT_ROLES:
            return ShaderStage.FRAGMENT
        return ShaderStage.VERTEX

    @property
    def is_attribute(self) -> bool:
        """True for per-vertex inputs, False for uniforms."""
        return self in ATTRIBUTE_ROLES

    @classmethod
    def parse(cls, key: BindingRole | str) -> BindingRole:
        """Resolve a role from an enum member, its value or its member name.

        Raises:
            ValueError: If the key does not name a binding role
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            try:
                return cls(key)
            except ValueError:
                pass
            try:
                return cls[key.upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown binding role: {key!r}")


ATTRIBUTE_ROLES = frozenset(
    {
        BindingRole.POSITION,
        BindingRole.NORMAL,
        BindingRole.COLOR,
        BindingRole.TEXTURE_POS,
    }
)

FRAGMENT_ROLES = frozenset({BindingRole.USE_TEXTURE, BindingRole.TEXTURE_SAMPLER})


# Names used by the default sources in ..shaders
DEFAULT_BINDING_NAMES: dict[BindingRole, str] = {
    BindingRole.POSITION: "vertexPosition",
    BindingRole.NORMAL: "vertexNormal",
    BindingRole.COLOR: "vertexColor",
    BindingRole.TEXTURE_POS: "vertexTexturePos",
    BindingRole.LIGHTING: "lighting",
    BindingRole.VIEW: "view",
    BindingRole.PERSPECTIVE: "perspective",
    BindingRole.OBJECT_TRANSFORM: "objectTransform",
    BindingRole.USE_OBJECT_COLOR: "useObjectColor",
    BindingRole.OBJECT_COLOR: "objectColor",
    BindingRole.OBJECT_OPACITY: "objectOpacity",
    BindingRole.NORMAL_UNIFORM: "normal",
    BindingRole.USE_TEXTURE: "useTexture",
    BindingRole.TEXTURE_SAMPLER: "textureSampler",
}


# Fixed check order: vertex stage first, then fragment stage
VALIDATION_ORDER: tuple[BindingRole, ...] = (
    BindingRole.POSITION,
    BindingRole.NORMAL,
    BindingRole.COLOR,
    BindingRole.PERSPECTIVE,
    BindingRole.VIEW,
    BindingRole.OBJECT_TRANSFORM,
    BindingRole.USE_OBJECT_COLOR,
    BindingRole.OBJECT_COLOR,
    BindingRole.OBJECT_OPACITY,
    BindingRole.NORMAL_UNIFORM,
    BindingRole.LIGHTING,
    BindingRole.TEXTURE_POS,
    BindingRole.TEXTURE_SAMPLER,
    BindingRole.USE_TEXTURE,
)
