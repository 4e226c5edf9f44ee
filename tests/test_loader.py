"""Tests for loading shader pairs from YAML definitions."""

import textwrap

import pytest

from shaderpair import BindingRole, ShaderPair, ShaderPairLoader
from shaderpair.shaders import load_default_sources

VERTEX = textwrap.dedent(
    """\
    attribute vec3 aPosition;
    attribute vec3 aNormal;
    attribute vec3 aColor;
    attribute vec2 aUv;
    uniform mat4 uView;
    uniform mat4 uProjection;
    uniform mat4 uModel;
    uniform bool uUseObjectColor;
    uniform vec3 uObjectColor;
    uniform float uOpacity;
    uniform mat3 uNormalMatrix;
    uniform vec3 uLightDir;
    void main(void) {}
    """
)

FRAGMENT = textwrap.dedent(
    """\
    uniform bool uUseTexture;
    uniform sampler2D uSampler;
    void main(void) {}
    """
)

BINDINGS = textwrap.dedent(
    """\
    bindings:
      position: aPosition
      normal: aNormal
      color: aColor
      texture_pos: aUv
      lighting: uLightDir
      view: uView
      perspective: uProjection
      object_transform: uModel
      use_object_color: uUseObjectColor
      object_color: uObjectColor
      object_opacity: uOpacity
      normal_uniform: uNormalMatrix
      use_texture: uUseTexture
      texture_sampler: uSampler
    """
)


@pytest.fixture
def shader_dir(tmp_path):
    (tmp_path / "custom.vert").write_text(VERTEX)
    (tmp_path / "custom.frag").write_text(FRAGMENT)
    (tmp_path / "custom.yaml").write_text(
        "name: custom\nvertex: custom.vert\nfragment: custom.frag\n" + BINDINGS
    )
    return tmp_path


def test_load_from_files(shader_dir):
    loader = ShaderPairLoader([shader_dir])
    pair = loader.load("custom")

    assert pair.vertex() == VERTEX
    assert pair.fragment() == FRAGMENT
    assert pair.position() == "aPosition"
    assert pair.texture_sampler() == "uSampler"
    assert pair.validate()


def test_load_is_cached(shader_dir):
    loader = ShaderPairLoader([shader_dir])
    first = loader.load("custom")

    assert loader.load("custom") is first

    loader.clear_cache()
    reloaded = loader.load("custom")
    assert reloaded is not first
    assert reloaded == first


def test_builtin_default_definition():
    pair = ShaderPairLoader().load("default")

    assert pair == ShaderPair()
    assert pair.validate()


def test_search_path_order(tmp_path, shader_dir):
    first = tmp_path / "first"
    first.mkdir()
    (first / "custom.yaml").write_text("bindings:\n  view: overridden\n")

    pair = ShaderPairLoader([first, shader_dir]).load("custom")

    assert pair.view() == "overridden"
    assert pair.vertex() == load_default_sources()[0]


def test_inline_sources(tmp_path):
    (tmp_path / "inline.yaml").write_text(
        "fragment_source: |\n"
        "  uniform bool useTexture;\n"
        "  uniform sampler2D diffuse;\n"
        "bindings:\n"
        "  texture_sampler: diffuse\n"
    )

    pair = ShaderPairLoader([tmp_path]).load("inline")

    assert pair.fragment() == "uniform bool useTexture;\nuniform sampler2D diffuse;\n"
    assert pair.vertex() == load_default_sources()[0]
    assert pair.validate()


def test_empty_definition_uses_defaults(tmp_path):
    (tmp_path / "empty.yaml").write_text("")
    assert ShaderPairLoader([tmp_path]).load("empty") == ShaderPair()


def test_null_binding_is_unset(tmp_path):
    (tmp_path / "unset.yaml").write_text("bindings:\n  lighting:\n")

    pair = ShaderPairLoader([tmp_path]).load("unset")

    assert pair.lighting() is None
    assert pair.validate().error.role is BindingRole.LIGHTING


def test_missing_definition(tmp_path):
    with pytest.raises(FileNotFoundError, match="nope"):
        ShaderPairLoader([tmp_path]).load("nope")


def test_missing_source_file(tmp_path):
    (tmp_path / "broken.yaml").write_text("vertex: missing.vert\n")
    with pytest.raises(FileNotFoundError):
        ShaderPairLoader([tmp_path]).load("broken")


@pytest.mark.parametrize(
    "content,match",
    [
        ("bindings:\n  tangent: aTangent\n", "Unknown binding role"),
        ("bindings:\n  position: 3\n", "must be a string"),
        ("bindings: [position]\n", "must be a mapping"),
        ("- vertex\n", "must be a mapping"),
        ("vertex: a.vert\nvertex_source: void main() {}\n", "not both"),
        ("vertex_source: 12\n", "must be a string"),
    ],
)
def test_invalid_definitions(tmp_path, content, match):
    (tmp_path / "bad.yaml").write_text(content)
    with pytest.raises(ValueError, match=match):
        ShaderPairLoader([tmp_path]).load("bad")
