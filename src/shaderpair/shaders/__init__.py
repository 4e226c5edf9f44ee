"""Default GLSL sources shipped with the package."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

SHADER_DIR = Path(__file__).parent

DEFAULT_VERTEX_FILE = "default.vert"
DEFAULT_FRAGMENT_FILE = "default.frag"


def load_shader_source(filename: str, directory: Path | None = None) -> str:
    """Read a shader source file.

    Args:
        filename: File name, relative to directory
        directory: Directory to read from. Defaults to this package.

    Returns:
        Source text
    """
    path = (directory or SHADER_DIR) / filename
    return path.read_text(encoding="utf-8")


@lru_cache(maxsize=None)
def load_default_sources() -> tuple[str, str]:
    """Return the default (vertex, fragment) source pair."""
    return (
        load_shader_source(DEFAULT_VERTEX_FILE),
        load_shader_source(DEFAULT_FRAGMENT_FILE),
    )


__all__ = [
    "SHADER_DIR",
    "load_default_sources",
    "load_shader_source",
]
