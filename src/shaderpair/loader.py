"""Load shader pair definitions from YAML configuration files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .core.pair import ShaderPair
from .core.roles import BindingRole
from .shaders import SHADER_DIR, load_shader_source

logger = logging.getLogger(__name__)


class ShaderPairLoader:
    """Loads shader pair definitions from YAML files.

    YAML format:
    ```yaml
    name: textured
    vertex: textured.vert        # path relative to the YAML file
    fragment_source: |           # or inline source
      uniform sampler2D uSampler;
      ...
    bindings:
      position: aPosition
      texture_sampler: uSampler
    ```

    Stages that are not given fall back to the default sources; bindings
    that are not given keep their default names.
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for shader pair YAML files.
                         Defaults to the package's shaders directory.
        """
        if search_paths is None:
            self.search_paths = [SHADER_DIR]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._cache: dict[str, ShaderPair] = {}

    def load(self, name: str) -> ShaderPair:
        """Load a shader pair by name.

        Searches for {name}.yaml in search paths.

        Args:
            name: Definition name (without .yaml extension)

        Returns:
            ShaderPair instance

        Raises:
            FileNotFoundError: If the definition or a referenced source is missing
            ValueError: If the YAML format is invalid
        """
        if name in self._cache:
            logger.debug("Shader pair '%s' served from cache", name)
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Shader pair '{name}' not found in search paths: {self.search_paths}"
            )

        pair = self.load_file(yaml_path)
        self._cache[name] = pair
        return pair

    def load_file(self, path: Path) -> ShaderPair:
        """Load a shader pair from an explicit YAML path (not cached)."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Shader pair definition must be a mapping: {path}")

        pair = self._parse_pair(data, path.parent)
        logger.info("Loaded shader pair '%s' from %s", data.get("name", path.stem), path)
        return pair

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file for a definition name."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def _parse_pair(self, data: dict[str, Any], base_dir: Path) -> ShaderPair:
        """Parse a shader pair definition from YAML data."""
        vertex_source = self._parse_source(data, "vertex", base_dir)
        fragment_source = self._parse_source(data, "fragment", base_dir)
        bindings = self._parse_bindings(data.get("bindings") or {})

        return ShaderPair(
            vertex_source=vertex_source,
            fragment_source=fragment_source,
            binding_names=bindings,
        )

    def _parse_source(self, data: dict[str, Any], stage: str, base_dir: Path) -> str | None:
        """Read a stage's source from a file reference or inline text."""
        filename = data.get(stage)
        inline = data.get(f"{stage}_source")

        if filename is not None and inline is not None:
            raise ValueError(f"Specify either '{stage}' or '{stage}_source', not both")

        if inline is not None:
            if not isinstance(inline, str):
                raise ValueError(f"'{stage}_source' must be a string")
            return inline

        if filename is not None:
            return load_shader_source(str(filename), base_dir)

        return None

    def _parse_bindings(self, bindings: Any) -> dict[BindingRole, str | None]:
        """Convert YAML binding keys to roles."""
        if not isinstance(bindings, dict):
            raise ValueError("'bindings' must be a mapping of role to name")

        parsed: dict[BindingRole, str | None] = {}
        for key, value in bindings.items():
            role = BindingRole.parse(str(key))
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Binding name for '{key}' must be a string")
            parsed[role] = value
        return parsed

    def clear_cache(self) -> None:
        """Clear the shader pair cache."""
        self._cache.clear()
