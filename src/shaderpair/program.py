"""Compile shader pairs and bind program locations by role."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from OpenGL import GL

from .core.pair import ShaderPair
from .core.roles import BindingRole
from .core.validation import MatchMode, ShaderValidationError

logger = logging.getLogger(__name__)


@dataclass
class ShaderProgram:
    """Linked program with attribute/uniform locations looked up by role."""

    program_id: int
    pair: ShaderPair
    _attribute_cache: dict[BindingRole, int] = field(default_factory=dict, repr=False)
    _uniform_cache: dict[BindingRole, int] = field(default_factory=dict, repr=False)

    def use(self) -> None:
        """Activate this shader program."""
        GL.glUseProgram(self.program_id)

    def attribute_location(self, role: BindingRole) -> int:
        """Get an attribute location by role, caching the lookup.

        Returns -1 if the attribute is not active in the linked program.
        """
        if role not in self._attribute_cache:
            name = self.pair.name(role)
            self._attribute_cache[role] = GL.glGetAttribLocation(self.program_id, name)
        return self._attribute_cache[role]

    def uniform_location(self, role: BindingRole) -> int:
        """Get a uniform location by role, caching the lookup.

        Returns -1 if the uniform was optimized out.
        """
        if role not in self._uniform_cache:
            name = self.pair.name(role)
            self._uniform_cache[role] = GL.glGetUniformLocation(self.program_id, name)
        return self._uniform_cache[role]

    def set_uniform(self, role: BindingRole, value: Any) -> None:
        """Set a uniform value by role."""
        loc = self.uniform_location(role)
        if loc == -1:
            return

        if isinstance(value, bool):
            GL.glUniform1i(loc, int(value))
        elif isinstance(value, int):
            GL.glUniform1i(loc, value)
        elif isinstance(value, float):
            GL.glUniform1f(loc, value)
        elif isinstance(value, (tuple, list)):
            if len(value) == 2:
                GL.glUniform2f(loc, *value)
            elif len(value) == 3:
                GL.glUniform3f(loc, *value)
            elif len(value) == 4:
                GL.glUniform4f(loc, *value)
            else:
                raise ValueError(f"Unsupported uniform vector length: {len(value)}")
        elif isinstance(value, np.ndarray):
            data = value.astype(np.float32)
            if value.shape == (3,):
                GL.glUniform3fv(loc, 1, data)
            elif value.shape == (4,):
                GL.glUniform4fv(loc, 1, data)
            elif value.shape == (3, 3):
                # numpy is row-major, OpenGL expects column-major
                GL.glUniformMatrix3fv(loc, 1, GL.GL_TRUE, data)
            elif value.shape == (4, 4):
                GL.glUniformMatrix4fv(loc, 1, GL.GL_TRUE, data)
            else:
                raise ValueError(f"Unsupported uniform array shape: {value.shape}")
        else:
            raise TypeError(f"Unsupported uniform value type: {type(value).__name__}")

    def delete(self) -> None:
        """Delete the shader program."""
        if self.program_id:
            GL.glDeleteProgram(self.program_id)
            self.program_id = 0
        self._attribute_cache.clear()
        self._uniform_cache.clear()


class ShaderCompiler:
    """Compiles shader pairs into linked programs."""

    @classmethod
    def compile(
        cls,
        pair: ShaderPair,
        name: str = "unnamed",
        validate: bool = True,
        mode: MatchMode = MatchMode.SUBSTRING,
    ) -> ShaderProgram:
        """Validate and compile a shader pair.

        Args:
            pair: Shader pair to compile
            name: Optional name for error messages
            validate: Check binding names against the sources first
            mode: Matching strategy used by the validation

        Returns:
            Compiled ShaderProgram

        Raises:
            ShaderValidationError: If the pair fails validation
            RuntimeError: If compilation or linking fails
        """
        if validate:
            result = pair.validate(mode)
            if result.error is not None:
                logger.warning("Shader pair %s failed validation: %s", name, result.error)
                raise ShaderValidationError(result.error)

        vertex_shader = cls._compile_stage(GL.GL_VERTEX_SHADER, pair.vertex(), "Vertex", name)
        try:
            fragment_shader = cls._compile_stage(
                GL.GL_FRAGMENT_SHADER, pair.fragment(), "Fragment", name
            )
        except RuntimeError:
            GL.glDeleteShader(vertex_shader)
            raise

        program = GL.glCreateProgram()
        GL.glAttachShader(program, vertex_shader)
        GL.glAttachShader(program, fragment_shader)
        GL.glLinkProgram(program)

        # Shaders are owned by the program once linked
        GL.glDeleteShader(vertex_shader)
        GL.glDeleteShader(fragment_shader)

        if not GL.glGetProgramiv(program, GL.GL_LINK_STATUS):
            error = _info_log(GL.glGetProgramInfoLog(program))
            GL.glDeleteProgram(program)
            logger.warning("Shader program linking failed (%s): %s", name, error)
            raise RuntimeError(f"Shader program linking failed ({name}):\n{error}")

        logger.info("Compiled shader program %s (id=%s)", name, program)
        return ShaderProgram(program_id=program, pair=pair)

    @staticmethod
    def _compile_stage(stage: int, source: str, label: str, name: str) -> int:
        shader = GL.glCreateShader(stage)
        GL.glShaderSource(shader, source)
        GL.glCompileShader(shader)

        if not GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS):
            error = _info_log(GL.glGetShaderInfoLog(shader))
            GL.glDeleteShader(shader)
            logger.warning("%s shader compilation failed (%s): %s", label, name, error)
            raise RuntimeError(f"{label} shader compilation failed ({name}):\n{error}")

        return shader


def _info_log(log: bytes | str) -> str:
    if isinstance(log, bytes):
        return log.decode(errors="replace")
    return log
