"""
Compilation backend based on PyOpenGL. All calls need a current OpenGL
context on the calling thread.
"""

from OpenGL import GL

from ..utils.enums import ShaderStage
from . import ShaderBackend


_stage_types = {
    ShaderStage.vertex: GL.GL_VERTEX_SHADER,
    ShaderStage.fragment: GL.GL_FRAGMENT_SHADER,
}


def _as_text(log):
    if isinstance(log, bytes):
        return log.decode(errors="replace")
    return log or ""


class GLShaderBackend(ShaderBackend):
    """Compiles and links GLSL programs in the current OpenGL context."""

    def compile_stage(self, stage, source):
        if stage not in ShaderStage:
            raise ValueError(f"Shader stage must be in {ShaderStage}, not {stage!r}")
        shader = GL.glCreateShader(_stage_types[stage])
        GL.glShaderSource(shader, source)
        GL.glCompileShader(shader)
        log = _as_text(GL.glGetShaderInfoLog(shader))
        if not GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS):
            GL.glDeleteShader(shader)
            return None, log
        return shader, log

    def link_program(self, vertex, fragment):
        program = GL.glCreateProgram()
        GL.glAttachShader(program, vertex)
        GL.glAttachShader(program, fragment)
        GL.glLinkProgram(program)
        log = _as_text(GL.glGetProgramInfoLog(program))
        if not GL.glGetProgramiv(program, GL.GL_LINK_STATUS):
            GL.glDeleteProgram(program)
            return None, log
        # A linked program does not need its stages anymore
        GL.glDetachShader(program, vertex)
        GL.glDetachShader(program, fragment)
        return program, log

    def attribute_location(self, program, name):
        location = GL.glGetAttribLocation(program, name)
        return None if location == -1 else int(location)

    def uniform_location(self, program, name):
        location = GL.glGetUniformLocation(program, name)
        return None if location == -1 else int(location)

    def delete_stage(self, handle):
        GL.glDeleteShader(handle)

    def delete_program(self, program):
        GL.glDeleteProgram(program)
