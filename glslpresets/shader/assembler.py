"""
Assembling shader passes. A pass is compiled from a single source that
serves both stages; a per-stage header selects the stage with a macro.
"""

import os
import sys
import logging

import numpy as np

from ..errors import ShaderBuildError
from ..utils.enums import ShaderStage
from .pragmas import extract_parameters
from .version import extract_version
from .templating import stage_header


logger = logging.getLogger("glslpresets")

PRINT_GLSL_ON_ERROR = os.environ.get(
    "GLSLPRESETS_PRINT_GLSL_ON_COMPILATION_ERROR", "0"
).lower() not in ["false", "0"]

# The attributes and uniforms that the renderer feeds to every pass.
STANDARD_ATTRIBUTES = ("VertexCoord", "TexCoord", "Color")
STANDARD_UNIFORMS = (
    "MVPMatrix",
    "InputSize",
    "OutputSize",
    "TextureSize",
    "FrameCount",
)


DEFAULT_VERTEX_SHADER = """\
in vec2 VertexCoord;
in vec2 TexCoord;
out vec2 tex;
void main(){
    gl_Position = vec4(VertexCoord, 0.0, 1.0);
    tex = TexCoord;
}
"""

DEFAULT_FRAGMENT_SHADER = """\
in vec2 tex;
uniform sampler2D texsampler;
out vec4 color;
void main() {
    color = texture(texsampler, tex);
}
"""


class CompiledPass:
    """A linked program, with the locations of the standard attributes and
    uniforms resolved. Each location is an int, or None if the program does
    not use that name.

    The pass owns the program: call ``release()`` to delete it.
    """

    def __init__(self, backend, program, path, parameters=()):
        self._backend = backend
        self._program = program
        self._path = path

        self._bindings = {}
        for name in STANDARD_ATTRIBUTES:
            self._bindings[name] = backend.attribute_location(program, name)
        for name in STANDARD_UNIFORMS:
            self._bindings[name] = backend.uniform_location(program, name)

        # Parameters that the program does not use are silently dropped
        self._parameters = []
        for name, value in parameters:
            location = backend.uniform_location(program, name)
            if location is not None:
                self._parameters.append((location, np.float32(value)))

    def __repr__(self):
        path = self._path or "<default>"
        return f"<CompiledPass {path} with {len(self._parameters)} parameters>"

    @property
    def program(self):
        """The backend program handle (None after release)."""
        return self._program

    @property
    def path(self):
        """The resource this pass was loaded from; empty for the default shader."""
        return self._path

    @property
    def parameters(self):
        """List of (uniform location, float32 value) tuples."""
        return list(self._parameters)

    def binding(self, name):
        """Get the location of a standard attribute or uniform."""
        return self._bindings[name]

    @property
    def vertex_coord(self):
        return self._bindings["VertexCoord"]

    @property
    def tex_coord(self):
        return self._bindings["TexCoord"]

    @property
    def color(self):
        return self._bindings["Color"]

    @property
    def mvp_matrix(self):
        return self._bindings["MVPMatrix"]

    @property
    def input_size(self):
        return self._bindings["InputSize"]

    @property
    def output_size(self):
        return self._bindings["OutputSize"]

    @property
    def texture_size(self):
        return self._bindings["TextureSize"]

    @property
    def frame_count(self):
        return self._bindings["FrameCount"]

    @property
    def released(self):
        return self._program is None

    def release(self):
        """Delete the program. Calling this more than once is a no-op."""
        if self._program is not None:
            program, self._program = self._program, None
            self._backend.delete_program(program)


def _print_source_on_error(source):
    # The body starts after the header, and the header resets the line counter
    lines = source.splitlines()
    body_start = next(
        (i + 1 for i, line in enumerate(lines) if line.startswith("#line ")), 0
    )
    numbered = lines[:body_start]
    numbered += [f"{i + 1:5d}: {line}" for i, line in enumerate(lines[body_start:])]
    print("\n".join(numbered), file=sys.stderr)


def build_program(backend, vertex_source, fragment_source, path=""):
    """Compile both stages and link them into a program.

    Raises ``ShaderBuildError`` on failure. No handles are left behind
    in that case.
    """
    vertex, log = backend.compile_stage(ShaderStage.vertex, vertex_source)
    if vertex is None:
        if PRINT_GLSL_ON_ERROR:
            _print_source_on_error(vertex_source)
        raise ShaderBuildError(
            f'Error compiling vertex shader in file "{path}"', path, log
        )

    try:
        fragment, log = backend.compile_stage(ShaderStage.fragment, fragment_source)
        if fragment is None:
            if PRINT_GLSL_ON_ERROR:
                _print_source_on_error(fragment_source)
            raise ShaderBuildError(
                f'Error compiling fragment shader in file "{path}"', path, log
            )
        try:
            program, log = backend.link_program(vertex, fragment)
        finally:
            backend.delete_stage(fragment)
    finally:
        backend.delete_stage(vertex)

    if program is None:
        raise ShaderBuildError(
            f'Error linking shader program in file "{path}"', path, log
        )
    return program


def compose_stage_sources(source, default_version):
    """Get the (vertex, fragment) source for a single-file shader.

    Parameter pragmas and the version line are taken out of the source. The
    version line (or ``default_version``) is put in the stage header.
    """
    body, _ = extract_parameters(source)
    body, version_line = extract_version(body, default_version)
    vertex_source = stage_header(version_line, ShaderStage.vertex) + body
    fragment_source = stage_header(version_line, ShaderStage.fragment) + body
    return vertex_source, fragment_source


def assemble_pass(backend, definition, default_version):
    """Compile a ``PassDefinition`` into a ``CompiledPass``.

    Raises ``ShaderBuildError`` when a stage does not compile or the
    program does not link.
    """
    vertex_source, fragment_source = compose_stage_sources(
        definition.source, default_version
    )
    program = build_program(backend, vertex_source, fragment_source, definition.path)
    try:
        compiled = CompiledPass(backend, program, definition.path, definition.parameters)
    except Exception:
        backend.delete_program(program)
        raise
    logger.info(f"Built shader pass {compiled!r}")
    return compiled


def assemble_default_pass(backend, version):
    """Compile the built-in pass that just samples the input texture."""
    program = build_program(
        backend,
        version + "\n" + DEFAULT_VERTEX_SHADER,
        version + "\n" + DEFAULT_FRAGMENT_SHADER,
    )
    return CompiledPass(backend, program, "")
