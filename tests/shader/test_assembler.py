from glslpresets import ShaderBuildError
from glslpresets.preset import PassDefinition
from glslpresets.shader import (
    assemble_pass,
    assemble_default_pass,
    compose_stage_sources,
    stage_header,
)
from glslpresets.shader.assembler import DEFAULT_VERTEX_SHADER
from glslpresets.utils.enums import ShaderStage
from pytest import raises
import numpy as np


DEFAULT = "#version 130"

SHADER = """#version 330 core
#pragma parameter BRIGHTNESS "Brightness" 1.0 0.0 2.0 0.1
#pragma parameter UNUSED "Not used" 1.0 0.0 2.0
#if defined(VERTEX)
in vec4 VertexCoord;
in vec4 TexCoord;
uniform mat4 MVPMatrix;
void main() { gl_Position = MVPMatrix * VertexCoord; }
#elif defined(FRAGMENT)
uniform float BRIGHTNESS;
uniform vec2 InputSize;
uniform int FrameCount;
void main() {}
#endif
"""


def test_stage_header():
    header = stage_header("#version 330", ShaderStage.vertex)
    assert header == (
        "#version 330\n"
        "#extension GL_ARB_shading_language_420pack : enable\n"
        "#define VERTEX\n"
        "#define PARAMETER_UNIFORM\n"
        "#line 1\n"
    )
    header = stage_header("#version 330", ShaderStage.fragment)
    assert "#define FRAGMENT\n" in header
    assert "VERTEX" not in header


def test_compose_stage_sources():
    vertex, fragment = compose_stage_sources(SHADER, DEFAULT)

    # The version from the source goes first
    assert vertex.startswith("#version 330 core\n")
    assert fragment.startswith("#version 330 core\n")
    assert vertex.count("#version") == 1

    # The pragmas are gone
    assert "#pragma" not in vertex
    assert "#pragma" not in fragment

    # The body is the same for both stages, after the header
    vertex_header, _, vertex_body = vertex.partition("#line 1\n")
    fragment_header, _, fragment_body = fragment.partition("#line 1\n")
    assert vertex_body == fragment_body
    assert vertex_body.startswith("#if defined(VERTEX)")
    assert "#define VERTEX" in vertex_header
    assert "#define FRAGMENT" in fragment_header


def test_compose_stage_sources_default_version():
    body = "void main() {}\n"
    vertex, _ = compose_stage_sources(body, DEFAULT)
    assert vertex.startswith(DEFAULT + "\n")
    assert vertex.endswith("#line 1\n" + body)


def test_assemble_pass(backend):
    definition = PassDefinition(
        SHADER, "crt.glsl", [("UNUSED", 3.0), ("BRIGHTNESS", 1.5), ("MISSING", 2)]
    )
    compiled = assemble_pass(backend, definition, DEFAULT)

    assert compiled.path == "crt.glsl"
    assert [stage for stage, _ in backend.compiled] == ["VERTEX", "FRAGMENT"]

    # Stages are cleaned up, the program is alive
    assert backend.live_stages == {}
    assert list(backend.live_programs) == [compiled.program]

    # Standard bindings
    assert compiled.vertex_coord == 0
    assert compiled.tex_coord == 1
    assert compiled.color is None
    assert compiled.mvp_matrix is not None
    assert compiled.input_size is not None
    assert compiled.frame_count is not None
    assert compiled.output_size is None
    assert compiled.texture_size is None
    assert compiled.binding("MVPMatrix") == compiled.mvp_matrix

    # Only parameters that are uniforms in the program
    location = backend.uniform_location(compiled.program, "BRIGHTNESS")
    assert compiled.parameters == [(location, 1.5)]
    assert isinstance(compiled.parameters[0][1], np.float32)


def test_assemble_pass_parameter_order(backend):
    code = "uniform float b;\nuniform float a;\nuniform float c;\nvoid main() {}\n"
    parameters = [("c", 3), ("x", 0), ("a", 1), ("b", 2), ("a", 4)]
    compiled = assemble_pass(backend, PassDefinition(code, "p.glsl", parameters), DEFAULT)
    loc = lambda name: backend.uniform_location(compiled.program, name)  # noqa
    assert compiled.parameters == [
        (loc("c"), 3),
        (loc("a"), 1),
        (loc("b"), 2),
        (loc("a"), 4),
    ]


def test_assemble_pass_vertex_error(backend):
    definition = PassDefinition("VERTEX_ERROR\n", "bad.glsl")
    with raises(ShaderBuildError) as err:
        assemble_pass(backend, definition, DEFAULT)
    assert err.value.path == "bad.glsl"
    assert "vertex" in str(err.value)
    assert "syntax error" in err.value.log
    assert len(backend.compiled) == 1
    assert backend.live_stages == {}
    assert backend.live_programs == {}


def test_assemble_pass_fragment_error(backend):
    definition = PassDefinition("FRAGMENT_ERROR\n", "bad.glsl")
    with raises(ShaderBuildError) as err:
        assemble_pass(backend, definition, DEFAULT)
    assert "fragment" in str(err.value)
    assert backend.live_stages == {}
    assert backend.live_programs == {}


def test_assemble_pass_link_error(backend):
    definition = PassDefinition("// LINK_ERROR\n", "bad.glsl")
    with raises(ShaderBuildError) as err:
        assemble_pass(backend, definition, DEFAULT)
    assert "linking" in str(err.value)
    assert err.value.log == "error: linking failed"
    assert backend.live_stages == {}
    assert backend.live_programs == {}


def test_assemble_default_pass(backend):
    compiled = assemble_default_pass(backend, DEFAULT)
    assert compiled.path == ""
    assert compiled.parameters == []
    vertex_source = backend.compiled[0][1]
    assert vertex_source == DEFAULT + "\n" + DEFAULT_VERTEX_SHADER
    assert "#extension" not in vertex_source
    assert compiled.vertex_coord == 0
    assert compiled.tex_coord == 1


def test_compiled_pass_release(backend):
    compiled = assemble_default_pass(backend, DEFAULT)
    assert not compiled.released
    compiled.release()
    assert compiled.released
    assert compiled.program is None
    assert backend.live_programs == {}
    compiled.release()  # no-op
