"""
This subpackage turns shader source into compiled passes.

Shader files are single-source: the same text is compiled as the vertex
and as the fragment stage, with a header that defines ``VERTEX`` or
``FRAGMENT`` so the source can select its stage. Before compiling,
``#pragma parameter`` lines are removed, and the ``#version`` line is moved
to the top of the header.
"""

from .pragmas import ParameterDeclaration, extract_parameters  # noqa
from .version import extract_version  # noqa
from .templating import stage_header  # noqa
from .assembler import (  # noqa
    CompiledPass,
    assemble_pass,
    assemble_default_pass,
    compose_stage_sources,
)
