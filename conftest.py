"""Global configuration for pytest"""

import re
import logging

import pytest

from glslpresets.backends import ShaderBackend


re_uniform = re.compile(r"\buniform\s+\w+\s+(\w+)\s*;")
re_attribute = re.compile(r"^\s*(?:in|attribute)\s+\w+\s+(\w+)\s*;", re.MULTILINE)


class FakeBackend(ShaderBackend):
    """A backend that records what it is asked to compile.

    A stage fails to compile when its source contains ``VERTEX_ERROR`` or
    ``FRAGMENT_ERROR`` (matching the stage), linking fails when a source
    contains ``LINK_ERROR``. Uniforms and attributes are found with a regexp.
    """

    def __init__(self):
        self.compiled = []  # (stage, source) tuples
        self.live_stages = {}
        self.live_programs = {}
        self._count = 0

    def _new_handle(self):
        self._count += 1
        return self._count

    def compile_stage(self, stage, source):
        self.compiled.append((stage, source))
        if f"{stage}_ERROR" in source:
            return None, f"0:1({stage}): error: syntax error"
        handle = self._new_handle()
        self.live_stages[handle] = (stage, source)
        return handle, ""

    def link_program(self, vertex, fragment):
        vertex_source = self.live_stages[vertex][1]
        fragment_source = self.live_stages[fragment][1]
        if "LINK_ERROR" in vertex_source + fragment_source:
            return None, "error: linking failed"
        program = self._new_handle()
        self.live_programs[program] = (vertex_source, fragment_source)
        return program, ""

    def attribute_location(self, program, name):
        vertex_source = self.live_programs[program][0]
        names = re_attribute.findall(vertex_source)
        return names.index(name) if name in names else None

    def uniform_location(self, program, name):
        vertex_source, fragment_source = self.live_programs[program]
        names = list(dict.fromkeys(re_uniform.findall(vertex_source + fragment_source)))
        return names.index(name) if name in names else None

    def delete_stage(self, handle):
        del self.live_stages[handle]

    def delete_program(self, program):
        del self.live_programs[program]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture(autouse=True)
def glslpresets_debug_logging(caplog):
    """Make the package log records visible to ``caplog`` in every test."""
    caplog.set_level(logging.DEBUG, logger="glslpresets")
