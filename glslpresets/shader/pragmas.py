"""
Extraction of ``#pragma parameter`` declarations from shader source.

A parameter line has the form::

    #pragma parameter IDENTIFIER "DESCRIPTION" INITIAL MINIMUM MAXIMUM [STEP]

These lines expose tunable float uniforms to the configuration layer. They
are not valid GLSL for every driver, so they are removed before compiling.
"""

import re
import logging


logger = logging.getLogger("glslpresets")

_number = r"-?(?:\d+\.?\d*|\.\d+)"

# Field separators are horizontal whitespace only, so a match never spans lines.
re_parameter = re.compile(
    r"^[ \t]*#pragma[ \t]+parameter[ \t]+(\w+)[ \t]+\"(.+)\""
    rf"[ \t]+({_number})[ \t]+({_number})[ \t]+({_number})"
    rf"(?:[ \t]+({_number}))?[^\n]*(?:\n|\Z)",
    re.MULTILINE,
)


class ParameterDeclaration:
    """A parsed ``#pragma parameter`` line.

    Only the name (and the value given by a preset) is used to drive
    uniforms. The description and range are informational.
    """

    __slots__ = ["name", "description", "initial", "minimum", "maximum", "step"]

    def __init__(self, name, description, initial, minimum, maximum, step=None):
        self.name = name
        self.description = description
        self.initial = float(initial)
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self.step = None if step is None else float(step)

    def __repr__(self):
        step = "" if self.step is None else f" step={self.step}"
        return (
            f"<ParameterDeclaration {self.name} {self.description!r} "
            f"{self.initial} [{self.minimum}, {self.maximum}]{step}>"
        )

    def __eq__(self, other):
        if not isinstance(other, ParameterDeclaration):
            return NotImplemented
        return all(getattr(self, key) == getattr(other, key) for key in self.__slots__)


def extract_parameters(source):
    """Strip all parameter lines from the given source.

    Returns a tuple ``(stripped_source, declarations)``, where declarations
    is a list of ``ParameterDeclaration`` in source order. Lines that do not
    match the grammar (including malformed parameter pragmas) are left as-is.
    """
    if not isinstance(source, str):
        raise TypeError(f"Shader source must be a str, not {type(source).__name__}")

    declarations = []

    def _collect(match):
        name, description, initial, minimum, maximum, step = match.groups()
        declarations.append(
            ParameterDeclaration(name, description, initial, minimum, maximum, step)
        )
        logger.debug(f"Stripped parameter pragma for {name!r}")
        return ""

    stripped = re_parameter.sub(_collect, source)
    return stripped, declarations
