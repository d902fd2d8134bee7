"""
Loading shader presets. A preset resource is either a JSON document that
lists the passes, or a single GLSL file::

    {
        "shaders": [
            {"path": "shaders/crt.glsl", "parameters": {"CURVATURE": 0.5}},
            {"path": "shaders/sharpen.glsl"}
        ]
    }

Anything that is not a JSON object with a "shaders" list is taken to be
the source of a single shader.
"""

import json
import math
import numbers
import logging

from .errors import FormatError
from .resources import read_text_file
from .shader.pragmas import extract_parameters


logger = logging.getLogger("glslpresets")


class PassDefinition:
    """The source and settings of one pass, as loaded from a resource.

    Parameters
    ----------
    source : str
        The raw shader source, including pragma and version lines.
    path : str
        Where the source came from. Empty for the built-in default shader.
    parameters : iterable of (str, float)
        Values for the parameter uniforms, in order.
    """

    __slots__ = ["source", "path", "parameters"]

    def __init__(self, source, path="", parameters=()):
        self.source = source
        self.path = str(path)
        self.parameters = [(str(name), float(value)) for name, value in parameters]

    def __repr__(self):
        return f"<PassDefinition {self.path!r} with {len(self.parameters)} parameters>"

    def declarations(self):
        """Get the ``ParameterDeclaration`` list from the pragmas in the source."""
        return extract_parameters(self.source)[1]


class Preset:
    """The passes loaded from a preset or shader resource."""

    def __init__(self, path, passes, is_document):
        self._path = str(path)
        self._passes = list(passes)
        self._is_document = bool(is_document)

    def __repr__(self):
        kind = "document" if self._is_document else "shader"
        return f"<Preset {kind} {self._path!r} with {len(self._passes)} passes>"

    @property
    def path(self):
        return self._path

    @property
    def passes(self):
        """The list of ``PassDefinition`` objects, in render order."""
        return list(self._passes)

    @property
    def is_document(self):
        """Whether the resource was a multi-pass JSON document."""
        return self._is_document

    def declarations(self):
        """The catalog of declared parameters, a dict mapping name to
        ``ParameterDeclaration``. A name declared by multiple passes maps to
        the declaration of the last pass.
        """
        catalog = {}
        for definition in self._passes:
            for declaration in definition.declarations():
                catalog[declaration.name] = declaration
        return catalog


def _parse_document(text):
    """Get the list of shader entries, or None if this is not a preset document."""
    try:
        document = json.loads(text)
    except (ValueError, RecursionError):
        return None
    if not isinstance(document, dict):
        return None
    shaders = document.get("shaders", None)
    if not isinstance(shaders, list):
        return None
    return shaders


def _parse_parameters(entry, path):
    parameters = entry.get("parameters", None)
    if parameters is None:
        return []
    if not isinstance(parameters, dict):
        raise FormatError(
            f'Parameters of shader "{entry["path"]}" in "{path}" must be an object',
            path,
        )
    result = []
    for name, value in parameters.items():
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise FormatError(
                f'Parameter "{name}" in "{path}" must be a number, not {value!r}',
                path,
            )
        try:
            value = float(value)
        except OverflowError:
            value = math.inf
        if not math.isfinite(value):
            raise FormatError(
                f'Parameter "{name}" in "{path}" must be a finite number', path
            )
        result.append((name, value))
    return result


def load_preset(path):
    """Load the passes described by a preset or shader resource.

    Parameters
    ----------
    path : str | os.PathLike
        The location of a JSON preset document or a GLSL file.

    Returns
    -------
    preset : Preset
        The loaded pass definitions.

    Raises
    ------
    ResourceError
        If the resource, or a shader it refers to, cannot be read.
    FormatError
        If the resource is a preset document with an invalid entry.
    """
    path = str(path)
    text = read_text_file(path)

    shaders = _parse_document(text)
    if shaders is None:
        return Preset(path, [PassDefinition(text, path)], False)

    if not shaders:
        raise FormatError(f'Preset "{path}" does not list any shaders', path)

    passes = []
    for index, entry in enumerate(shaders):
        if not isinstance(entry, dict):
            raise FormatError(f'Shader entry {index} in "{path}" must be an object', path)
        shader_path = entry.get("path", None)
        if not isinstance(shader_path, str) or not shader_path:
            raise FormatError(f'Shader entry {index} in "{path}" has no path', path)
        parameters = _parse_parameters(entry, path)
        source = read_text_file(shader_path)
        passes.append(PassDefinition(source, shader_path, parameters))

    logger.debug(f"Loaded preset {path!r} with {len(passes)} passes")
    return Preset(path, passes, True)


def load_pass_definitions(path):
    """Get the list of ``PassDefinition`` for a preset or shader resource."""
    return load_preset(path).passes
