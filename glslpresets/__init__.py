"""Shader presets and render options for GLSL post-processing pipelines."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info
from . import utils

from .errors import ShaderPresetError, ResourceError, FormatError, ShaderBuildError
from .resources import read_text_file
from .shader import (
    ParameterDeclaration,
    extract_parameters,
    extract_version,
    CompiledPass,
    assemble_pass,
    assemble_default_pass,
)
from .preset import PassDefinition, Preset, load_preset, load_pass_definitions
from .backends import ShaderBackend
from .config import VideoConfig, load_config, save_config
from .options import RenderOptions

from .utils import enums, logger
from .utils.enums import *
