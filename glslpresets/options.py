"""
The render options: frame pacing, vsync, texture filtering, and the
pipeline of shader passes.
"""

import logging

from .backends import get_default_backend
from .config import VideoConfig
from .errors import ResourceError, FormatError, ShaderBuildError
from .preset import PassDefinition, load_pass_definitions
from .shader.assembler import assemble_pass, assemble_default_pass
from .utils.enums import FilterMode, RenderBehavior


logger = logging.getLogger("glslpresets")

DEFAULT_GLSL_VERSION = "#version 130"


def _filter_from_method(method):
    return FilterMode.nearest if method == 0 else FilterMode.linear


class RenderOptions:
    """The options for the renderer, plus the list of compiled shader passes.

    Parameters
    ----------
    config : VideoConfig
        The (shared) video configuration. The filter mode is always read
        from here, because it is governed by the host application.
    load_config : bool
        Whether to initialize the options (and shader pipeline) from ``config``.
        If False, the pipeline starts out empty.
    glsl_version : str
        The version directive for shaders that do not specify one.
    backend : ShaderBackend | None
        The compilation backend. Default is the OpenGL backend.
    """

    def __init__(
        self,
        config=None,
        load_config=True,
        glsl_version=DEFAULT_GLSL_VERSION,
        *,
        backend=None,
    ):
        self._config = config if config is not None else VideoConfig()
        self._glsl_version = glsl_version
        self._backend = backend

        self._render_behavior = RenderBehavior.sync_with_video
        self._framerate = -1
        self._vsync = False
        self._filter = _filter_from_method(self._config.filter_method)
        self._shaders = []

        if not load_config:
            return

        self._vsync = self._config.vsync != 0
        self._framerate = self._config.framerate
        if self._framerate == -1:
            self._render_behavior = RenderBehavior.sync_with_video
        else:
            self._render_behavior = RenderBehavior.target_framerate

        shader_path = self._config.shader_path
        if not shader_path:
            self.add_default_shader()
            return

        try:
            self.add_shader(shader_path)
        except (ResourceError, FormatError, ShaderBuildError) as err:
            logger.warning(f"Falling back to the default shader: {err}")
            self.add_default_shader()

    def __repr__(self):
        return (
            f"<RenderOptions {self._render_behavior} framerate={self._framerate} "
            f"vsync={self._vsync} with {len(self._shaders)} passes>"
        )

    @property
    def backend(self):
        """The compilation backend."""
        if self._backend is None:
            self._backend = get_default_backend()
        return self._backend

    @property
    def config(self):
        """The ``VideoConfig`` that these options are loaded from and saved to."""
        return self._config

    @property
    def glsl_version(self):
        """The version directive for shaders that do not specify one."""
        return self._glsl_version

    @property
    def render_behavior(self):
        """How frames are paced. See :obj:`glslpresets.utils.enums.RenderBehavior`."""
        return self._render_behavior

    @render_behavior.setter
    def render_behavior(self, value):
        if value not in RenderBehavior:
            raise ValueError(
                f"RenderOptions.render_behavior must be a string in {RenderBehavior}, not {repr(value)}"
            )
        self._render_behavior = value

    @property
    def framerate(self):
        """The target framerate, used when render_behavior is 'target_framerate'."""
        return self._framerate

    @framerate.setter
    def framerate(self, value):
        self._framerate = int(value)

    @property
    def vsync(self):
        """Whether to wait for vertical sync."""
        return self._vsync

    @vsync.setter
    def vsync(self, value):
        self._vsync = bool(value)

    @property
    def filter(self):
        """How the output is filtered. See :obj:`glslpresets.utils.enums.FilterMode`.

        The filter is controlled by the host application, so this always
        reflects the current config. A value that is set is only applied
        to the config by ``save()``.
        """
        return _filter_from_method(self._config.filter_method)

    @filter.setter
    def filter(self, value):
        if value not in FilterMode:
            raise ValueError(
                f"RenderOptions.filter must be a string in {FilterMode}, not {repr(value)}"
            )
        self._filter = value

    @property
    def shaders(self):
        """The tuple of ``CompiledPass`` objects, in render order."""
        return tuple(self._shaders)

    def _build_passes(self, definitions):
        # Build all or nothing
        passes = []
        try:
            for definition in definitions:
                passes.append(
                    assemble_pass(self.backend, definition, self._glsl_version)
                )
        except Exception:
            for compiled in passes:
                compiled.release()
            raise
        return passes

    def add_shader(self, path):
        """Load the shader or preset at the given path and append its passes.

        If any pass fails to load or build, no passes are added and the
        error is raised.
        """
        definitions = load_pass_definitions(path)
        self._shaders.extend(self._build_passes(definitions))

    def add_shader_source(self, source, path="", parameters=()):
        """Build a pass from GLSL source and append it.

        The parameters are (name, value) pairs for the parameter uniforms.
        """
        definition = PassDefinition(source, path, parameters)
        self._shaders.extend(self._build_passes([definition]))

    def add_default_shader(self):
        """Append the built-in pass that just samples the input texture."""
        self._shaders.append(assemble_default_pass(self.backend, self._glsl_version))

    def replace_shaders(self, path):
        """Replace the whole pipeline with the passes loaded from path.

        The current passes are only released when all new passes are built.
        On failure, the current pipeline is kept and the error is raised.
        """
        passes = self._build_passes(load_pass_definitions(path))
        old, self._shaders = self._shaders, passes
        for compiled in old:
            compiled.release()

    def save(self):
        """Write the options to the config.

        Only the path of the first pass is stored.
        """
        config = self._config
        config.vsync = 1 if self._vsync else 0
        if self._render_behavior == RenderBehavior.sync_with_video:
            config.framerate = -1
        else:
            config.framerate = self._framerate
        config.filter_method = 0 if self._filter == FilterMode.nearest else 1
        # TODO: store the paths of all passes once the config supports a list
        config.shader_path = self._shaders[0].path if self._shaders else ""

    def release(self):
        """Release all passes, leaving an empty pipeline."""
        shaders, self._shaders = self._shaders, []
        for compiled in shaders:
            compiled.release()
