"""
The enums used in glslpresets. The enums are all available from the root
``glslpresets`` namespace.

.. currentmodule:: glslpresets.utils.enums

.. autosummary::
    :toctree: utils/enums

    FilterMode
    RenderBehavior
    ShaderStage

"""

from wgpu.utils import BaseEnum


__all__ = [
    "FilterMode",
    "RenderBehavior",
    "ShaderStage",
]


class Enum(BaseEnum):
    """Enum base class for glslpresets."""


class RenderBehavior(Enum):
    """The RenderBehavior enum specifies how frames are paced."""

    sync_with_video = None  #: Present a frame whenever the emulated video produces one.
    target_framerate = None  #: Present frames at a fixed rate (``RenderOptions.framerate``).


class FilterMode(Enum):
    """The FilterMode enum specifies how the output texture is sampled."""

    nearest = None  #: Nearest-neighbour sampling (filter method 0).
    linear = None  #: Bilinear sampling (filter method 1).


class ShaderStage(Enum):
    """The two stages of a pass. The value is the macro that is defined
    in the stage header, so a single source file can select its stage with
    ``#if defined(VERTEX)``.
    """

    vertex = "VERTEX"  #: The vertex stage.
    fragment = "FRAGMENT"  #: The fragment stage.
