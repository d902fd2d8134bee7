"""
The persisted video configuration. This is a flat set of fields that is
stored in a YAML file::

    vsync: 1
    framerate: 60
    filter_method: 1
    shader_path: shaders/crt.json

A framerate of -1 means that frames are synced with the emulated video.
"""

import logging
from pathlib import Path

import yaml


logger = logging.getLogger("glslpresets")


class VideoConfig:
    """The persisted video settings.

    The object is shared between the host application and ``RenderOptions``:
    the filter method in particular is governed by the host, and read
    from here whenever it is needed.
    """

    FIELDS = ("vsync", "framerate", "filter_method", "shader_path")

    def __init__(self, vsync=0, framerate=-1, filter_method=0, shader_path=""):
        self.vsync = int(vsync)
        self.framerate = int(framerate)
        self.filter_method = int(filter_method)
        self.shader_path = str(shader_path or "")

    def __repr__(self):
        fields = ", ".join(f"{key}={getattr(self, key)!r}" for key in self.FIELDS)
        return f"VideoConfig({fields})"

    def __eq__(self, other):
        if not isinstance(other, VideoConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return {key: getattr(self, key) for key in self.FIELDS}

    @classmethod
    def from_dict(cls, config_dict):
        """Create a VideoConfig from a dict. Unknown keys are ignored,
        missing keys get their default.
        """
        kwargs = {key: config_dict[key] for key in cls.FIELDS if key in config_dict}
        return cls(**kwargs)


def load_config(config_path):
    """Load the video configuration from a YAML file.

    Returns a ``VideoConfig`` with default values if the file does not
    exist or cannot be parsed.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        return VideoConfig()

    try:
        with open(config_path, "r") as f:
            config_dict = yaml.safe_load(f) or {}
        if not isinstance(config_dict, dict):
            raise ValueError("top level must be a mapping")
        return VideoConfig.from_dict(config_dict)
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        logger.warning(f"Failed to load video config from {config_path}: {e}")
        return VideoConfig()


def save_config(config, config_path):
    """Write the video configuration to a YAML file."""
    with open(config_path, "w") as f:
        yaml.safe_dump(config.to_dict(), f, sort_keys=False)
