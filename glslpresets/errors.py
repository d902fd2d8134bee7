"""
The exceptions raised while loading and building shader passes.

All of them derive from ``ShaderPresetError``, so a caller that wants to
show a message for any failed load can catch that one class.
"""


class ShaderPresetError(Exception):
    """Base class for errors while loading or building a shader pipeline."""

    def __init__(self, message, path=""):
        super().__init__(message)
        self.path = path


class ResourceError(ShaderPresetError):
    """A resource (shader or preset file) could not be read."""


class FormatError(ShaderPresetError):
    """A preset document is structurally invalid."""


class ShaderBuildError(ShaderPresetError):
    """Compiling or linking a pass failed. The backend log is in ``log``."""

    def __init__(self, message, path="", log=""):
        super().__init__(message, path)
        self.log = log

    def __str__(self):
        message = super().__str__()
        if self.log:
            return f"{message}:\n\n {self.log}"
        return message
