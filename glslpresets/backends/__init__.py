"""
The compilation backends. A backend turns stage source text into a linked
program, and resolves attribute and uniform locations in that program.

Classes
-------

.. autoclass:: glslpresets.backends.ShaderBackend
    :members:

The ``GLShaderBackend`` (in ``glslpresets.backends.gl``) uses PyOpenGL and
needs a current OpenGL context. It is only imported when it is first needed,
so the rest of the package works without an OpenGL library.
"""


class ShaderBackend:
    """Base (abstract) backend class that all compilation backends inherit from.

    Handles are opaque to the rest of the package. A location is an int, or
    None when the name is not present in the program.
    """

    def compile_stage(self, stage, source):
        """Compile the source for the given ``ShaderStage``.

        Returns ``(handle, log)``; handle is None when compilation failed.
        """
        raise NotImplementedError()

    def link_program(self, vertex, fragment):
        """Link two compiled stages into a program.

        Returns ``(program, log)``; program is None when linking failed.
        """
        raise NotImplementedError()

    def attribute_location(self, program, name):
        raise NotImplementedError()

    def uniform_location(self, program, name):
        raise NotImplementedError()

    def delete_stage(self, handle):
        raise NotImplementedError()

    def delete_program(self, program):
        raise NotImplementedError()


def get_default_backend():
    """Get a new instance of the OpenGL backend."""
    from .gl import GLShaderBackend

    return GLShaderBackend()
