"""
Reading shader and preset resources from disk.
"""

from .errors import ResourceError


def read_text_file(path):
    """Read the full content of a text resource.

    Parameters
    ----------
    path : str | os.PathLike
        The location of the resource.

    Returns
    -------
    text : str
        The decoded content. Bytes that are not valid UTF-8 are replaced
        rather than rejected, shader files come from many editors.

    Raises
    ------
    ResourceError
        When the resource cannot be opened or read.
    """
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as err:
        reason = err.strerror or str(err)
        raise ResourceError(f'Error opening "{path}": {reason}', str(path)) from err
    return data.decode("utf-8", errors="replace")
