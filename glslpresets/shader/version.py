"""
Extraction of the ``#version`` directive from shader source.

The directive must be the first line of a compiled stage, but the stage
header is prepended to the source. So the directive is taken out of the
source and put at the top of the header instead.
"""

import re
import logging


logger = logging.getLogger("glslpresets")

re_version = re.compile(r"^[ \t]*(#version[ \t]+\S+[^\n]*)(?:\n|\Z)", re.MULTILINE)


def extract_version(source, default):
    """Take the first ``#version`` line out of the source.

    Returns a tuple ``(stripped_source, version_line)``. If the source has
    no version line, the source is returned unchanged together with ``default``.

    Only the first version line is removed. Any later ones stay in the
    source, and will likely make the compiler complain.
    """
    if not isinstance(source, str):
        raise TypeError(f"Shader source must be a str, not {type(source).__name__}")

    match = re_version.search(source)
    if match is None:
        return source, default

    version_line = match.group(1).rstrip()
    stripped = source[: match.start()] + source[match.end() :]

    if re_version.search(stripped):
        logger.debug(f"Source has more than one version line, kept all but {version_line!r}")

    return stripped, version_line
