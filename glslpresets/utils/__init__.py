"""
Utility functions for glslpresets.

.. currentmodule:: glslpresets.utils

.. autosummary::
    :toctree: utils/

    enums

"""

import os
import logging

from . import enums  # noqa: F401


logger = logging.getLogger("glslpresets")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("GLSLPRESETS_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except (TypeError, ValueError):
            logger.warning(f"Invalid glslpresets log level: {level}")


_set_log_level()
