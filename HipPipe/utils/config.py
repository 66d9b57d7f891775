"""
HipPipe Configuration

Settings are read from environment variables so they can be set per show or
per artist in the Houdini launch environment (houdini.env, wrappers, etc).

Environment variables:
    HIPPIPE_HIP_EXTENSIONS: Comma separated project file extensions (default "hip,hipnc")
    HIPPIPE_LOG_LEVEL: Logging level name (default "INFO")
    HIPPIPE_SHELF_NAME: Name of the shelf created on startup (default "hippipe")
"""

import logging
import os
from typing import Tuple


HIP_EXTENSIONS_ENV = "HIPPIPE_HIP_EXTENSIONS"
LOG_LEVEL_ENV = "HIPPIPE_LOG_LEVEL"
SHELF_NAME_ENV = "HIPPIPE_SHELF_NAME"

DEFAULT_HIP_EXTENSIONS = ("hip", "hipnc")
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SHELF_NAME = "hippipe"


def get_hip_extensions() -> Tuple[str, ...]:
    """
    Get the recognized Houdini project file extensions.

    With HIPPIPE_HIP_EXTENSIONS set to "hip,hipnc,hiplc" in the launch
    environment this returns ('hip', 'hipnc', 'hiplc').

    Returns:
        Tuple of extensions without the leading dot, e.g. ('hip', 'hipnc')
    """
    value = os.environ.get(HIP_EXTENSIONS_ENV, "")
    extensions = tuple(
        ext.strip().lstrip(".") for ext in value.split(",")
        if ext.strip().lstrip(".")
    )
    return extensions or DEFAULT_HIP_EXTENSIONS


def get_log_level() -> int:
    """
    Get the logging level for HipPipe loggers.

    Unknown level names fall back to INFO.

    Returns:
        int: logging level constant
    """
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level


def get_shelf_name() -> str:
    """Get the name of the HipPipe shelf."""
    return os.environ.get(SHELF_NAME_ENV, "").strip() or DEFAULT_SHELF_NAME
