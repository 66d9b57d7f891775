"""
HipPipe Logging

All HipPipe loggers live under a single "HipPipe" parent logger which is
configured once with a console handler. Tools get their own child logger:

    >>> logger = getLogger("VersionUp")
    >>> logger.info("Saved scene")
    [HipPipe] INFO HipPipe.VersionUp: Saved scene
"""

import logging

from HipPipe.utils.config import get_log_level


ROOT_LOGGER_NAME = "HipPipe"
LOG_FORMAT = "[HipPipe] %(levelname)s %(name)s: %(message)s"


def _configure_root_logger():
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Houdini may reload modules, only attach the handler once
    if not any(getattr(h, "_hippipe", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._hippipe = True
        root.addHandler(handler)
        root.propagate = False

    root.setLevel(get_log_level())
    return root


def getLogger(name=None):
    """
    Get a HipPipe logger.

    Args:
        name (str, optional): Child logger name, e.g. "VersionUp". If None,
            the HipPipe root logger is returned.

    Returns:
        logging.Logger: Configured logger
    """
    root = _configure_root_logger()
    if not name:
        return root
    return root.getChild(name)
