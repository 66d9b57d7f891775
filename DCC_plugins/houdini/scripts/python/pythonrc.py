"""
Houdini pythonrc.py - HipPipe Bootstrap

Houdini runs this file on startup when DCC_plugins/houdini is on HOUDINI_PATH.
It performs minimal bootstrapping: adds the HipPipe path to sys.path and
triggers the main initialization.

Installation:
    Add the DCC_plugins/houdini directory to HOUDINI_PATH, e.g. in houdini.env:
        HOUDINI_PATH = /path/to/repo/DCC_plugins/houdini;&
"""

import sys
from pathlib import Path


def bootstrap_hippipe():
    """Add HipPipe to sys.path and trigger initialization."""
    # DCC_plugins/houdini/scripts/python/pythonrc.py -> repository root
    plugin_dir = Path(__file__).parent.resolve()
    root_dir = plugin_dir.parents[3]

    root_path = str(root_dir)
    if root_path not in sys.path:
        sys.path.insert(0, root_path)

    try:
        from HipPipe.houdini.startup import init
        init.initialize()
    except Exception as e:
        print(f"[HipPipe] Failed to initialize: {e}")
        import traceback
        traceback.print_exc()


# Execute bootstrap on import
bootstrap_hippipe()
