"""
HipPipe Houdini Initialization

Main initialization module that sets up the HipPipe environment within Houdini.
This module handles:
- Environment validation
- Tool discovery and registration
- Shelf setup
"""

import sys
from pathlib import Path
from typing import List, Dict, Any

from HipPipe.utils.config import get_shelf_name
from HipPipe.utils.host import get_houdini_version


# Track initialization state
_initialized = False
_registered_tools = []

TOOLS_PACKAGE = "HipPipe.houdini.tools"


def initialize():
    """
    Main initialization function called from DCC_plugins/houdini/scripts/python/pythonrc.py

    This function orchestrates the entire startup sequence for HipPipe in Houdini.
    """
    global _initialized

    if _initialized:
        print("[HipPipe] Already initialized, skipping...")
        return

    print("[HipPipe] Initializing HipPipe for Houdini...")

    validate_environment()
    discover_and_register_tools()
    setup_shelf()

    _initialized = True
    print("[HipPipe] Initialization complete!")


def validate_environment():
    """
    Validate that the Houdini environment is properly set up.

    Checks:
    - Required Python version
    - Houdini is available
    - HipPipe paths are accessible
    """
    print("[HipPipe] Validating environment...")

    if sys.version_info < (3, 9):
        print("[HipPipe] WARNING: Python 3.9+ recommended")

    version = get_houdini_version()
    if version is None:
        print("[HipPipe] WARNING: Houdini module not available (may be expected in some contexts)")
    else:
        print(f"[HipPipe] Houdini version: {'.'.join(str(v) for v in version)}")

    hippipe_root = Path(__file__).parent.parent.parent
    required_dirs = ['core', 'houdini/tools', 'houdini/widgets', 'utils']

    for dir_path in required_dirs:
        if not (hippipe_root / dir_path).exists():
            print(f"[HipPipe] WARNING: Missing directory: {dir_path}")

    print("[HipPipe] Environment validation complete")


def discover_and_register_tools():
    """
    Discover and register all available HipPipe tools.

    Scans the HipPipe/houdini/tools directory for tool modules and registers them.
    Tools should implement a register() function to be auto-loaded.
    """
    print("[HipPipe] Discovering tools...")

    tools_dir = Path(__file__).parent.parent / "tools"

    if not tools_dir.exists():
        print("[HipPipe] No tools directory found")
        return

    tool_modules = sorted(
        f.stem for f in tools_dir.glob("*.py")
        if f.is_file() and f.stem != "__init__"
    )

    if not tool_modules:
        print("[HipPipe] No tools found in tools directory")
        return

    registered_names = {tool['name'] for tool in _registered_tools}

    for tool_name in tool_modules:
        if tool_name in registered_names:
            continue

        try:
            print(f"[HipPipe] Loading tool: {tool_name}")
            module = __import__(
                f"{TOOLS_PACKAGE}.{tool_name}",
                fromlist=[tool_name]
            )

            if hasattr(module, 'register'):
                tool_info = module.register()
                _registered_tools.append({
                    'name': tool_name,
                    'module': module,
                    'info': tool_info
                })
                print(f"[HipPipe] Registered tool: {tool_name}")
            else:
                print(f"[HipPipe] WARNING: Tool {tool_name} has no register() function")

        except Exception as e:
            print(f"[HipPipe] ERROR loading tool {tool_name}: {e}")
            import traceback
            traceback.print_exc()

    print(f"[HipPipe] Registered {len(_registered_tools)} tool(s)")


def _tool_script(tool_name):
    return (
        "from HipPipe.houdini.startup import init\n"
        f"init.run_tool({tool_name!r})\n"
    )


def setup_shelf():
    """
    Set up the HipPipe shelf in Houdini.

    Creates (or refreshes) the HipPipe shelf with one tool per registered tool.
    """
    print("[HipPipe] Setting up shelf...")

    try:
        import hou
    except ImportError:
        print("[HipPipe] Houdini not available, skipping shelf setup")
        return

    try:
        shelf_name = get_shelf_name()
        shelf = hou.shelves.shelves().get(shelf_name)
        if shelf is None:
            shelf = hou.shelves.newShelf(name=shelf_name, label="HipPipe")

        shelf_tools = []
        for tool in _registered_tools:
            tool_info = tool.get('info', {})

            if not tool_info or not tool_info.get('action'):
                continue

            label = tool_info.get('menu_name', tool['name'])
            shelf_tool = hou.shelves.tool(f"{shelf_name}_{tool['name']}")
            if shelf_tool is None:
                shelf_tool = hou.shelves.newTool(
                    name=f"{shelf_name}_{tool['name']}",
                    label=label,
                    script=_tool_script(tool['name']),
                    language=hou.scriptLanguage.Python
                )
            shelf_tools.append(shelf_tool)
            print(f"[HipPipe] Added shelf tool: {label}")

        about_tool = hou.shelves.tool(f"{shelf_name}_about")
        if about_tool is None:
            about_tool = hou.shelves.newTool(
                name=f"{shelf_name}_about",
                label="About HipPipe",
                script="from HipPipe.houdini.startup import init\ninit.show_about()\n",
                language=hou.scriptLanguage.Python
            )
        shelf_tools.append(about_tool)

        shelf.setTools(shelf_tools)
        print("[HipPipe] Shelf setup complete")

    except Exception as e:
        print(f"[HipPipe] ERROR setting up shelf: {e}")
        import traceback
        traceback.print_exc()


def run_tool(tool_name):
    """
    Run the action of a registered tool.

    Args:
        tool_name: Name of the tool module, e.g. 'version_up'

    Returns:
        Whatever the tool action returns

    Raises:
        KeyError: If no tool with that name is registered
    """
    if not _registered_tools:
        discover_and_register_tools()

    for tool in _registered_tools:
        if tool['name'] == tool_name:
            return tool['info']['action']()

    raise KeyError(f"No HipPipe tool registered as {tool_name!r}")


def show_about():
    """Display information about HipPipe."""
    try:
        import hou
        from HipPipe import __version__

        message = f"""HipPipe Houdini Pipeline
Version: {__version__}

Versioned project file tools for Houdini.

Registered Tools: {len(_registered_tools)}
"""
        hou.ui.displayMessage(message, title="About HipPipe")
    except Exception as e:
        print(f"[HipPipe] Error showing about: {e}")


def get_registered_tools() -> List[Dict[str, Any]]:
    """
    Get list of registered tools.

    Returns:
        List of dictionaries containing tool information
    """
    return _registered_tools.copy()


def is_initialized() -> bool:
    """
    Check if HipPipe has been initialized.

    Returns:
        True if initialized, False otherwise
    """
    return _initialized
